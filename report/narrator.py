"""Внешний генератор текстового отчёта (HTTP, JSON)."""

import json
import logging
import os
from typing import Protocol

import requests

from core.models import CalculationOutput, Foundation, SoilLayer
from report.models import Locale, Narrative

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 8.0  # с

_LANGUAGE = {"en": "ENGLISH", "ar": "ARABIC"}


class Narrator(Protocol):
    def narrate(
        self,
        output: CalculationOutput,
        layers: list[SoilLayer],
        foundation: Foundation,
        locale: Locale,
    ) -> Narrative: ...


def build_prompt(
    output: CalculationOutput,
    layers: list[SoilLayer],
    foundation: Foundation,
    locale: Locale,
) -> str:
    """Запрос к генератору: исходные данные и уже вычисленные числа."""
    bc = output.bearing_capacity
    st = output.settlement
    fd = output.foundation_design
    soil = [
        {"type": L.soil_type, "depth": f"{L.depth_from:g}-{L.depth_to:g}m", "sptN": L.spt_n}
        for L in layers
    ]

    lines = [
        "Role: You are an Expert Geotechnical Report Writer.",
        "All numbers below are final and computed deterministically; do not change them.",
        "",
        f"Foundation: {foundation.model_dump_json(exclude_none=True)}",
        f"Soil Layers: {json.dumps(soil, ensure_ascii=False)}",
        "",
        f"- Bearing Capacity: q_ult = {bc.q_ult} kPa, q_allow = {bc.q_allow} kPa, FOS = {bc.factor_of_safety}",
        f"- Settlement: Total = {st.total} mm (Elastic: {st.elastic}, Primary: {st.primary}, "
        f"Secondary: {st.secondary}), Status: {st.status}",
        f"- Time to Max Settlement: {st.time_to_max_settlement}",
        f"- Foundation Design: Thickness = {fd.min_thickness} m, As = {fd.reinforcement_area} mm²/m, "
        f"Punching: {fd.punching_shear_check}",
    ]
    if output.slope_stability is not None:
        ss = output.slope_stability
        lines.append(f"- Slope Stability: FOS = {ss.factor_of_safety}, Status: {ss.status}")

    lines += [
        "",
        'Return ONLY valid JSON with keys: "doctorReport" (markdown report), '
        '"recommendations" ({"solutions": [3-5 strings], "riskLevel": "Low"|"Medium"|"High"}), '
        '"designNotes" (structural design rationale).',
        f"Write ALL text strictly in {_LANGUAGE[locale]}.",
    ]
    return "\n".join(lines)


def strip_code_fence(text: str) -> str:
    """Убрать обрамление ```json ... ``` из ответа модели."""
    text = text.strip()
    if text.startswith("```"):
        text = text.removeprefix("```json").removeprefix("```")
        text = text.removesuffix("```")
    return text.strip()


class HttpNarrator:
    """Генератор отчёта через HTTP-эндпоинт, возвращающий JSON с полем text."""

    def __init__(self, endpoint: str, api_key: str | None = None, timeout: float = DEFAULT_TIMEOUT):
        self.endpoint = endpoint
        self.api_key = api_key if api_key is not None else os.environ.get("NARRATOR_API_KEY")
        self.timeout = timeout

    def narrate(
        self,
        output: CalculationOutput,
        layers: list[SoilLayer],
        foundation: Foundation,
        locale: Locale,
    ) -> Narrative:
        if not self.api_key:
            raise ValueError("Не задан API-ключ генератора отчёта")

        resp = requests.post(
            self.endpoint,
            json={"prompt": build_prompt(output, layers, foundation, locale), "locale": locale},
            headers={"Authorization": f"Bearer {self.api_key}"},
            timeout=self.timeout,
        )
        resp.raise_for_status()

        payload = resp.json()
        text = payload.get("text") if isinstance(payload, dict) else None
        if not text:
            raise ValueError("Генератор вернул пустой ответ")

        logger.debug("Ответ генератора: %d символов", len(text))
        return Narrative.model_validate_json(strip_code_fence(text))
