"""Общие вспомогательные функции: доступ к разрезу и расчётные характеристики слоёв."""

from collections.abc import Callable
from dataclasses import dataclass

from core.models import Foundation, SoilLayer
from core.tables import (
    DEFAULT_C_ALPHA,
    DEFAULT_CV,
    estimate_cc,
    estimate_cohesion,
    estimate_cr,
    estimate_gamma,
    estimate_modulus,
    estimate_phi,
)

DEFAULT_GAMMA = 18.0  # кН/м³, если над глубиной нет грунта


def resolve(measured: float | None, estimate: Callable[[], float]) -> float:
    """Лабораторное значение, если задано, иначе оценка по корреляции."""
    if measured is not None:
        return measured
    return estimate()


@dataclass(frozen=True)
class SoilParams:
    """Расчётные характеристики слоя (лаборатория или корреляции по N)."""

    gamma: float
    phi: float
    c: float
    E: float  # МПа
    nu: float | None
    cc: float
    cr: float
    cv: float
    c_alpha: float


def soil_params(layer: SoilLayer) -> SoilParams:
    """Разрешить все характеристики слоя поле за полем."""
    lab = layer.lab
    n, kind = layer.spt_n, layer.soil_type

    cc = resolve(lab.measured("cc"), lambda: estimate_cc(n))
    return SoilParams(
        gamma=resolve(lab.measured("unit_weight"), lambda: estimate_gamma(n, kind)),
        phi=resolve(lab.measured("friction_angle"), lambda: estimate_phi(n, kind)),
        c=resolve(lab.measured("cohesion"), lambda: estimate_cohesion(n, kind)),
        E=resolve(lab.measured("elastic_modulus"), lambda: estimate_modulus(n, kind)),
        nu=lab.measured("poisson_ratio"),
        cc=cc,
        cr=resolve(lab.measured("cr"), lambda: estimate_cr(cc)),
        cv=resolve(lab.measured("cv"), lambda: DEFAULT_CV),
        c_alpha=resolve(lab.measured("c_alpha"), lambda: DEFAULT_C_ALPHA),
    )


def get_layer_at_depth(layers: list[SoilLayer], depth: float) -> SoilLayer:
    """Слой, содержащий глубину depth; ниже разреза — последний слой."""
    for layer in layers:
        if layer.depth_from <= depth < layer.depth_to:
            return layer
    if depth < layers[0].depth_from:
        return layers[0]
    return layers[-1]


def average_gamma_above(layers: list[SoilLayer], depth: float) -> float:
    """Средневзвешенный удельный вес грунта от кровли разреза до глубины depth."""
    weight = 0.0
    covered = 0.0

    for layer in layers:
        if layer.depth_from >= depth:
            break
        h = min(layer.depth_to, depth) - layer.depth_from
        if h <= 0:
            continue
        weight += soil_params(layer).gamma * h
        covered += h

    return weight / covered if covered > 0 else DEFAULT_GAMMA


def effective_unit_weight(
    gamma: float, gw_depth: float, Df: float, B: float, gamma_w: float = 9.81
) -> tuple[float, float]:
    """Удельный вес выше и ниже подошвы с учётом грунтовых вод.

    УГВ ниже Df + B — без поправки; на уровне подошвы и выше — γ' = γ − γw (не меньше нуля);
    между Df и Df + B — линейная интерполяция.
    """
    gamma_sub = max(0.0, gamma - gamma_w)

    if gw_depth >= Df + B:
        return gamma, gamma
    if gw_depth <= Df:
        return gamma, gamma_sub

    factor = (gw_depth - Df) / B
    return gamma, gamma_sub + factor * (gamma - gamma_sub)


@dataclass(frozen=True)
class ConsolidatingLayer:
    """Часть глинистого слоя ниже подошвы фундамента."""

    layer: SoilLayer
    params: SoilParams
    z_top: float
    z_bot: float

    @property
    def H(self) -> float:
        return self.z_bot - self.z_top

    @property
    def z_mid(self) -> float:
        return 0.5 * (self.z_top + self.z_bot)

    @property
    def drainage_path(self) -> float:
        """Путь фильтрации при двустороннем дренировании, м."""
        return self.H / 2.0


def consolidating_layers(layers: list[SoilLayer], foundation: Foundation) -> list[ConsolidatingLayer]:
    """Глины и пылеватые грунты, лежащие (хотя бы частично) ниже подошвы."""
    Df = foundation.depth
    return [
        ConsolidatingLayer(
            layer=layer,
            params=soil_params(layer),
            z_top=max(layer.depth_from, Df),
            z_bot=layer.depth_to,
        )
        for layer in layers
        if layer.is_consolidating and layer.depth_to > Df
    ]


def time_to_consolidation(drainage_path: float, cv: float, time_factor: float) -> float:
    """Время достижения заданной степени консолидации t = Tv·Hdr²/cv, лет."""
    if cv <= 0:
        return 0.0
    return time_factor * drainage_path**2 / cv


def spread_stress(p: float, B: float, L: float, z: float) -> float:
    """Дополнительное напряжение по оси на глубине z от подошвы (распределение 2:1)."""
    if z <= 0:
        return p
    return p * B * L / ((B + z) * (L + z))
