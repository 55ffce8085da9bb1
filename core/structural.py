"""Конструирование плиты фундамента по ACI 318 (продавливание, изгиб, подбор арматуры)."""

import logging
import math

from core.models import CalculationParams, Foundation, FoundationDesignResult
from core.tables import BAR_TABLE

logger = logging.getLogger(__name__)


def punching_demand(load: float, pressure: float, column: float, d: float) -> float:
    """Поперечная сила продавливания Vu = N − p·(c + d)², кН."""
    return load - pressure * (column + d) ** 2


def punching_capacity(fc: float, column: float, d: float, params: CalculationParams) -> float:
    """Расчётная прочность на продавливание φVc = φ·k·√f'c·b0·d, кН.

    b0 = 4·(c + d) — периметр расчётного сечения, м; f'c в МПа.
    """
    b0 = 4.0 * (column + d)
    return params.phi_shear * params.shear_coefficient * math.sqrt(fc) * b0 * d * 1000.0


def solve_effective_depth(
    load: float,
    pressure: float,
    column: float,
    fc: float,
    params: CalculationParams,
) -> float:
    """Рабочая высота d, м: первая глубина с Vu ≤ φVc.

    Перебор с шагом depth_step от initial_depth; если за max_iterations
    условие не выполнено — возвращается достигнутое значение.
    """
    d = params.initial_depth
    for _ in range(params.max_iterations):
        if punching_demand(load, pressure, column, d) <= punching_capacity(fc, column, d, params):
            return d
        d += params.depth_step
    logger.debug("Продавливание: условие не выполнено за %d итераций, d=%.2f м", params.max_iterations, d)
    return d


def required_steel(
    pressure: float, B: float, column: float, d: float, thickness: float, fy: float,
    params: CalculationParams,
) -> float:
    """Требуемая площадь арматуры As, мм²/м (не менее минимального процента)."""
    cantilever = (B - column) / 2.0
    Mu = pressure * cantilever**2 / 2.0  # кН·м/м

    As = Mu * 1e6 / (0.9 * fy * 0.9 * d * 1000.0)
    As_min = params.min_steel_ratio * 1000.0 * thickness * 1000.0
    return max(As, As_min)


def _rounded_spacing(spacing: int, params: CalculationParams) -> int:
    return (spacing // params.spacing_round) * params.spacing_round


def bar_suggestion(As: float, params: CalculationParams) -> str:
    """Подбор диаметра и шага стержней: «Φ20 @ 150mm c/c»."""
    for diameter, area in BAR_TABLE:
        spacing = math.floor(area / As * 1000.0)
        if params.min_spacing <= spacing <= params.max_spacing:
            return f"Φ{diameter} @ {_rounded_spacing(spacing, params)}mm c/c"

    area = dict(BAR_TABLE).get(params.fallback_bar, math.pi * params.fallback_bar**2 / 4.0)
    spacing = _rounded_spacing(math.floor(area / As * 1000.0), params)
    spacing = max(params.min_spacing, min(params.max_spacing, spacing))
    return f"Φ{params.fallback_bar} @ {spacing}mm c/c"


def foundation_design(foundation: Foundation, params: CalculationParams) -> FoundationDesignResult:
    """Минимальная толщина, проверка продавливания и армирование."""
    column = foundation.geometry.column_size
    p = foundation.pressure
    fc = foundation.concrete_grade

    d = solve_effective_depth(foundation.load, p, column, fc, params)
    thickness = round(d + params.cover, 2)

    Vu = punching_demand(foundation.load, p, column, d)
    phi_Vc = punching_capacity(fc, column, d, params)

    As = required_steel(p, foundation.B, column, d, thickness, foundation.steel_grade, params)
    logger.debug("ACI 318: d=%.2f м Vu=%.1f φVc=%.1f кН As=%.0f мм²/м", d, Vu, phi_Vc, As)

    return FoundationDesignResult(
        effective_depth=round(d, 2),
        min_thickness=thickness,
        reinforcement_area=round(As),
        bar_suggestion=bar_suggestion(As, params),
        punching_shear_check="Safe" if Vu <= phi_Vc else "Unsafe",
        punching_demand=round(Vu, 2),
        punching_capacity=round(phi_Vc, 2),
    )
