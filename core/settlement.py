"""Осадка: упругая (Schmertmann), первичная и вторичная консолидация."""

import logging
import math

from core.helpers import (
    ConsolidatingLayer,
    average_gamma_above,
    consolidating_layers,
    get_layer_at_depth,
    soil_params,
    spread_stress,
    time_to_consolidation,
)
from core.models import (
    CalculationParams,
    Foundation,
    SettlementResult,
    SettlementStatus,
    SoilLayer,
)

logger = logging.getLogger(__name__)


def strain_influence(z_ratio: float, peak_ratio: float, base: float, peak: float) -> float:
    """Коэффициент влияния деформаций Iz (кусочно-линейная эпюра).

    Растёт от base на подошве до peak на относительной глубине peak_ratio,
    затем линейно убывает до нуля на границе зоны влияния.
    """
    if z_ratio <= peak_ratio:
        Iz = base + (peak - base) * (z_ratio / peak_ratio)
    else:
        Iz = peak * (1.0 - (z_ratio - peak_ratio) / (1.0 - peak_ratio))
    return max(0.0, Iz)


def elastic_settlement(
    layers: list[SoilLayer],
    foundation: Foundation,
    params: CalculationParams,
) -> float:
    """Упругая осадка по методу коэффициентов влияния деформаций, мм.

    s = C1 · Δq · Σ(Iz / E · Δz),  C1 = 1 − 0.5·(q0 / Δq)
    """
    B = foundation.B
    Df = foundation.depth

    q0 = average_gamma_above(layers, Df) * Df
    delta_q = foundation.pressure - q0
    if delta_q <= 0:
        return 0.0

    C1 = max(0.0, 1.0 - 0.5 * (q0 / delta_q))

    if foundation.is_elongated:
        influence_depth = params.influence_depth_elongated * B
        peak_depth = params.iz_peak_depth_elongated * B
        base = params.iz_base_elongated
    else:
        influence_depth = params.influence_depth_compact * B
        peak_depth = params.iz_peak_depth_compact * B
        base = params.iz_base_compact
    peak_ratio = min(peak_depth / influence_depth, 0.999)

    dz = influence_depth / params.sublayers
    integral = 0.0

    for i in range(params.sublayers):
        z_mid = (i + 0.5) * dz
        Iz = strain_influence(z_mid / influence_depth, peak_ratio, base, params.iz_peak)

        layer = get_layer_at_depth(layers, Df + z_mid)
        E = soil_params(layer).E * 1000.0  # МПа → кПа
        if E > 0:
            integral += Iz / E * dz

    return C1 * delta_q * integral * 1000.0


def _layer_primary(window: ConsolidatingLayer, foundation: Foundation) -> float:
    soil = window.params
    sigma0 = soil.gamma * window.z_mid
    if sigma0 <= 0:
        return 0.0

    delta_sigma = spread_stress(foundation.pressure, foundation.B, foundation.L, window.z_mid - foundation.depth)
    e0 = 0.5 + 2.0 * soil.cc

    Sc = soil.cc * window.H / (1.0 + e0) * math.log10((sigma0 + delta_sigma) / sigma0)
    return max(0.0, Sc) * 1000.0


def primary_consolidation(layers: list[SoilLayer], foundation: Foundation) -> float:
    """Первичная консолидация глинистых слоёв ниже подошвы, мм.

    Sc = Cc·H / (1 + e0) · log10((σ0 + Δσ) / σ0)
    """
    return sum(_layer_primary(w, foundation) for w in consolidating_layers(layers, foundation))


def secondary_consolidation(
    layers: list[SoilLayer],
    foundation: Foundation,
    params: CalculationParams,
) -> float:
    """Вторичная консолидация (ползучесть), мм.

    Ss = Cα·H·log10(t_design / t90),  t_design = max(2·t90, min_design_life)
    """
    total = 0.0
    for window in consolidating_layers(layers, foundation):
        t90 = time_to_consolidation(window.drainage_path, window.params.cv, params.time_factor_90)
        if t90 <= 0:
            continue
        t_design = max(2.0 * t90, params.min_design_life)
        Ss = window.params.c_alpha * window.H * math.log10(t_design / t90)
        total += max(0.0, Ss) * 1000.0
    return total


def consolidation_time(
    layers: list[SoilLayer],
    foundation: Foundation,
    params: CalculationParams,
) -> float:
    """Наибольшее по слоям время 90% первичной консолидации, лет."""
    times = [
        time_to_consolidation(w.drainage_path, w.params.cv, params.time_factor_90)
        for w in consolidating_layers(layers, foundation)
    ]
    return max(times, default=0.0)


def format_duration(years: float) -> str:
    """Время в днях (< 1 мес.), месяцах (< 1 года) или годах."""
    if years <= 0:
        return "< 1 Month"
    if years < 1.0 / 12.0:
        return f"{round(years * 365)} Days"
    if years < 1.0:
        return f"{round(years * 12)} Months"
    return f"{years:.1f} Years"


def settlement_status(total: float, params: CalculationParams) -> SettlementStatus:
    """Статус по суммарной осадке, мм."""
    if total < params.settlement_safe:
        return "Safe"
    if total < params.settlement_warning:
        return "Warning"
    return "Failure"


def settlement(
    layers: list[SoilLayer],
    foundation: Foundation,
    params: CalculationParams,
) -> SettlementResult:
    """Суммарная осадка и её составляющие."""
    elastic = elastic_settlement(layers, foundation, params)
    primary = primary_consolidation(layers, foundation)
    secondary = secondary_consolidation(layers, foundation, params)
    t90 = consolidation_time(layers, foundation, params)

    total = elastic + primary + secondary
    logger.debug(
        "Осадка: упругая=%.2f первичная=%.2f вторичная=%.2f мм, t90=%.2f лет",
        elastic, primary, secondary, t90,
    )

    return SettlementResult(
        total=round(total, 2),
        elastic=round(elastic, 2),
        primary=round(primary, 2),
        secondary=round(secondary, 2),
        time_to_90_years=round(t90, 2),
        time_to_max_settlement=format_duration(t90),
        status=settlement_status(round(total, 2), params),
    )
