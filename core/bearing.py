"""Несущая способность по Vesic (общий сдвиг)."""

import logging

import numpy as np

from core.helpers import effective_unit_weight, get_layer_at_depth, soil_params
from core.models import (
    BearingCapacityResult,
    BearingFactors,
    CalculationParams,
    Foundation,
    SoilLayer,
)
from core.tables import bearing_factors, depth_factors

logger = logging.getLogger(__name__)


def ultimate_pressure(
    layers: list[SoilLayer],
    foundation: Foundation,
    params: CalculationParams,
) -> tuple[float, tuple[float, float, float]]:
    """Предельное давление q_ult, кПа, и коэффициенты (Nc, Nq, Nγ).

    q_ult = c·Nc·sc·dc + q·Nq·sq·dq + 0.5·γ'·B·Nγ·sγ·dγ

    Все характеристики (φ, c, γ) берутся из слоя на отметке подошвы.
    """
    layer = get_layer_at_depth(layers, foundation.depth)
    soil = soil_params(layer)

    B = foundation.B
    Df = foundation.depth

    n_c, n_q, n_gamma = bearing_factors(soil.phi)
    s_c, s_q, s_gamma = foundation.geometry.shape_factors(
        n_q, n_c, float(np.tan(np.radians(params.reference_phi)))
    )
    d_c, d_q, d_gamma = depth_factors(Df, B, params.reference_phi)
    gamma_above, gamma_below = effective_unit_weight(
        soil.gamma, foundation.groundwater_depth, Df, B, params.gamma_water
    )

    # Бытовое давление на отметке подошвы
    q = gamma_above * Df

    q_ult = (
        soil.c * n_c * s_c * d_c
        + q * n_q * s_q * d_q
        + 0.5 * gamma_below * B * n_gamma * s_gamma * d_gamma
    )
    logger.debug(
        "Vesic: φ=%.1f c=%.1f γ=%.1f/%.1f s=(%.3f, %.3f, %.3f) d=(%.3f, %.3f) q_ult=%.1f",
        soil.phi, soil.c, gamma_above, gamma_below, s_c, s_q, s_gamma, d_c, d_q, q_ult,
    )
    return q_ult, (n_c, n_q, n_gamma)


def bearing_capacity(
    layers: list[SoilLayer],
    foundation: Foundation,
    params: CalculationParams,
) -> BearingCapacityResult:
    """Предельное и допускаемое давление, фактический коэффициент запаса."""
    q_ult, (n_c, n_q, n_gamma) = ultimate_pressure(layers, foundation, params)
    q_allow = q_ult / foundation.target_fos

    p = foundation.pressure
    fos = q_ult / p if p > 0 else params.fos_cap

    return BearingCapacityResult(
        q_ult=round(q_ult, 2),
        q_allow=round(q_allow, 2),
        factors=BearingFactors(Nc=round(n_c, 2), Nq=round(n_q, 2), Ngamma=round(n_gamma, 2)),
        factor_of_safety=round(fos, 2),
    )
