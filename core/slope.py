"""Устойчивость бесконечного откоса."""

import numpy as np

from core.helpers import soil_params
from core.models import CalculationParams, Foundation, SlopeStabilityResult, SoilLayer

NOTE_STABLE = "The slope is stable with an adequate factor of safety."
NOTE_UNSTABLE = "The slope is potentially unstable. Consider stabilization measures."


def infinite_slope_fos(c: float, gamma: float, phi_deg: float, beta_deg: float, z: float) -> float | None:
    """FOS = (c + γ·z·cos²β·tanφ) / (γ·z·sinβ·cosβ); None при нулевом знаменателе."""
    beta = np.radians(beta_deg)
    numerator = c + gamma * z * np.cos(beta) ** 2 * np.tan(np.radians(phi_deg))
    denominator = gamma * z * np.sin(beta) * np.cos(beta)
    if denominator <= 0:
        return None
    return float(numerator / denominator)


def slope_stability(
    layers: list[SoilLayer],
    foundation: Foundation,
    params: CalculationParams,
) -> SlopeStabilityResult | None:
    """Расчёт выполняется только при β > 0; характеристики — по верхнему слою."""
    beta = foundation.slope_angle or 0.0
    if beta <= 0:
        return None

    soil = soil_params(layers[0])
    z = foundation.depth or params.slope_default_depth

    fos = infinite_slope_fos(soil.c, soil.gamma, soil.phi, beta, z)
    if fos is None:
        fos = params.fos_cap

    stable = fos >= params.slope_fos_min
    return SlopeStabilityResult(
        factor_of_safety=round(fos, 2),
        status="Stable" if stable else "Unstable",
        notes=NOTE_STABLE if stable else NOTE_UNSTABLE,
    )
