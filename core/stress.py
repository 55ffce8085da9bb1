"""Приближённое поле вертикальных напряжений под подошвой (для визуализации)."""

import numpy as np

from core.helpers import get_layer_at_depth, soil_params, spread_stress
from core.models import CalculationParams, Foundation, SoilLayer, StressFieldResult, StressNode

PLASTIC_MINIMAL = "Minimal plastic deformation — soil well within elastic range."
PLASTIC_LOCALIZED = "Some localized plastic zones near footing edges."
PLASTIC_SIGNIFICANT = "Significant plastic zones detected — approaching bearing failure."


def vertical_stress(p: float, B: float, L: float, x: float, z: float) -> float:
    """σz в точке (x, z): распределение 2:1 по оси с затуханием в стороны.

    σz = p·B·L / ((B + z)(L + z)) · exp(−(x / (B/2 + z/2))²)
    """
    if z <= 0:
        return p
    lateral = np.exp(-((x / (B / 2.0 + 0.5 * z)) ** 2))
    return max(0.0, float(spread_stress(p, B, L, z) * lateral))


def stress_grid(foundation: Foundation, params: CalculationParams) -> list[StressNode]:
    """Сетка rows × cols: x ∈ [−1.5B, 1.5B], z ∈ [z0, z0 + 3B]."""
    B, L = foundation.B, foundation.L
    p = foundation.pressure

    xs = np.linspace(-1.5 * B, 1.5 * B, params.grid_cols)
    zs = params.grid_top + np.linspace(0.0, 3.0 * B, params.grid_rows)

    return [
        StressNode(
            x=round(float(x), 2),
            z=round(float(z), 2),
            stress=round(vertical_stress(p, B, L, float(x), float(z)), 2),
        )
        for z in zs
        for x in xs
    ]


def plasticity_description(ratio: float, params: CalculationParams) -> str:
    """Качественная оценка зон пластичности по отношению p / τ."""
    if ratio < params.plastic_low:
        return PLASTIC_MINIMAL
    if ratio < params.plastic_high:
        return PLASTIC_LOCALIZED
    return PLASTIC_SIGNIFICANT


def stress_field(
    layers: list[SoilLayer],
    foundation: Foundation,
    params: CalculationParams,
) -> StressFieldResult:
    """Поле напряжений, максимальное перемещение и оценка пластичности."""
    p = foundation.pressure
    B = foundation.B

    soil = soil_params(get_layer_at_depth(layers, foundation.depth))
    E = soil.E * 1000.0  # кПа
    nu = soil.nu if soil.nu is not None else params.poisson_default

    # Жёсткий штамп, Is = 1
    max_disp = p * B * (1.0 - nu**2) / E * 1000.0 if E > 0 else 0.0

    tau = soil.c + soil.gamma * foundation.depth * np.tan(np.radians(soil.phi))
    ratio = p / tau if tau > 0 else np.inf

    mesh = stress_grid(foundation, params)
    return StressFieldResult(
        max_displacement=round(max_disp, 2),
        max_von_mises_stress=round(p, 2),
        plastic_points=plasticity_description(ratio, params),
        mesh_nodes=len(mesh),
        stress_mesh=mesh,
    )
