"""Кривые для графиков: нагрузка–осадка, τ(z), время–осадка."""

import numpy as np

from core.helpers import consolidating_layers, get_layer_at_depth, soil_params, time_to_consolidation
from core.models import CalculationParams, CurvePoint, DerivedCurves, Foundation, SoilLayer
from core.tables import degree_of_consolidation


def load_settlement_curve(q_ult: float, total: float, params: CalculationParams) -> list[CurvePoint]:
    """s(q) = s·(q / q_max)·(1 + (q / q_ult)²), q от 0 до 1.5·q_ult."""
    q_max = 1.5 * q_ult
    points = []
    for i in range(params.load_steps + 1):
        fraction = i / params.load_steps
        load = fraction * q_max
        ratio = load / q_ult if q_ult > 0 else 0.0
        s = total * fraction * (1.0 + ratio**2)
        points.append(CurvePoint(x=round(load, 1), y=round(s, 2)))
    return points


def shear_strength_curve(layers: list[SoilLayer], params: CalculationParams) -> list[CurvePoint]:
    """τ = c + γ·z·tanφ с шагом depth_step_curve по всему разрезу."""
    depths = np.arange(0.0, layers[-1].depth_to + 1e-9, params.depth_step_curve)
    points = []
    for z in depths:
        soil = soil_params(get_layer_at_depth(layers, float(z)))
        tau = soil.c + soil.gamma * z * np.tan(np.radians(soil.phi))
        points.append(CurvePoint(x=round(float(z), 1), y=round(float(tau), 1)))
    return points


def time_settlement_curve(
    layers: list[SoilLayer],
    foundation: Foundation,
    total: float,
    params: CalculationParams,
) -> list[CurvePoint]:
    """s(t) = s·Ū(t), Ū — средняя по глинистым слоям степень консолидации."""
    windows = consolidating_layers(layers, foundation)

    t_max = 1.0
    for w in windows:
        t90 = time_to_consolidation(w.drainage_path, w.params.cv, params.time_factor_90)
        t_max = max(t_max, 1.5 * t90)

    points = []
    for i in range(params.time_steps + 1):
        t = i / params.time_steps * t_max
        if windows:
            U = np.mean([
                degree_of_consolidation(w.params.cv * t / w.drainage_path**2) for w in windows
            ])
        else:
            U = 1.0
        points.append(CurvePoint(x=round(t, 2), y=round(float(total * U), 2)))
    return points


def derived_curves(
    layers: list[SoilLayer],
    foundation: Foundation,
    q_ult: float,
    total: float,
    params: CalculationParams,
) -> DerivedCurves:
    return DerivedCurves(
        load_settlement=load_settlement_curve(q_ult, total, params),
        shear_strength=shear_strength_curve(layers, params),
        time_settlement=time_settlement_curve(layers, foundation, total, params),
    )
