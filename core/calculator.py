"""Калькулятор фундамента мелкого заложения."""

import logging

from core.bearing import bearing_capacity
from core.curves import derived_curves
from core.layers import analyze_layers
from core.models import (
    AnalysisInput,
    CalculationOutput,
    CalculationParams,
    CalibrationRecord,
    Foundation,
    SoilLayer,
    SoilProfile,
)
from core.settlement import settlement
from core.slope import slope_stability
from core.stress import stress_field
from core.structural import foundation_design

logger = logging.getLogger(__name__)


def calculate(
    layers: list[SoilLayer],
    foundation: Foundation,
    params: CalculationParams | None = None,
    calibration: list[CalibrationRecord] | None = None,
) -> CalculationOutput:
    """Основной пайплайн расчёта.

    Args:
        layers: Слои грунта сверху вниз (непрерывный разрез).
        foundation: Геометрия фундамента и нагрузки.
        params: Эмпирические константы (по умолчанию — CalculationParams()).
        calibration: Калибровочные данные; принимаются, но пока не меняют формулы.

    Returns:
        CalculationOutput со всеми блоками результатов.

    Raises:
        pydantic.ValidationError: Разрывы/перекрытия в разрезе или подошва ниже разреза.
    """
    params = params or CalculationParams()
    data = AnalysisInput(
        profile=SoilProfile(layers=layers),
        foundation=foundation,
        calibration=calibration or [],
    )
    layers = data.profile.layers
    if data.calibration:
        logger.debug("Калибровочных записей: %d (не используются в формулах)", len(data.calibration))

    # 1. Характеристики слоёв
    layer_results = analyze_layers(layers)

    # 2. Несущая способность
    bearing = bearing_capacity(layers, foundation, params)

    # 3. Осадка
    settle = settlement(layers, foundation, params)

    # 4. Конструирование
    design = foundation_design(foundation, params)

    # 5. Устойчивость откоса
    slope = slope_stability(layers, foundation, params)

    # 6. Поле напряжений
    field = stress_field(layers, foundation, params)

    # 7. Кривые
    curves = derived_curves(layers, foundation, bearing.q_ult, settle.total, params)

    logger.info(
        "%s %.1f×%.1f м, Df=%.2f м: q_ult=%.1f кПа FOS=%.2f s=%.1f мм (%s), продавливание %s",
        foundation.shape, foundation.B, foundation.L, foundation.depth,
        bearing.q_ult, bearing.factor_of_safety, settle.total, settle.status,
        design.punching_shear_check,
    )

    return CalculationOutput(
        layers=layer_results,
        bearing_capacity=bearing,
        settlement=settle,
        slope_stability=slope,
        foundation_design=design,
        stress_field=field,
        curves=curves,
    )
