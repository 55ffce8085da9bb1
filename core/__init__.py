"""Ядро расчёта фундамента мелкого заложения.

Модули:
- models: Типы данных (SoilLayer, Foundation, CalculationParams, ...)
- calculator: Организатор алгоритма расчёта
- tables: Корреляции по SPT и коэффициенты несущей способности
- helpers: Доступ к разрезу и разрешение характеристик слоёв
- bearing, settlement, structural, slope, stress, curves, layers: расчётные блоки

Использование:
    from core.models import SoilLayer, Foundation, RaftFoundation
    from core.calculator import calculate
"""

from . import helpers, tables
from .calculator import calculate
from .models import (
    CalculationOutput,
    CalculationParams,
    CalibrationRecord,
    CircularFooting,
    Foundation,
    IsolatedFooting,
    LabData,
    RaftFoundation,
    SoilLayer,
    StripFooting,
)

__all__ = [
    "helpers",
    "tables",
    "calculate",
    "CalculationOutput",
    "CalculationParams",
    "CalibrationRecord",
    "CircularFooting",
    "Foundation",
    "IsolatedFooting",
    "LabData",
    "RaftFoundation",
    "SoilLayer",
    "StripFooting",
]
