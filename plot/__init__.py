"""Модуль визуализации результатов расчёта фундамента."""

from core.models import BearingCapacityResult, DerivedCurves, SoilLayer, StressFieldResult

from .annotations import add_layers, add_settlement_limits
from .base import BasePlotter
from .curves import add_pressure_lines, plot_curves
from .field import plot_stress_field


class ReportPlotter(BasePlotter):
    """Класс для построения сводного листа графиков."""

    def plot_curves(self, curves: DerivedCurves):
        plot_curves(self, curves)

    def add_pressure_lines(self, bearing: BearingCapacityResult, applied: float):
        add_pressure_lines(self, bearing, applied)

    def add_layers(self, layers: list[SoilLayer], foundation_depth: float | None = None):
        add_layers(self, layers, foundation_depth)

    def add_settlement_limits(self, safe: float, warning: float):
        add_settlement_limits(self, safe, warning)

    def plot_stress_field(self, field: StressFieldResult):
        plot_stress_field(self, field)


__all__ = ["ReportPlotter"]
