"""Методы для отрисовки кривых и линий нагрузки."""

import plotly.graph_objects as go

from core.models import BearingCapacityResult, DerivedCurves
from .styles import FONT_SIZE, LINE_WIDTH_BOLD, LINE_WIDTH_THIN


def plot_curves(plotter, curves: DerivedCurves):
    """Кривые нагрузка–осадка, время–осадка и τ(z)."""
    ls = curves.load_settlement
    plotter.fig.add_trace(go.Scatter(
        x=[p.x for p in ls], y=[p.y for p in ls], mode="lines+markers", name="<i>s</i>(<i>q</i>)",
        line=dict(color=plotter.colors["load_settlement"], width=LINE_WIDTH_BOLD),
        hovertemplate="q = %{x:.0f} кПа<br>s = %{y:.1f} мм<extra></extra>",
    ), row=1, col=1)

    ts = curves.time_settlement
    plotter.fig.add_trace(go.Scatter(
        x=[p.x for p in ts], y=[p.y for p in ts], mode="lines", name="<i>s</i>(<i>t</i>)",
        line=dict(color=plotter.colors["time_settlement"], width=LINE_WIDTH_BOLD),
        hovertemplate="t = %{x:.2f} лет<br>s = %{y:.1f} мм<extra></extra>",
    ), row=1, col=2)

    sh = curves.shear_strength
    if sh:
        plotter.max_depth = max(plotter.max_depth, max(p.x for p in sh))
    plotter.fig.add_trace(go.Scatter(
        x=[p.y for p in sh], y=[p.x for p in sh], mode="lines", name="<i>τ</i>(<i>z</i>)",
        line=dict(color=plotter.colors["shear"], width=LINE_WIDTH_BOLD, shape="hv"),
        hovertemplate="z = %{y:.1f} м<br>τ = %{x:.1f} кПа<extra></extra>",
    ), row=2, col=1)


def _add_pressure_line(plotter, q: float, color: str, name: str, dash: str = "solid"):
    """Вертикальная линия давления на графике нагрузка–осадка."""
    plotter.fig.add_vline(x=q, line_width=LINE_WIDTH_THIN, line_dash=dash, line_color=color, row=1, col=1)
    plotter.fig.add_annotation(
        x=q, y=1.0, xref="x", yref="y domain",
        text=f"<b>{name} = {q:.0f}</b>", showarrow=False, yshift=10,
        font=dict(color=color, size=FONT_SIZE - 4),
        bgcolor=plotter.colors["annotation_bg"], xanchor="center",
    )


def add_pressure_lines(plotter, bearing: BearingCapacityResult, applied: float):
    """Линии q_ult, q_allow и фактического давления."""
    _add_pressure_line(plotter, bearing.q_ult, plotter.colors["q_ult"], "q<sub>ult</sub>", "dash")
    _add_pressure_line(plotter, bearing.q_allow, plotter.colors["q_allow"], "q<sub>allow</sub>", "dot")
    _add_pressure_line(plotter, applied, plotter.colors["applied"], "p")
