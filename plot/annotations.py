"""Аннотации: слои разреза, пороги осадки."""

from core.models import SoilLayer
from .styles import FONT_FAMILY, FONT_SIZE


def add_layers(plotter, layers: list[SoilLayer], foundation_depth: float | None = None):
    """Границы слоёв с подписями на графике τ(z)."""
    plotter.max_depth = max(plotter.max_depth, layers[-1].depth_to if layers else 0.0)

    for idx, layer in enumerate(layers):
        fill_color = plotter.colors["layer_fill_a"] if idx % 2 == 0 else plotter.colors["layer_fill_b"]
        plotter.fig.add_hrect(
            y0=layer.depth_from, y1=layer.depth_to,
            fillcolor=fill_color, opacity=1.0, line_width=0, layer="below",
            row=2, col=1,
        )
        plotter.fig.add_hline(
            y=layer.depth_to, line_width=1, line_dash="solid",
            line_color=plotter.colors["layer_line"], opacity=0.5, row=2, col=1,
        )

        label = layer.name or layer.soil_type
        z_mid = 0.5 * (layer.depth_from + layer.depth_to)
        plotter.fig.add_annotation(
            x=1.0, y=z_mid, xref="x3 domain", yref="y3",
            text=f"<b>{label}</b><br>{layer.depth_from:.1f}–{layer.depth_to:.1f} м<br>N = {layer.spt_n:g}",
            showarrow=False, xanchor="right", yanchor="middle",
            font=dict(size=int(FONT_SIZE * 0.7), color=plotter.colors["text"], family=FONT_FAMILY),
            bgcolor=plotter.colors["annotation_bg"],
        )

    if foundation_depth:
        plotter.fig.add_hline(
            y=foundation_depth, line_width=2, line_dash="dot",
            line_color=plotter.colors["applied"], row=2, col=1,
        )


def add_settlement_limits(plotter, safe: float, warning: float):
    """Зоны Safe / Warning на графиках осадки."""
    for col in (1, 2):
        plotter.fig.add_hrect(
            y0=0, y1=safe, fillcolor=plotter.colors["limit_safe"], line_width=0, layer="below",
            row=1, col=col,
        )
        plotter.fig.add_hrect(
            y0=safe, y1=warning, fillcolor=plotter.colors["limit_warning"], line_width=0, layer="below",
            row=1, col=col,
        )
