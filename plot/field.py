"""Визуализация поля напряжений под подошвой."""

import plotly.graph_objects as go

from core.models import StressFieldResult


def plot_stress_field(plotter, field: StressFieldResult):
    """Карта σz по узлам сетки (x, z)."""
    if not field.stress_mesh:
        return

    xs = sorted({n.x for n in field.stress_mesh})
    zs = sorted({n.z for n in field.stress_mesh})
    values = {(n.x, n.z): n.stress for n in field.stress_mesh}

    plotter.fig.add_trace(go.Heatmap(
        x=xs, y=zs,
        z=[[values.get((x, z), 0.0) for x in xs] for z in zs],
        colorscale=plotter.colors["stress_scale"],
        colorbar=dict(title="σ<sub>z</sub>, кПа", x=1.02, y=0.22, len=0.42),
        zsmooth="best",
        hovertemplate="x = %{x:.2f} м<br>z = %{y:.2f} м<br>σz = %{z:.1f} кПа<extra></extra>",
        showscale=True,
        name="σz",
    ), row=2, col=2)
