"""Стили и константы для графиков."""

# Шрифты
FONT_FAMILY = "Inter, -apple-system, system-ui, Arial, sans-serif"
FONT_SIZE = 16

# Цветовая палитра (линии данных - одинаковые для обеих тем)
COLORS_DATA = {
    "load_settlement": "#d62728",  # красный
    "time_settlement": "#1f77b4",  # синий
    "shear": "#9467bd",            # фиолетовый
    "q_ult": "#d62728",
    "q_allow": "#2ca02c",          # зелёный
    "applied": "#ff7f0e",          # оранжевый
    "limit_safe": "rgba(46, 204, 113, 0.15)",
    "limit_warning": "rgba(241, 196, 15, 0.2)",
    "stress_scale": "Viridis",
}

# Светлая тема
COLORS_LIGHT = {
    **COLORS_DATA,
    "template": "plotly_white",
    "plot_bg": "white",
    "paper_bg": "white",
    "text": "black",
    "grid": "rgba(0,0,0,0.1)",
    "axis_line": "black",
    "axis_tick": "black",
    "legend_bg": "rgba(255,255,255,0.9)",
    "legend_border": "black",
    "annotation_bg": "rgba(255,255,255,0.8)",
    "layer_line": "black",
    "layer_fill_a": "rgba(0,0,0,0.02)",
    "layer_fill_b": "rgba(0,0,0,0.05)",
}

# Тёмная тема
COLORS_DARK = {
    **COLORS_DATA,
    "template": "plotly_dark",
    "plot_bg": "rgba(14, 17, 23, 0)",
    "paper_bg": "rgba(14, 17, 23, 0)",
    "text": "#fafafa",
    "grid": "rgba(255,255,255,0.1)",
    "axis_line": "#fafafa",
    "axis_tick": "#fafafa",
    "legend_bg": "rgba(38, 39, 48, 0.9)",
    "legend_border": "#fafafa",
    "annotation_bg": "rgba(38, 39, 48, 0.8)",
    "layer_line": "#aaa",
    "layer_fill_a": "rgba(255,255,255,0.02)",
    "layer_fill_b": "rgba(255,255,255,0.05)",
}

# Толщина линий
LINE_WIDTH_BOLD = 3
LINE_WIDTH_THIN = 2

TITLES = (
    "<b>Нагрузка–осадка</b>",
    "<b>Осадка во времени</b>",
    "<b>Прочность на сдвиг <i>τ</i>(<i>z</i>)</b>",
    "<b>Напряжения <i>σ<sub>z</sub></i> под подошвой</b>",
)
