"""Базовый класс для построения графиков."""

from plotly.subplots import make_subplots

from .styles import COLORS_DARK, COLORS_LIGHT, FONT_FAMILY, FONT_SIZE, TITLES


class BasePlotter:
    """Базовый класс с настройкой layout и осей (сетка 2×2)."""

    def __init__(self, theme: str = "light"):
        self.theme = theme
        self.colors = COLORS_DARK if theme == "dark" else COLORS_LIGHT
        self.fig = make_subplots(
            rows=2, cols=2,
            subplot_titles=TITLES,
            horizontal_spacing=0.12, vertical_spacing=0.16,
        )
        self._setup_layout()
        self.max_depth = 0.0

    def _setup_layout(self):
        """Базовые настройки макета."""
        self.fig.update_layout(
            font=dict(family=FONT_FAMILY, size=FONT_SIZE, color=self.colors["text"]),
            template=self.colors["template"],
            height=1100,
            width=1500,
            margin=dict(l=80, r=160, t=100, b=140),
            showlegend=True,
            legend=dict(
                orientation="h",
                yanchor="top", y=-0.08,
                xanchor="center", x=0.5,
                bgcolor=self.colors["legend_bg"],
                bordercolor=self.colors["legend_border"],
                borderwidth=1,
                font=dict(size=13, color=self.colors["text"]),
            ),
            plot_bgcolor=self.colors["plot_bg"],
            paper_bgcolor=self.colors["paper_bg"],
        )

    def _axis_style(self) -> dict:
        return dict(
            showgrid=True, gridwidth=0.75, gridcolor=self.colors["grid"],
            linecolor=self.colors["axis_line"], linewidth=2,
            ticks="outside", tickwidth=2, tickcolor=self.colors["axis_tick"],
            tickfont=dict(family=FONT_FAMILY, size=FONT_SIZE - 2, color=self.colors["text"]),
            mirror=True,
        )

    def _update_axes(self):
        """Подписи осей; глубина откладывается вниз."""
        style = self._axis_style()

        self.fig.update_xaxes(title_text="<i>q</i>, кПа", **style, row=1, col=1)
        self.fig.update_yaxes(title_text="<i>s</i>, мм", autorange="reversed", **style, row=1, col=1)

        self.fig.update_xaxes(title_text="<i>t</i>, лет", **style, row=1, col=2)
        self.fig.update_yaxes(title_text="<i>s</i>, мм", autorange="reversed", **style, row=1, col=2)

        self.fig.update_xaxes(title_text="<i>τ</i>, кПа", side="top", **style, row=2, col=1)
        self.fig.update_yaxes(
            title_text="Глубина <i>z</i>, м", range=[self.max_depth * 1.05, 0], **style, row=2, col=1,
        )

        self.fig.update_xaxes(title_text="<i>x</i>, м", **style, row=2, col=2)
        self.fig.update_yaxes(title_text="<i>z</i>, м", autorange="reversed", **style, row=2, col=2)

    def get_figure(self):
        """Возвращает figure с настройкой для высокого качества экспорта."""
        self._update_axes()
        self.fig.update_layout(autosize=False, width=1500, height=1100)
        return self.fig
