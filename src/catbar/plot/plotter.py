"""
catbar/plot/plotter
~~~~~~~~~~~~~~~~~~~
"""

from __future__ import annotations

from typing import Dict, Mapping, Optional, Tuple

import matplotlib.pyplot as plt
from matplotlib.legend import Legend
from matplotlib.patches import Rectangle

from ..core.chart import BarChart
from ..core.feedback import LegendWidthFeedback
from ..core.geometry import BarSpec
from ..core.hover import HoverController
from ..core.layout import LayoutResult
from .interaction import HoverBinding
from .renderers import (
    AxesRenderer,
    BarRenderer,
    LegendRenderer,
    TooltipRenderer,
    measure_legend_width,
)
from .style import StyleConfig, StyleValue


class BarPlotter:
    """
    Class for rendering a BarChart with matplotlib.

    Rendering follows a two-pass protocol: the first pass uses the legend width measured
    by the previous render (initially 0); after drawing, the legend is measured and, if the
    measurement changes the right padding, the chart is drawn once more with the corrected
    layout. The plotter never recomputes data; it only consumes the chart's pipeline.
    """

    def __init__(self, chart: BarChart, style: Optional[Mapping[str, StyleValue]] = None) -> None:
        """
        Initializes the BarPlotter instance.

        Args:
            chart (BarChart): Chart whose pipeline supplies geometry and layout.
            style (Optional[Mapping[str, StyleValue]]): Style overrides. Defaults to None.
        """
        self.chart = chart
        self.style = StyleConfig()
        if style is not None:
            self.style.update(style)
        self.feedback = LegendWidthFeedback()
        self.layout_: Optional[LayoutResult] = None
        self.passes_ = 0
        self._fig: Optional[plt.Figure] = None
        self._legend: Optional[Legend] = None
        self._patches: Dict[Rectangle, BarSpec] = {}
        self._tooltip: Optional[TooltipRenderer] = None
        self._hover: Optional[HoverBinding] = None

    @property
    def figure(self) -> Optional[plt.Figure]:
        return self._fig

    @property
    def patches(self) -> Dict[Rectangle, BarSpec]:
        return dict(self._patches)

    def _figure_size(self, layout: LayoutResult) -> Tuple[float, float]:
        ppi = float(self.style["points_per_inch"])
        return (layout.canvas_width / ppi, layout.canvas_height / ppi)

    def _draw_placeholder(self, layout: LayoutResult) -> plt.Figure:
        fig = plt.figure(figsize=self._figure_size(layout), dpi=self.style["dpi"])
        fig.patch.set_facecolor(self.style["background"])
        fig.text(
            0.5,
            0.5,
            self.style["placeholder_text"],
            ha="center",
            va="center",
            fontsize=self.style["placeholder_fontsize"],
            color=self.style["placeholder_color"],
        )
        return fig

    def _draw(self, layout: LayoutResult) -> plt.Figure:
        """
        Draws one pass of the chart for a given layout.

        Args:
            layout (LayoutResult): Layout to draw with.

        Returns:
            plt.Figure: The drawn figure.
        """
        self._legend = None
        self._patches = {}
        self._tooltip = None
        if layout.empty:
            return self._draw_placeholder(layout)

        fig = plt.figure(figsize=self._figure_size(layout), dpi=self.style["dpi"])
        fig.patch.set_facecolor(self.style["background"])
        x0, y0, width, height = layout.plot_area
        canvas_w, canvas_h = layout.canvas_width, layout.canvas_height
        ax = fig.add_axes(
            [x0 / canvas_w, 1.0 - (y0 + height) / canvas_h, width / canvas_w, height / canvas_h]
        )
        ax.set_facecolor("none")

        fonts = self.chart.fonts
        AxesRenderer("limits", fonts).render(fig, ax, layout, self.style)
        self._patches = BarRenderer(self.chart.bar_groups()).render(fig, ax, layout, self.style)
        AxesRenderer("category_ticks", fonts).render(fig, ax, layout, self.style)
        AxesRenderer("count_ticks", fonts).render(fig, ax, layout, self.style)
        AxesRenderer("titles", fonts).render(fig, ax, layout, self.style)
        self._legend = LegendRenderer(self.chart.colors.allocate, fonts).render(
            fig, ax, layout, self.style
        )
        self._tooltip = TooltipRenderer()
        self._tooltip.render(fig, ax, layout, self.style)
        return fig

    def _measure(self, fig: plt.Figure) -> Optional[float]:
        if self._legend is None:
            return None
        fig.canvas.draw()
        return measure_legend_width(fig, self._legend, self.style)

    def render(self) -> plt.Figure:
        """
        Renders the chart, running at most one corrective pass for the legend width.

        Returns:
            plt.Figure: The final figure.
        """
        self.close()
        layout = self.chart.layout(self.feedback.width)
        fig = self._draw(layout)
        self.passes_ = 1
        measured = self._measure(fig)
        if measured is not None and self.feedback.observe(measured, layout):
            plt.close(fig)
            layout = self.chart.layout(self.feedback.width)
            fig = self._draw(layout)
            self.passes_ = 2
            # Legend content is unchanged, so this only refreshes the stored width
            measured = self._measure(fig)
            if measured is not None:
                self.feedback.observe(measured, layout)
        self.layout_ = layout
        self._fig = fig
        return fig

    def enable_hover(self, controller: Optional[HoverController] = None) -> HoverBinding:
        """
        Connects hover tooltips to the rendered figure.

        Args:
            controller (Optional[HoverController]): Hover state machine. Defaults to None
                (one driven by the canvas timer).

        Returns:
            HoverBinding: Active binding.

        Raises:
            RuntimeError: If nothing has been rendered, or the chart has no bars.
        """
        if self._fig is None:
            raise RuntimeError("Nothing to hover over; call render() first.")
        if self._tooltip is None:
            raise RuntimeError("Chart has no bars to hover over.")
        if self._hover is not None:
            self._hover.disconnect()
        self._hover = HoverBinding(self._fig, self._patches, self._tooltip, controller)
        return self._hover

    def show(self) -> None:
        """
        Renders the chart with hover tooltips and shows it.
        """
        self.render()
        if self._tooltip is not None:
            self.enable_hover()
        plt.show()

    def save(self, path: str, **kwargs) -> None:
        """
        Save the last rendered figure with correct background handling.
        """
        if self._fig is None:
            raise RuntimeError("Nothing to save; call render() first.")

        self._fig.savefig(
            path,
            facecolor=self._fig.get_facecolor(),
            **kwargs,
        )

    def close(self) -> None:
        """
        Disconnects hover handling and closes the current figure.
        """
        if self._hover is not None:
            self._hover.disconnect()
            self._hover = None
        if self._fig is not None:
            plt.close(self._fig)
            self._fig = None
