"""
catbar/plot/renderers/legend
~~~~~~~~~~~~~~~~~~~~~~~~~~~~
"""

from __future__ import annotations

from typing import Callable, Optional, TYPE_CHECKING

import matplotlib.pyplot as plt
from matplotlib.legend import Legend
from matplotlib.patches import Patch

from ...core.config import LabelFonts
from ...core.layout import LEGEND_ITEMS_PER_ROW
from ...util.text import escape_mathtext
from .base import canvas_to_figure

if TYPE_CHECKING:
    from ...core.layout import LayoutResult
    from ..style import StyleConfig


class LegendRenderer:
    """
    Class for rendering the minor-category legend beside or below the chart.
    """

    def __init__(self, get_color: Callable[[str], str], fonts: Optional[LabelFonts] = None) -> None:
        """
        Initializes the LegendRenderer instance.

        Args:
            get_color (Callable[[str], str]): Category label → fill color.
            fonts (Optional[LabelFonts]): Legend text font. Defaults to None.
        """
        self.get_color = get_color
        self.fonts = fonts if fonts is not None else LabelFonts()

    def render(
        self,
        fig: plt.Figure,
        ax: plt.Axes,
        layout: LayoutResult,
        style: StyleConfig,
    ) -> Optional[Legend]:
        """
        Draws the legend at the layout's legend position.

        Args:
            fig (plt.Figure): Target figure.
            ax (plt.Axes): Chart axes.
            layout (LayoutResult): Solved chart layout.
            style (StyleConfig): Style configuration.

        Returns:
            Optional[Legend]: The legend, or None when there are no entries.
        """
        if not layout.legend_entries:
            return None
        handles = [
            Patch(facecolor=self.get_color(name), edgecolor="none", label=escape_mathtext(name))
            for name in layout.legend_entries
        ]
        anchor = canvas_to_figure(layout, *layout.legend_position)
        side = layout.legend_location == "right"
        # Handle sizes are in font-size units
        handle = float(style.get("legend_symbol_size", 10.0)) / self.fonts.label_size
        return fig.legend(
            handles=handles,
            labels=[escape_mathtext(name) for name in layout.legend_entries],
            loc="upper left",
            bbox_to_anchor=anchor,
            bbox_transform=fig.transFigure,
            ncol=1 if side else LEGEND_ITEMS_PER_ROW,
            frameon=False,
            borderpad=0.0,
            borderaxespad=0.0,
            handlelength=handle,
            handleheight=handle,
            labelspacing=style.get("legend_row_spacing", 0.3),
            prop={"family": self.fonts.family, "size": self.fonts.label_size},
            labelcolor=style.get("text_color", "black"),
        )


def measure_legend_width(fig: plt.Figure, legend: Legend, style: StyleConfig) -> float:
    """
    Measures the rendered legend width in layout pixels. The figure must have been drawn.

    Args:
        fig (plt.Figure): Drawn figure holding the legend.
        legend (Legend): Legend to measure.
        style (StyleConfig): Style providing the points-per-inch layout unit.

    Returns:
        float: Legend width in layout pixels.
    """
    renderer = fig.canvas.get_renderer()
    bbox = legend.get_window_extent(renderer=renderer)
    return float(bbox.width) * float(style.get("points_per_inch", 72.0)) / float(fig.dpi)
