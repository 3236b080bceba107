"""Chart layer renderers."""

from .base import Renderer, canvas_to_figure
from .axes import AxesRenderer, count_ticks
from .bars import BarRenderer
from .legend import LegendRenderer, measure_legend_width
from .tooltip import TooltipRenderer

__all__ = [
    "AxesRenderer",
    "BarRenderer",
    "LegendRenderer",
    "Renderer",
    "TooltipRenderer",
    "canvas_to_figure",
    "count_ticks",
    "measure_legend_width",
]
