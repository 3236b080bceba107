"""
catbar
~~~~~~

catbar: grouped and stacked categorical bar charts
"""

from .core.chart import BarChart
from .core.colors import ColorAllocator
from .core.config import BarPlotConfig
from .core.crosstab import make_plot_data
from .core.layout import compute_layout
from .core.series import AxisDatum, AxisSeriesPoint

__all__ = [
    "AxisDatum",
    "AxisSeriesPoint",
    "BarChart",
    "BarPlotConfig",
    "ColorAllocator",
    "compute_layout",
    "make_plot_data",
]

__version__ = "0.1.0"
