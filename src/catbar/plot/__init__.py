"""
catbar/plot
~~~~~~~~~~~
"""

from .interaction import CanvasScheduler, HoverBinding
from .plotter import BarPlotter
from .style import DEFAULT_STYLE, StyleConfig

__all__ = ["BarPlotter", "CanvasScheduler", "DEFAULT_STYLE", "HoverBinding", "StyleConfig"]
