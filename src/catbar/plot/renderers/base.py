"""
catbar/plot/renderers/base
~~~~~~~~~~~~~~~~~~~~~~~~~~
"""

from __future__ import annotations

from typing import Any, Protocol, Tuple, TYPE_CHECKING

import matplotlib.pyplot as plt

if TYPE_CHECKING:
    from ...core.layout import LayoutResult
    from ..style import StyleConfig


class Renderer(Protocol):
    """
    Class for defining the renderer interface used by chart layers.
    Protocol only; implement in concrete renderers.
    """

    def render(
        self,
        fig: plt.Figure,
        ax: plt.Axes,
        layout: LayoutResult,
        style: StyleConfig,
        **kwargs: Any,
    ) -> Any:
        """
        Executes rendering logic.

        Args:
            fig (plt.Figure): Target figure.
            ax (plt.Axes): Target axes.
            layout (LayoutResult): Solved chart layout.
            style (StyleConfig): Style configuration.

        Kwargs:
            **kwargs: Renderer keyword arguments. Defaults to {}.
        """
        # Protocol stub; no runtime implementation
        ...


def canvas_to_figure(layout: LayoutResult, x: float, y: float) -> Tuple[float, float]:
    """
    Converts a canvas point (pixels, origin top-left) to figure-fraction coordinates.

    Args:
        layout (LayoutResult): Layout defining the canvas size.
        x (float): Canvas x coordinate.
        y (float): Canvas y coordinate.

    Returns:
        Tuple[float, float]: Figure-fraction (x, y), origin bottom-left.
    """
    return (x / layout.canvas_width, 1.0 - y / layout.canvas_height)
