"""
catbar/plot/renderers/bars
~~~~~~~~~~~~~~~~~~~~~~~~~~
"""

from __future__ import annotations

from typing import Dict, Sequence, TYPE_CHECKING

import matplotlib.pyplot as plt
from matplotlib.patches import Rectangle

if TYPE_CHECKING:
    from ...core.geometry import BarGroup, BarSpec
    from ...core.layout import LayoutResult
    from ..style import StyleConfig


class BarRenderer:
    """
    Class for drawing bar groups as rectangles on the chart axes.
    """

    def __init__(self, groups: Sequence[BarGroup]) -> None:
        """
        Initializes the BarRenderer instance.

        Args:
            groups (Sequence[BarGroup]): Bar groups in draw order.
        """
        self.groups = list(groups)

    def render(
        self,
        fig: plt.Figure,
        ax: plt.Axes,
        layout: LayoutResult,
        style: StyleConfig,
    ) -> Dict[Rectangle, BarSpec]:
        """
        Draws every bar.

        Args:
            fig (plt.Figure): Target figure.
            ax (plt.Axes): Target axes.
            layout (LayoutResult): Solved chart layout.
            style (StyleConfig): Style configuration.

        Returns:
            Dict[Rectangle, BarSpec]: Drawn patch → bar it represents.
        """
        patches: Dict[Rectangle, BarSpec] = {}
        edgecolor = style.get("bar_edgecolor", "none")
        linewidth = style.get("bar_linewidth", 0.0)
        for group in self.groups:
            if not group.bars:
                continue
            positions = [b.position for b in group.bars]
            lengths = [b.size.length for b in group.bars]
            bases = [b.base for b in group.bars]
            width = group.bars[0].size.width
            if layout.horizontal:
                container = ax.barh(
                    positions,
                    lengths,
                    height=width,
                    left=bases,
                    color=group.fill,
                    edgecolor=edgecolor,
                    linewidth=linewidth,
                    label=group.minor_category,
                )
            else:
                container = ax.bar(
                    positions,
                    lengths,
                    width=width,
                    bottom=bases,
                    color=group.fill,
                    edgecolor=edgecolor,
                    linewidth=linewidth,
                    label=group.minor_category,
                )
            for patch, bar in zip(container.patches, group.bars):
                patches[patch] = bar
        return patches
