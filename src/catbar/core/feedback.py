"""
catbar/core/feedback
~~~~~~~~~~~~~~~~~~~~
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .layout import LayoutResult

# Pixel change below which a re-measured legend does not trigger a corrective pass
WIDTH_TOLERANCE = 0.5


class LegendWidthFeedback:
    """
    Class for carrying the measured legend width from one render into the next layout.

    The legend's footprint is only known after it has been drawn. Each render reports the
    measured width through `observe()`, which says whether the layout that produced that
    render needs a corrective pass. Because legend content is identical between the two
    passes, the second measurement equals the first and the loop stops after one correction.
    """

    def __init__(self, width: float = 0.0) -> None:
        """
        Initializes the LegendWidthFeedback instance.

        Args:
            width (float): Initial measured width. Defaults to 0.0.
        """
        self.width = float(width)

    def observe(self, measured_width: float, layout: LayoutResult) -> bool:
        """
        Stores a new measurement and reports whether `layout` is out of date.

        Args:
            measured_width (float): Rendered legend width in pixels.
            layout (LayoutResult): Layout used for the render that was measured.

        Returns:
            bool: True if the right padding must be recomputed and the chart re-rendered.
        """
        self.width = float(measured_width)
        if layout.empty:
            return False
        corrected = layout.corrected_right_padding(self.width)
        return abs(corrected - layout.padding.right) > WIDTH_TOLERANCE

    def reset(self) -> None:
        """
        Forgets the last measurement.
        """
        self.width = 0.0
