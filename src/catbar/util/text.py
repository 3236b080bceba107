"""
catbar/util/text
~~~~~~~~~~~~~~~~
"""

from __future__ import annotations

from functools import lru_cache

from matplotlib.font_manager import FontProperties
from matplotlib.textpath import TextPath


def escape_mathtext(text: str) -> str:
    """
    Escapes dollar signs so matplotlib draws text literally instead of as mathtext.

    Args:
        text (str): Raw label text.

    Returns:
        str: Text safe to hand to matplotlib text artists.
    """
    return str(text).replace("$", r"\$")


@lru_cache(maxsize=4096)
def measure_text_width(text: str, font_family: str, font_size: float) -> float:
    """
    Measures the rendered width of a single line of text.

    Sizes are in points; the layout treats one point as one pixel. The width is the ink
    bounding box of the glyphs, so leading and trailing whitespace contributes nothing.

    Args:
        text (str): Text to measure. Dollar signs are taken literally.
        font_family (str): Font family name.
        font_size (float): Font size in points.

    Returns:
        float: Ink width of the text.
    """
    if not text:
        return 0.0
    path = TextPath(
        (0, 0),
        escape_mathtext(text),
        size=float(font_size),
        prop=FontProperties(family=font_family),
    )
    return float(path.get_extents().width)
