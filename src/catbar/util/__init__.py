"""
catbar/util
~~~~~~~~~~~
"""

from .text import escape_mathtext, measure_text_width
from .warnings import warn

__all__ = ["escape_mathtext", "measure_text_width", "warn"]
