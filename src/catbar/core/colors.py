"""
catbar/core/colors
~~~~~~~~~~~~~~~~~~
"""

from __future__ import annotations

from typing import Dict, List, Mapping, Optional, Sequence

import matplotlib.pyplot as plt
from matplotlib.colors import to_hex

from ..util.warnings import warn


def default_palette() -> List[str]:
    """
    Returns the default categorical palette as hex strings.

    Returns:
        List[str]: Palette colors (tab10 followed by the light tab20 shades).
    """
    tab10 = [to_hex(c) for c in plt.get_cmap("tab10").colors]
    tab20 = [to_hex(c) for c in plt.get_cmap("tab20").colors]
    return tab10 + [c for c in tab20[1::2] if c not in tab10]


class ColorAllocator:
    """
    Class for assigning stable colors to category labels. Lookups are case-insensitive;
    labels never seen before get the next palette color not already in use.
    """

    def __init__(
        self,
        category_to_color: Optional[Mapping[str, str]] = None,
        palette: Optional[Sequence[str]] = None,
    ) -> None:
        """
        Initializes the ColorAllocator instance.

        Args:
            category_to_color (Optional[Mapping[str, str]]): Preset label → color mapping.
                Defaults to None.
            palette (Optional[Sequence[str]]): Colors handed out to new labels, in order.
                Defaults to None (uses `default_palette()`).

        Raises:
            ValueError: If `palette` is empty.
        """
        self._assigned: Dict[str, str] = {}
        for category, color in (category_to_color or {}).items():
            self._assigned[str(category).lower()] = color
        self._palette = list(palette) if palette is not None else default_palette()
        if not self._palette:
            raise ValueError("palette must contain at least one color")
        self._cursor = 0
        self._exhausted_warned = False

    def _next_color(self) -> str:
        """
        Returns the next palette color not used by any preset or prior allocation.

        Returns:
            str: Color string.
        """
        used = {str(c).lower() for c in self._assigned.values()}
        n = len(self._palette)
        for offset in range(n):
            color = self._palette[(self._cursor + offset) % n]
            if color.lower() not in used:
                self._cursor = (self._cursor + offset + 1) % n
                return color
        # Palette exhausted: colors start repeating
        if not self._exhausted_warned:
            warn(
                f"Color palette of {n} colors exhausted; category colors will repeat",
                RuntimeWarning,
                stacklevel=4,
            )
            self._exhausted_warned = True
        color = self._palette[self._cursor % n]
        self._cursor = (self._cursor + 1) % n
        return color

    def allocate(self, label: str) -> str:
        """
        Returns the color for a category label, assigning one on first sight.

        Args:
            label (str): Category label.

        Returns:
            str: Color string.
        """
        key = str(label).lower()
        if key not in self._assigned:
            self._assigned[key] = self._next_color()
        return self._assigned[key]

    def __call__(self, label: str) -> str:
        return self.allocate(label)

    def as_dict(self) -> Dict[str, str]:
        """
        Returns the current lowercase label → color assignments.

        Returns:
            Dict[str, str]: Assigned colors.
        """
        return dict(self._assigned)
