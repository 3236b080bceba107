"""
catbar/plot/style
~~~~~~~~~~~~~~~~~
"""

from __future__ import annotations

from typing import Dict, Mapping, Optional, Sequence, TypedDict, Union

try:
    from typing import TypeAlias
except ImportError:  # Python <3.10
    from typing_extensions import TypeAlias

# Type alias for style values
StyleValue: TypeAlias = Union[
    str,
    float,
    int,
    bool,
    None,
    Sequence[float],
    Mapping[str, float],
]


class StyleDefaults(TypedDict):
    """
    Type class for plot style defaults.
    """

    points_per_inch: float
    dpi: float
    background: str
    text_color: str
    axis_color: str
    bar_edgecolor: str
    bar_linewidth: float
    legend_symbol_size: float
    legend_row_spacing: float
    tooltip_facecolor: str
    tooltip_edgecolor: str
    tooltip_fontsize: float
    tooltip_offset: float
    placeholder_text: str
    placeholder_color: str
    placeholder_fontsize: float


DEFAULT_STYLE: StyleDefaults = {
    # One layout pixel is one point
    "points_per_inch": 72.0,
    "dpi": 100.0,
    "background": "white",
    "text_color": "black",
    "axis_color": "#555555",
    "bar_edgecolor": "none",
    "bar_linewidth": 0.0,
    # Legend square marker size (points) and row spacing (font-size units)
    "legend_symbol_size": 10.0,
    "legend_row_spacing": 0.3,
    # Hover tooltip box
    "tooltip_facecolor": "white",
    "tooltip_edgecolor": "#cccccc",
    "tooltip_fontsize": 10.0,
    "tooltip_offset": 12.0,
    # Message shown instead of a chart when there is no data
    "placeholder_text": "No data to plot.",
    "placeholder_color": "#31708f",
    "placeholder_fontsize": 12.0,
}


class StyleConfig:
    """
    Class for storing plot style defaults and overrides.
    """

    def __init__(self, defaults: Optional[Mapping[str, StyleValue]] = None) -> None:
        """
        Initializes the StyleConfig instance.

        Args:
            defaults (Optional[Mapping[str, StyleValue]]): Base style defaults. Defaults to None.
        """
        if defaults is None:
            defaults = DEFAULT_STYLE
        self._defaults: Dict[str, StyleValue] = dict(defaults)
        self._overrides: Dict[str, StyleValue] = {}

    def get(self, key: str, default: Optional[StyleValue] = None) -> StyleValue:
        """
        Gets a style value with override priority.

        Args:
            key (str): Style key.
            default (Optional[StyleValue]): Default value if key not found. Defaults to None.

        Returns:
            StyleValue: Resolved style value.
        """
        if key in self._overrides:
            return self._overrides[key]
        return self._defaults.get(key, default)

    def set(self, key: str, value: StyleValue) -> None:
        """
        Overrides a style value.

        Args:
            key (str): Style key.
            value (StyleValue): Style value to set.

        Raises:
            KeyError: If `key` is not a known style key.
        """
        if key not in self._defaults:
            raise KeyError(f"Unknown style key: {key!r}")
        self._overrides[key] = value

    def update(self, overrides: Mapping[str, StyleValue]) -> None:
        """
        Applies multiple overrides at once.

        Args:
            overrides (Mapping[str, StyleValue]): Mapping of style keys to values.
        """
        for key, value in overrides.items():
            self.set(key, value)

    def as_dict(self) -> Dict[str, StyleValue]:
        """
        Returns a merged view of defaults and overrides.

        Returns:
            Dict[str, StyleValue]: Merged style dictionary.
        """
        merged = dict(self._defaults)
        merged.update(self._overrides)
        return merged

    def __getitem__(self, key: str) -> StyleValue:
        return self.get(key)

    def __contains__(self, key: object) -> bool:
        return key in self._overrides or key in self._defaults
