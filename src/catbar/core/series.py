"""
catbar/core/series
~~~~~~~~~~~~~~~~~~
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Sequence, Tuple, Union

Label = Union[str, Sequence[str]]


@dataclass(frozen=True)
class AxisSeriesPoint:
    """
    Data class for one observation labelled with a minor and a major category.
    """

    minor: str
    major: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "minor", str(self.minor))
        object.__setattr__(self, "major", str(self.major))

    def swapped(self) -> AxisSeriesPoint:
        """
        Returns the point with minor and major labels exchanged.

        Returns:
            AxisSeriesPoint: Point with swapped roles.
        """
        return AxisSeriesPoint(minor=self.major, major=self.minor)


@dataclass(frozen=True)
class AxisDatum:
    """
    Data class for one sample's value(s) on a single axis.
    """

    sample_key: Any
    value: Label


def _as_labels(value: Label) -> Tuple[str, ...]:
    """
    Normalizes a single or multi-valued label into a tuple of strings.

    Args:
        value (Label): Label or sequence of labels.

    Returns:
        Tuple[str, ...]: Labels as strings.
    """
    if isinstance(value, (str, bytes)) or not isinstance(value, Iterable):
        return (str(value),)
    return tuple(str(v) for v in value)


def join_axis_data(
    horz_data: Iterable[AxisDatum],
    vert_data: Iterable[AxisDatum],
) -> List[AxisSeriesPoint]:
    """
    Joins two per-sample axis series on sample key. Every sample present on both axes
    contributes one point per pair of its horizontal and vertical values, with the
    vertical value as minor category and the horizontal value as major category.

    Args:
        horz_data (Iterable[AxisDatum]): Values on the horizontal axis.
        vert_data (Iterable[AxisDatum]): Values on the vertical axis.

    Returns:
        List[AxisSeriesPoint]: Joined points in horizontal-series order.
    """
    sample_to_vert: Dict[Any, Tuple[str, ...]] = {}
    for datum in vert_data:
        sample_to_vert[datum.sample_key] = _as_labels(datum.value)

    points: List[AxisSeriesPoint] = []
    for datum in horz_data:
        vert_labels = sample_to_vert.get(datum.sample_key)
        if not vert_labels:
            continue
        for major in _as_labels(datum.value):
            for minor in vert_labels:
                points.append(AxisSeriesPoint(minor=minor, major=major))
    return points
