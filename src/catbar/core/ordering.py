"""
catbar/core/ordering
~~~~~~~~~~~~~~~~~~~~
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, List, Mapping, Optional, Sequence, TypeVar

T = TypeVar("T")

# Separation between adjacent bars as a fraction of bar width
BAR_SEPARATION_RATIO = 0.2


def index_lookup(order: Optional[Sequence[str]]) -> Optional[Dict[str, int]]:
    """
    Converts an explicit category order into a label → index lookup.

    Args:
        order (Optional[Sequence[str]]): Ordered category labels, or None.

    Returns:
        Optional[Dict[str, int]]: Lookup keeping the first index of repeated labels,
            or None if no order was given.
    """
    if order is None:
        return None
    lookup: Dict[str, int] = {}
    for i, label in enumerate(order):
        lookup.setdefault(label, i)
    return lookup


def sort_by_category(
    items: Sequence[T],
    get_category: Callable[[T], str],
    category_order: Optional[Mapping[str, int]] = None,
) -> List[T]:
    """
    Sorts items by an explicit category order. Items whose category is in the order come
    first, by order index; the rest follow in their original relative order.

    Args:
        items (Sequence[T]): Items to sort.
        get_category (Callable[[T], str]): Extracts the category label of an item.
        category_order (Optional[Mapping[str, int]]): Label → index lookup. Defaults to None.

    Returns:
        List[T]: Sorted items (a new list).
    """
    if not category_order:
        return list(items)

    def _key(item: T):
        index = category_order.get(get_category(item))
        if index is None:
            return (1, 0)
        return (0, index)

    # sorted() is stable, so unordered items keep first-seen order
    return sorted(items, key=_key)


@dataclass(frozen=True)
class CategoryCoordinates:
    """
    Data class mapping category indices to coordinates along the category axis.
    """

    bar_width: float
    group_size: int = 1

    @property
    def bar_separation(self) -> float:
        return BAR_SEPARATION_RATIO * self.bar_width

    @property
    def step(self) -> float:
        return self.bar_width + self.bar_separation

    def coord(self, index: float) -> float:
        """
        Returns the coordinate of a bar slot.

        Args:
            index (float): Slot index. Fractional indices are allowed.

        Returns:
            float: Coordinate along the category axis.
        """
        return index * self.step

    def __call__(self, index: float) -> float:
        return self.coord(index)

    def group_base(self, major_index: int) -> float:
        """
        Returns the coordinate of the first bar drawn for a major category.

        Args:
            major_index (int): Index of the major category in draw order.

        Returns:
            float: Base coordinate of the major category's group.
        """
        return self.coord(major_index * self.group_size)

    def group_offset(self, minor_index: int) -> float:
        """
        Returns the offset of a minor category's bar inside its group.

        Args:
            minor_index (int): Index of the minor category in draw order.

        Returns:
            float: Offset from the group base.
        """
        return minor_index * self.step

    def tick(self, major_index: int) -> float:
        """
        Returns the tick coordinate of a major category: the centre of its group.

        Args:
            major_index (int): Index of the major category in draw order.

        Returns:
            float: Tick coordinate.
        """
        return self.group_base(major_index) + self.group_offset(self.group_size - 1) / 2.0
