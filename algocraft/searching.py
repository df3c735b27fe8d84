"""Linear and binary search over sequences."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any


def binary_search(item: Any, items: Sequence[Any]) -> int | None:
    """Return an index of ``item`` in the sorted ``items``, or None."""
    left, right = 0, len(items)
    while left < right:
        mid = left + (right - left) // 2
        probe = items[mid]
        if item < probe:
            right = mid
        elif item > probe:
            left = mid + 1
        else:
            return mid
    return None


def binary_search_rec(
    items: Sequence[Any], target: Any, left: int = 0, right: int | None = None
) -> int | None:
    """Recursively search ``items[left:right]`` for ``target``; return its index or None."""
    if right is None:
        right = len(items)
    if left >= right:
        return None

    middle = left + (right - left) // 2
    probe = items[middle]
    if target < probe:
        return binary_search_rec(items, target, left, middle)
    if target > probe:
        return binary_search_rec(items, target, middle + 1, right)
    return middle


def linear_search(item: Any, items: Sequence[Any]) -> int | None:
    """Return the index of the first element equal to ``item``, or None."""
    return next((i for i, value in enumerate(items) if value == item), None)