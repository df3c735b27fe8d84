"""Insertion, selection, heap, shell and merge sorts."""

from __future__ import annotations

from bisect import insort
from collections.abc import Iterable, MutableSequence
from typing import Any


def insertion_sort(items: Iterable[Any]) -> list[Any]:
    """Return a new sorted list built by inserting each element in turn."""
    result: list[Any] = []
    for item in items:
        insort(result, item)
    return result


def selection_sort(items: MutableSequence[Any]) -> None:
    """Sort ``items`` in place with selection sort."""
    n = len(items)
    for left in range(n):
        smallest = min(range(left, n), key=items.__getitem__)
        items[smallest], items[left] = items[left], items[smallest]


def _move_down(items: MutableSequence[Any], root: int, end: int) -> None:
    """Sift the element at ``root`` down within ``items[:end]``."""
    last = end - 1
    while True:
        left = 2 * root + 1
        if left > last:
            return
        right = left + 1
        largest = right if right <= last and items[right] > items[left] else left
        if items[largest] > items[root]:
            items[root], items[largest] = items[largest], items[root]
        root = largest


def heap_sort(items: MutableSequence[Any]) -> None:
    """Sort ``items`` in place with heap sort on a max heap."""
    n = len(items)
    if n <= 1:
        return
    for i in reversed(range((n - 2) // 2 + 1)):
        _move_down(items, i, n)
    for end in reversed(range(1, n)):
        items[0], items[end] = items[end], items[0]
        _move_down(items, 0, end)


def shell_sort(items: MutableSequence[Any]) -> None:
    """Sort ``items`` in place with shell sort, halving the gap each pass."""
    gap = len(items) // 2
    while gap > 0:
        for start in range(gap):
            for i in range(start + gap, len(items), gap):
                current = items[i]
                pos = i
                while pos >= gap and items[pos - gap] > current:
                    items[pos] = items[pos - gap]
                    pos -= gap
                items[pos] = current
        gap //= 2


def _merge(items: MutableSequence[Any], lo: int, mid: int, hi: int) -> None:
    left = list(items[lo : mid + 1])
    right = list(items[mid + 1 : hi + 1])
    merged: list[Any] = []
    l = r = 0
    while l < len(left) and r < len(right):
        if left[l] < right[r]:
            merged.append(left[l])
            l += 1
        else:
            merged.append(right[r])
            r += 1
    merged.extend(left[l:])
    merged.extend(right[r:])
    items[lo : hi + 1] = merged


def _merge_sort(items: MutableSequence[Any], lo: int, hi: int) -> None:
    if lo < hi:
        mid = lo + (hi - lo) // 2
        _merge_sort(items, lo, mid)
        _merge_sort(items, mid + 1, hi)
        _merge(items, lo, mid, hi)


def merge_sort(items: MutableSequence[Any]) -> None:
    """Sort ``items`` in place with top-down merge sort."""
    if len(items) > 1:
        _merge_sort(items, 0, len(items) - 1)