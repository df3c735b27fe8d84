"""In-place sorts that work by exchanging neighbouring or partitioned elements."""

from __future__ import annotations

import math
from collections.abc import MutableSequence, Sequence
from itertools import pairwise
from typing import Any

_COMB_SHRINK = 1.3


def is_sorted(items: Sequence[Any]) -> bool:
    """Return True if no element is greater than the one after it."""
    return not any(prev > item for prev, item in pairwise(items))


def _swap(items: MutableSequence[Any], i: int, j: int) -> None:
    items[i], items[j] = items[j], items[i]


def bubble_sort(items: MutableSequence[Any]) -> None:
    """Sort ``items`` in place with bubble sort."""
    n = len(items)
    for done in range(n):
        for j in range(n - 1 - done):
            if items[j] > items[j + 1]:
                _swap(items, j, j + 1)


def cocktail_shaker_sort(items: MutableSequence[Any]) -> None:
    """Sort ``items`` in place, sweeping alternately forwards and backwards."""
    positions = range(max(len(items) - 1, 0))
    while True:
        swapped = False
        for i in positions:
            if items[i] > items[i + 1]:
                _swap(items, i, i + 1)
                swapped = True
        if not swapped:
            return

        swapped = False
        for i in reversed(positions):
            if items[i] > items[i + 1]:
                _swap(items, i, i + 1)
                swapped = True
        if not swapped:
            return


def comb_sort(items: MutableSequence[Any]) -> None:
    """Sort ``items`` in place with comb sort, shrinking the gap by 1.3."""
    gap = len(items)
    done = False
    while not done:
        gap = math.floor(gap / _COMB_SHRINK)
        if gap <= 1:
            gap = 1
            done = True
        for i in range(len(items) - gap):
            j = i + gap
            if items[i] > items[j]:
                _swap(items, i, j)
                done = False


def odd_even_sort(items: MutableSequence[Any]) -> None:
    """Sort ``items`` in place with odd-even transposition sort."""
    n = len(items)
    if n == 0:
        return

    done = False
    while not done:
        done = True
        for start in (1, 0):
            for i in range(start, n - 1, 2):
                if items[i] > items[i + 1]:
                    _swap(items, i, i + 1)
                    done = False


def _partition(items: MutableSequence[Any], lo: int, hi: int) -> int:
    pivot = hi
    i = lo - 1
    j = hi
    while True:
        i += 1
        while items[i] < items[pivot]:
            i += 1
        j -= 1
        while j >= 0 and items[j] > items[pivot]:
            j -= 1
        if i >= j:
            break
        _swap(items, i, j)
    _swap(items, i, pivot)
    return i


def _quick_sort(items: MutableSequence[Any], lo: int, hi: int) -> None:
    if lo < hi:
        p = _partition(items, lo, hi)
        _quick_sort(items, lo, p - 1)
        _quick_sort(items, p + 1, hi)


def quick_sort(items: MutableSequence[Any]) -> None:
    """Sort ``items`` in place with quicksort, pivoting on the last element."""
    _quick_sort(items, 0, len(items) - 1)


def _stooge_sort(items: MutableSequence[Any], start: int, end: int) -> None:
    if items[start] > items[end]:
        _swap(items, start, end)
    if start + 1 >= end:
        return
    third = (end - start + 1) // 3
    _stooge_sort(items, start, end - third)
    _stooge_sort(items, start + third, end)
    _stooge_sort(items, start, end - third)


def stooge_sort(items: MutableSequence[Any]) -> None:
    """Sort ``items`` in place with stooge sort."""
    if items:
        _stooge_sort(items, 0, len(items) - 1)