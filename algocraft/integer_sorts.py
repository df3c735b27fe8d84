"""Counting and radix sorts for non-negative integers."""

from __future__ import annotations

import operator
from collections.abc import MutableSequence
from itertools import chain
from typing import Any


def _check_range(key: int, maxval: int) -> None:
    if not 0 <= key <= maxval:
        raise ValueError(f"value {key} is outside the range 0..={maxval}")


def counting_sort(items: MutableSequence[int], maxval: int) -> None:
    """Sort non-negative integers no larger than ``maxval`` in place.

    Runs in O(n + maxval) time and O(maxval) memory.
    """
    counts = [0] * (maxval + 1)
    for value in items:
        _check_range(value, maxval)
        counts[value] += 1
    items[:] = [value for value, count in enumerate(counts) for _ in range(count)]


def generic_counting_sort(items: MutableSequence[Any], maxval: int) -> None:
    """Sort in place any integer-like values (anything ``operator.index`` accepts).

    Equal keys keep their relative order.
    """
    buckets: list[list[Any]] = [[] for _ in range(maxval + 1)]
    for value in items:
        key = operator.index(value)
        _check_range(key, maxval)
        buckets[key].append(value)
    items[:] = list(chain.from_iterable(buckets))


def radix_sort(items: MutableSequence[int]) -> None:
    """Sort non-negative integers in place with least-significant-digit radix sort.

    The radix is the power of two nearest above the number of elements.
    """
    if not items:
        return
    if any(value < 0 for value in items):
        raise ValueError("radix_sort only sorts non-negative integers")

    largest = max(items)
    radix = max(2, 1 << (len(items) - 1).bit_length())
    place = 1
    while place <= largest:
        buckets: list[list[int]] = [[] for _ in range(radix)]
        for value in items:
            buckets[value // place % radix].append(value)
        items[:] = list(chain.from_iterable(buckets))
        place *= radix