"""Planar geometry: Graham-scan convex hull and closest pair of points."""

from __future__ import annotations

import math
from collections.abc import Sequence

Point = tuple[float, float]


def _sort_by_min_angle(points: Sequence[Point], origin: Point) -> list[Point]:
    """Order points by polar angle around ``origin``, nearest first on ties."""
    ox, oy = origin

    def key(point: Point) -> tuple[float, float, Point]:
        dx, dy = point[0] - ox, point[1] - oy
        return math.atan2(dy, dx), math.hypot(dy, dx), point

    return sorted(points, key=key)


def _cross(a: Point, b: Point, c: Point) -> float:
    """Z coordinate of the cross product of vectors ab and ac."""
    return (b[0] - a[0]) * (c[1] - a[1]) - (c[0] - a[0]) * (b[1] - a[1])


def convex_hull_graham(points: Sequence[Point]) -> list[Point]:
    """Return the convex hull of ``points`` using Graham's scan.

    The hull starts at the point with the lowest y (then lowest x) and runs
    counter-clockwise. Collinear points on the hull are kept, nearest first.
    """
    if not points:
        return []

    lowest = min(points, key=lambda p: (p[1], p[0]))
    ordered = _sort_by_min_angle(points, lowest)
    if len(ordered) <= 3:
        return ordered

    stack: list[Point] = []
    for point in ordered:
        while len(stack) > 1 and _cross(stack[-2], stack[-1], point) < 0.0:
            stack.pop()
        stack.append(point)
    return stack


def _closest_in(points: list[Point], start: int, end: int) -> tuple[Point, Point] | None:
    """Closest pair within ``points[start:end]``, which is sorted by x then y."""
    n = end - start
    if n <= 1:
        return None

    if n <= 3:
        window = points[start:end]
        best = (window[0], window[1])
        best_dist = math.dist(*best)
        for i, first in enumerate(window):
            for second in window[i + 1 :]:
                d = math.dist(first, second)
                if d < best_dist:
                    best_dist = d
                    best = (first, second)
        return best

    mid = (start + end) // 2
    left = _closest_in(points, start, mid)
    right = _closest_in(points, mid, end)
    candidates = [pair for pair in (left, right) if pair is not None]
    if len(candidates) == 2:
        dl, dr = math.dist(*left), math.dist(*right)
        pair, min_dist = (left, dl) if dl < dr else (right, dr)
    else:
        pair = candidates[0]
        min_dist = math.dist(*pair)

    mid_x = points[mid][0]
    while points[start][0] < mid_x - min_dist:
        start += 1
    while points[end - 1][0] > mid_x + min_dist:
        end -= 1

    strip = sorted(points[start:end], key=lambda p: p[1])
    for i, point in enumerate(strip):
        for other in strip[i + 1 : i + 8]:
            d = math.dist(point, other)
            if d < min_dist:
                min_dist = d
                pair = (point, other)
    return pair


def closest_points(points: Sequence[Point]) -> tuple[Point, Point] | None:
    """Return the two closest points, or None when there are fewer than two."""
    ordered = sorted(points)
    return _closest_in(ordered, 0, len(ordered))