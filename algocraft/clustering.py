"""Deterministic k-means clustering."""

from __future__ import annotations

import math
from collections.abc import Sequence


def _distance(x: Sequence[float], y: Sequence[float]) -> float:
    """Sum of squared differences between two equally sized vectors."""
    return sum((xi - yi) ** 2 for xi, yi in zip(x, y))


def _nearest_centroids(
    xs: Sequence[Sequence[float]], centroids: Sequence[Sequence[float]]
) -> list[int]:
    """Index of the nearest centroid for each datum; the first wins ties."""
    labels = []
    for x in xs:
        best_index, best_dist = 0, math.inf
        for index, centroid in enumerate(centroids):
            d = _distance(x, centroid)
            if d < best_dist:
                best_index, best_dist = index, d
        labels.append(best_index)
    return labels


def _recompute_centroids(
    xs: Sequence[Sequence[float]], labels: Sequence[int], k: int
) -> list[list[float]]:
    """Mean of each cluster; an empty cluster gets a NaN centroid no datum is near."""
    ndims = len(xs[0])
    sums = [[0.0] * ndims for _ in range(k)]
    counts = [0] * k
    for x, label in zip(xs, labels):
        counts[label] += 1
        sums[label] = [s + v for s, v in zip(sums[label], x)]
    return [
        [s / count for s in total] if count else [math.nan] * ndims
        for total, count in zip(sums, counts)
    ]


def kmeans(xs: Sequence[Sequence[float]], k: int) -> list[int]:
    """Assign each of the data in ``xs`` to one of ``k`` clusters.

    Initial centroids are evenly spaced data points, so the result is
    deterministic. Returns the cluster index of each datum.
    """
    if k < 1:
        raise ValueError("k must be at least 1")
    if len(xs) < k:
        raise ValueError("need at least k data points")

    step = len(xs) // k
    centroids = [list(xs[j * step]) for j in range(k)]
    labels = _nearest_centroids(xs, centroids)
    while True:
        centroids = _recompute_centroids(xs, labels, k)
        new_labels = _nearest_centroids(xs, centroids)
        if new_labels == labels:
            return labels
        labels = new_labels