"""Minimum spanning trees with Prim's algorithm.

A graph maps each vertex to a mapping of its neighbours to edge costs; an
undirected edge appears in both directions.
"""

from __future__ import annotations

import heapq
from collections.abc import Mapping, MutableMapping
from typing import Any

Graph = Mapping[Any, Mapping[Any, Any]]


def add_undirected_edge(
    graph: MutableMapping[Any, dict[Any, Any]], v1: Any, v2: Any, cost: Any
) -> None:
    """Add an edge of ``cost`` between ``v1`` and ``v2`` in both directions."""
    graph.setdefault(v1, {})[v2] = cost
    graph.setdefault(v2, {})[v1] = cost


def prim(graph: Graph) -> dict[Any, dict[Any, Any]]:
    """Minimum spanning tree grown from the smallest vertex; empty for an empty graph."""
    if not graph:
        return {}
    return prim_with_start(graph, min(graph))


def prim_with_start(graph: Graph, start: Any) -> dict[Any, dict[Any, Any]]:
    """Minimum spanning tree of the component of ``graph`` that holds ``start``."""
    mst: dict[Any, dict[Any, Any]] = {start: {}}
    queue: list[tuple[Any, Any, Any]] = [
        (cost, v, start) for v, cost in graph[start].items()
    ]
    heapq.heapify(queue)

    while queue:
        cost, target, prev = heapq.heappop(queue)
        if target in mst:
            continue
        add_undirected_edge(mst, prev, target, cost)
        for v, c in graph[target].items():
            if v not in mst:
                heapq.heappush(queue, (c, v, target))

    return mst