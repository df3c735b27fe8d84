"""Single-source shortest paths: Bellman-Ford and Dijkstra.

A graph maps each vertex to a mapping of its neighbours to edge weights.
Both algorithms return a mapping that gives every reachable vertex its
predecessor and its distance from the start. The start has no predecessor,
so it maps to None.
"""

from __future__ import annotations

import heapq
from collections.abc import Hashable, Mapping
from typing import Any, Optional, TypeVar

V = TypeVar("V", bound=Hashable)

Graph = Mapping[Any, Mapping[Any, Any]]
Paths = dict[Any, Optional[tuple[Any, Any]]]


def _relax_round(graph: Graph, ans: Paths) -> bool:
    """Run one relaxation pass over every edge; return False on a negative loop."""
    for u in sorted(graph):
        if u not in ans:
            continue
        entry_u = ans[u]
        dist_u = None if entry_u is None else entry_u[1]

        for v, d in sorted(graph[u].items()):
            if v in ans:
                entry_v = ans[v]
                if entry_v is None:
                    # v is the start: a shorter path back to it means a negative loop
                    if dist_u is not None and dist_u >= -d:
                        continue
                    if d + d < d:
                        return False
                    continue
                dist_v = entry_v[1]
                longer = (dist_u + d >= dist_v) if dist_u is not None else (d >= dist_v)
                if longer:
                    continue
            ans[v] = (u, d if dist_u is None else dist_u + d)
    return True


def _has_negative_loop(graph: Graph, ans: Paths) -> bool:
    for u, edges in sorted(graph.items()):
        if u not in ans:
            continue
        entry_u = ans[u]
        for v, d in sorted(edges.items()):
            if v not in ans:
                continue
            entry_v = ans[v]
            if entry_u is None and entry_v is None:
                if d + d < d:
                    return True
            elif entry_u is None:
                if d < entry_v[1]:
                    return True
            elif entry_v is None:
                if entry_u[1] < -d:
                    return True
            elif entry_u[1] + d < entry_v[1]:
                return True
    return False


def bellman_ford(graph: Graph, start: Any) -> Paths | None:
    """Shortest paths from ``start``, allowing negative weights.

    Returns None if a negative loop is reachable from ``start``.
    """
    ans: Paths = {start: None}
    for _ in range(1, len(graph)):
        if not _relax_round(graph, ans):
            return None
    if _has_negative_loop(graph, ans):
        return None
    return ans


def dijkstra(graph: Graph, start: Any) -> Paths:
    """Shortest paths from ``start`` in a graph with non-negative weights."""
    ans: Paths = {start: None}
    queue: list[tuple[Any, Any, Any]] = []

    for new, weight in sorted(graph[start].items()):
        ans[new] = (start, weight)
        heapq.heappush(queue, (weight, new, start))

    while queue:
        dist_new, new, prev = heapq.heappop(queue)
        if ans[new] != (prev, dist_new):
            # a stale entry: a shorter path to ``new`` has been found since
            continue

        for nxt, weight in sorted(graph[new].items()):
            if nxt in ans:
                entry = ans[nxt]
                if entry is None or dist_new + weight >= entry[1]:
                    continue
            ans[nxt] = (new, weight + dist_new)
            heapq.heappush(queue, (weight + dist_new, nxt, new))

    return ans