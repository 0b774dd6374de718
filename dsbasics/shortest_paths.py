"""Single-source and all-pairs shortest paths on adjacency matrices.

Results are lists of :class:`Hop` where entry ``v`` holds the distance to
``v`` and the vertex preceding ``v`` on a shortest path (-1 if none).
"""

from __future__ import annotations

import math
import operator
from itertools import product
from typing import MutableSequence, NamedTuple

from dsbasics.graph import INF, Graph, Hop
from dsbasics.priority_queue import priority_dequeue, priority_enqueue

__all__ = [
    "BellmanFordResult",
    "relax",
    "bellman_ford",
    "dijkstra",
    "dijkstra_priority",
    "floyd_warshall",
]


class BellmanFordResult(NamedTuple):
    paths: list[Hop]
    has_negative_cycle: bool


def _initial_paths(graph: Graph, source: int) -> list[Hop]:
    size = len(graph)
    if not 0 <= source < size:
        raise IndexError(f"source {source} out of range for {size} vertices")
    paths = [Hop(INF, -1)] * size
    paths[source] = Hop(0.0, -1)
    return paths


def relax(graph: Graph, dp: MutableSequence[Hop], r: int, v: int) -> bool:
    """Improve the path to ``v`` through ``r`` if shorter; report whether it was."""
    via_r = dp[r].weight + graph[r][v]
    if via_r < dp[v].weight:
        dp[v] = Hop(via_r, r)
        return True
    return False


def bellman_ford(graph: Graph, source: int) -> BellmanFordResult:
    """Bellman-Ford from ``source``.

    The negative-cycle flag is set when the last of the ``V - 1`` rounds
    still improved some path.
    """
    paths = _initial_paths(graph, source)
    size = len(graph)
    has_negative_cycle = False
    for _ in range(size - 1):
        has_negative_cycle = False
        for r, v in product(range(size), repeat=2):
            if relax(graph, paths, r, v):
                has_negative_cycle = True
    return BellmanFordResult(paths, has_negative_cycle)


def dijkstra(graph: Graph, source: int) -> list[Hop]:
    """Dijkstra from ``source``, choosing the closest open vertex by linear scan."""
    paths = _initial_paths(graph, source)
    size = len(graph)
    is_open = [True] * size
    while True:
        candidates = [v for v in range(size) if is_open[v] and paths[v].weight < INF]
        if not candidates:
            break
        v_star = min(candidates, key=lambda v: paths[v].weight)
        is_open[v_star] = False
        for v, weight in enumerate(graph[v_star]):
            if is_open[v] and math.isfinite(weight):
                relax(graph, paths, v_star, v)
    return paths


def dijkstra_priority(graph: Graph, source: int) -> list[Hop]:
    """Dijkstra from ``source`` using a min-priority queue of tentative hops."""
    paths = _initial_paths(graph, source)
    queue: list[Hop] = []
    priority_enqueue(queue, Hop(0.0, source), operator.lt)
    while queue:
        v_star = priority_dequeue(queue, operator.lt).vertex
        for v, weight in enumerate(graph[v_star]):
            if math.isfinite(weight) and relax(graph, paths, v_star, v):
                priority_enqueue(queue, Hop(paths[v].weight, v), operator.lt)
    return paths


def floyd_warshall(graph: Graph) -> list[list[Hop]]:
    """All-pairs shortest paths; row ``u`` holds the paths from ``u``."""
    size = len(graph)
    paths = [[Hop(INF, -1)] * size for _ in range(size)]
    for u, v in product(range(size), repeat=2):
        if u == v:
            paths[u][v] = Hop(0.0, -1)
        elif math.isfinite(graph[u][v]):
            paths[u][v] = Hop(graph[u][v], u)
    for r, u, v in product(range(size), repeat=3):
        through_r = paths[u][r].weight + paths[r][v].weight
        if through_r < paths[u][v].weight:
            paths[u][v] = Hop(through_r, paths[r][v].vertex)
    return paths