"""Weighted directed graphs as adjacency matrices or adjacency lists."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

from dsbasics.formatting import format_value

__all__ = [
    "INF",
    "Hop",
    "Graph",
    "SparseGraph",
    "TEST_GRAPH",
    "SPARSE_TEST_GRAPH",
    "graph_to_sparse",
    "to_dot",
    "print_graph",
]

INF = math.inf


@dataclass(frozen=True)
class Hop:
    """A weighted step to ``vertex``; hops are ordered by weight alone."""

    weight: float
    vertex: int

    def __lt__(self, other: Hop) -> bool:
        if not isinstance(other, Hop):
            return NotImplemented
        return self.weight < other.weight

    def __str__(self) -> str:
        return f"({format_value(self.weight)},{self.vertex})"


Graph = Sequence[Sequence[float]]
SparseGraph = Sequence[Sequence[Hop]]

TEST_GRAPH: tuple[tuple[float, ...], ...] = (
    (INF, 4, INF, INF, INF, INF, INF, 8, INF),
    (INF, INF, INF, INF, INF, INF, INF, 11, INF),
    (INF, INF, INF, INF, INF, 4, INF, INF, 2),
    (INF, INF, INF, INF, 9, 14, INF, INF, INF),
    (INF, INF, INF, INF, INF, 10, INF, INF, INF),
    (INF, INF, INF, INF, INF, INF, 2, INF, INF),
    (INF, INF, INF, 3, INF, INF, INF, 1, 6),
    (INF, INF, INF, INF, INF, INF, INF, INF, 7),
    (INF, INF, INF, INF, INF, INF, INF, INF, INF),
)

SPARSE_TEST_GRAPH: tuple[tuple[Hop, ...], ...] = (
    (Hop(4, 1), Hop(8, 7)),
    (Hop(11, 7),),
    (Hop(4, 5), Hop(2, 8)),
    (Hop(9, 4), Hop(14, 5)),
    (Hop(10, 5),),
    (Hop(2, 6),),
    (Hop(3, 3), Hop(1, 7), Hop(6, 8)),
    (Hop(7, 8),),
    (),
)


def graph_to_sparse(graph: Graph) -> list[list[Hop]]:
    """Adjacency lists holding the finite entries of an adjacency matrix."""
    return [
        [Hop(weight, v) for v, weight in enumerate(row) if math.isfinite(weight)]
        for row in graph
    ]


def _as_sparse(graph: Graph | SparseGraph) -> SparseGraph:
    if any(isinstance(entry, Hop) for row in graph for entry in row):
        return graph
    return graph_to_sparse(graph)


def to_dot(graph: Graph | SparseGraph) -> str:
    """Render a dense or sparse graph in Graphviz dot syntax."""
    lines = ["digraph G {"]
    for u, row in enumerate(_as_sparse(graph)):
        lines.extend(
            f"    {u} -> {hop.vertex} [label= {format_value(hop.weight)}];"
            for hop in row
        )
    lines.append("}")
    return "\n".join(lines) + "\n"


def print_graph(graph: Graph | SparseGraph) -> None:
    """Print the dot rendering of ``graph`` followed by a blank line."""
    print(to_dot(graph))