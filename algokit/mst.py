"""Minimum spanning tree weight by Kruskal's algorithm."""

from __future__ import annotations

from typing import Iterable

from algokit.disjoint_set import DisjointSet


class DisconnectedGraphError(ValueError):
    """The graph has no spanning tree because it is not connected."""


def kruskal(n: int, edges: Iterable[tuple[int, int, int]]) -> int:
    """Return the total weight of a minimum spanning tree on nodes ``1 .. n``.

    Edges are undirected ``(a, b, weight)`` triples.
    """
    edge_list = list(edges)
    for a, b, _ in edge_list:
        if not (1 <= a <= n and 1 <= b <= n):
            raise ValueError(f"edge ({a}, {b}) has a node outside 1..{n}")

    components = DisjointSet(n + 1)
    total = 0
    used = 0
    for a, b, w in sorted(edge_list, key=lambda edge: edge[2]):
        if not components.connected(a, b):
            components.union(a, b)
            total += w
            used += 1

    if used < n - 1:
        raise DisconnectedGraphError("impossible")
    return total