"""Single-source and all-pairs shortest paths, and negative-cycle detection."""

from __future__ import annotations

import math
from collections import deque
from typing import Iterable

Edge = tuple[int, int, int]


def _check_node(n: int, node: int) -> None:
    if not 1 <= node <= n:
        raise ValueError(f"node {node} is outside 1..{n}")


def _checked_edges(n: int, edges: Iterable[Edge]) -> list[Edge]:
    result = list(edges)
    for a, b, _ in result:
        _check_node(n, a)
        _check_node(n, b)
    return result


def bellman_ford(
    n: int,
    edges: Iterable[Edge],
    max_edges: int,
    source: int = 1,
    target: int | None = None,
) -> int | None:
    """Return the shortest distance using at most ``max_edges`` edges.

    Nodes are ``1 .. n`` and edges ``(a, b, weight)`` are directed. ``target``
    defaults to ``n``. ``None`` means no such path exists.
    """
    if max_edges < 0:
        raise ValueError("max_edges must not be negative")
    if target is None:
        target = n
    _check_node(n, source)
    _check_node(n, target)
    edge_list = _checked_edges(n, edges)

    dist: list[float] = [math.inf] * (n + 1)
    dist[source] = 0
    for _ in range(max_edges):
        backup = dist.copy()
        for a, b, w in edge_list:
            if backup[a] + w < dist[b]:
                dist[b] = backup[a] + w

    result = dist[target]
    return None if math.isinf(result) else int(result)


def floyd_warshall(n: int, edges: Iterable[Edge]) -> dict[tuple[int, int], float]:
    """Return shortest distances between every ordered pair of nodes ``1 .. n``.

    The result maps ``(a, b)`` to the distance, with ``math.inf`` where ``b``
    cannot be reached from ``a``. Parallel edges keep the lightest weight.
    """
    nodes = range(1, n + 1)
    d = {(i, j): (0 if i == j else math.inf) for i in nodes for j in nodes}
    for a, b, w in _checked_edges(n, edges):
        d[a, b] = min(d[a, b], w)

    for k in nodes:
        for i in nodes:
            via = d[i, k]
            if math.isinf(via):
                continue
            for j in nodes:
                candidate = via + d[k, j]
                if candidate < d[i, j]:
                    d[i, j] = candidate
    return d


def has_negative_cycle(n: int, edges: Iterable[Edge]) -> bool:
    """Tell whether the directed graph on nodes ``1 .. n`` has a negative cycle."""
    outgoing: list[list[tuple[int, int]]] = [[] for _ in range(n + 1)]
    for a, b, w in _checked_edges(n, edges):
        outgoing[a].append((b, w))

    dist = [0] * (n + 1)
    hops = [0] * (n + 1)
    queue = deque(range(1, n + 1))
    queued = [False] + [True] * n

    while queue:
        node = queue.popleft()
        queued[node] = False
        for nxt, w in reversed(outgoing[node]):
            if dist[node] + w < dist[nxt]:
                dist[nxt] = dist[node] + w
                hops[nxt] = hops[node] + 1
                if hops[nxt] >= n:
                    return True
                if not queued[nxt]:
                    queue.append(nxt)
                    queued[nxt] = True
    return False