"""Topological sorting and unweighted shortest distances on graphs."""

from __future__ import annotations

from collections import deque
from typing import Iterable


class CycleError(ValueError):
    """The directed graph has a cycle and so no topological order."""


def _check_node(n: int, node: int) -> None:
    if not 1 <= node <= n:
        raise ValueError(f"node {node} is outside 1..{n}")


def topological_order(n: int, edges: Iterable[tuple[int, int]]) -> list[int]:
    """Return a topological order of nodes ``1 .. n`` for directed ``edges``.

    Nodes with no incoming edges are queued in ascending order; the successors
    of a node are visited from the most recently added edge back.
    """
    successors: list[list[int]] = [[] for _ in range(n + 1)]
    in_degree = [0] * (n + 1)
    for a, b in edges:
        _check_node(n, a)
        _check_node(n, b)
        successors[a].append(b)
        in_degree[b] += 1

    queue = deque(v for v in range(1, n + 1) if in_degree[v] == 0)
    order: list[int] = []
    while queue:
        node = queue.popleft()
        order.append(node)
        for nxt in reversed(successors[node]):
            in_degree[nxt] -= 1
            if in_degree[nxt] == 0:
                queue.append(nxt)

    if len(order) != n:
        raise CycleError("the graph contains a cycle")
    return order


def bfs_distance(
    n: int,
    edges: Iterable[tuple[int, int]],
    source: int = 1,
    target: int | None = None,
) -> int | None:
    """Return the fewest undirected edges from ``source`` to ``target``.

    ``target`` defaults to node ``n``. ``None`` means it cannot be reached.
    """
    if target is None:
        target = n
    _check_node(n, source)
    _check_node(n, target)

    neighbours: list[list[int]] = [[] for _ in range(n + 1)]
    for a, b in edges:
        _check_node(n, a)
        _check_node(n, b)
        neighbours[a].append(b)
        neighbours[b].append(a)

    distance = {source: 0}
    queue = deque([source])
    while queue:
        node = queue.popleft()
        for nxt in reversed(neighbours[node]):
            if nxt not in distance:
                distance[nxt] = distance[node] + 1
                queue.append(nxt)
    return distance.get(target)