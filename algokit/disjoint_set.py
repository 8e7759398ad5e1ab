"""Disjoint-set forest with path compression."""

from __future__ import annotations


class DisjointSet:
    """Union-find over the integers ``0 .. size - 1``."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self._parent = list(range(size))

    def _check(self, x: int) -> None:
        if not 0 <= x < len(self._parent):
            raise IndexError(f"element {x} is outside 0..{len(self._parent) - 1}")

    def find(self, x: int) -> int:
        """Return the representative of the set holding ``x``."""
        self._check(x)
        root = x
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[x] != root:
            self._parent[x], x = root, self._parent[x]
        return root

    def union(self, a: int, b: int) -> None:
        """Merge the set holding ``a`` into the set holding ``b``."""
        self._parent[self.find(a)] = self.find(b)

    def connected(self, a: int, b: int) -> bool:
        """Tell whether ``a`` and ``b`` belong to the same set."""
        return self.find(a) == self.find(b)