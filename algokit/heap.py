"""Min-heap whose entries can be addressed by insertion number."""

from __future__ import annotations

from typing import Iterable


class IndexedHeap:
    """A binary min-heap; the k-th inserted value can be deleted or changed."""

    def __init__(self) -> None:
        self._values: list[int] = []
        self._keys: list[int] = []
        self._position: dict[int, int] = {}
        self._inserted = 0

    def __len__(self) -> int:
        return len(self._values)

    def _swap(self, i: int, j: int) -> None:
        ki, kj = self._keys[i], self._keys[j]
        self._position[ki], self._position[kj] = j, i
        self._keys[i], self._keys[j] = kj, ki
        self._values[i], self._values[j] = self._values[j], self._values[i]

    def _up(self, i: int) -> None:
        while i > 0:
            parent = (i - 1) // 2
            if self._values[parent] <= self._values[i]:
                break
            self._swap(parent, i)
            i = parent

    def _down(self, i: int) -> None:
        size = len(self._values)
        while True:
            smallest = i
            for child in (2 * i + 1, 2 * i + 2):
                if child < size and self._values[child] < self._values[smallest]:
                    smallest = child
            if smallest == i:
                return
            self._swap(i, smallest)
            i = smallest

    def _locate(self, k: int) -> int:
        try:
            return self._position[k]
        except KeyError:
            raise KeyError(f"no live entry with insertion number {k}") from None

    def insert(self, value: int) -> int:
        """Insert ``value`` and return its insertion number, starting at 1."""
        self._inserted += 1
        k = self._inserted
        self._values.append(value)
        self._keys.append(k)
        self._position[k] = len(self._values) - 1
        self._up(len(self._values) - 1)
        return k

    def peek_min(self) -> int:
        """Return the smallest value."""
        if not self._values:
            raise IndexError("peek from empty heap")
        return self._values[0]

    def pop_min(self) -> int:
        """Remove and return the smallest value."""
        if not self._values:
            raise IndexError("pop from empty heap")
        value = self._values[0]
        self.delete(self._keys[0])
        return value

    def delete(self, k: int) -> None:
        """Remove the value inserted k-th."""
        i = self._locate(k)
        last = len(self._values) - 1
        self._swap(i, last)
        self._values.pop()
        self._keys.pop()
        del self._position[k]
        if i < len(self._values):
            self._down(i)
            self._up(i)

    def update(self, k: int, value: int) -> None:
        """Replace the value inserted k-th with ``value``."""
        i = self._locate(k)
        self._values[i] = value
        self._down(i)
        self._up(i)


def run_commands(lines: Iterable[str]) -> list[int]:
    """Run heap commands (I x, PM, DM, D k, C k x); return the PM outputs."""
    heap = IndexedHeap()
    output: list[int] = []
    for line in lines:
        parts = line.split()
        if not parts:
            continue
        op, args = parts[0], [int(a) for a in parts[1:]]
        if op == "I":
            heap.insert(*args)
        elif op == "PM":
            output.append(heap.peek_min())
        elif op == "DM":
            heap.pop_min()
        elif op == "D":
            heap.delete(*args)
        elif op == "C":
            heap.update(*args)
        else:
            raise ValueError(f"unknown command {op!r}")
    return output