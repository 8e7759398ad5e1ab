"""Shortest path through a grid maze by breadth-first search."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Sequence

Cell = tuple[int, int]

_STEPS: tuple[Cell, ...] = ((-1, 0), (0, 1), (1, 0), (0, -1))


@dataclass(frozen=True)
class MazeResult:
    """Outcome of a maze search.

    ``distance`` is the number of steps from the top-left to the bottom-right
    cell, or ``None`` when the exit cannot be reached. ``path`` lists the cells
    from the start to the exit, both included, and is empty when unreachable.
    """

    distance: int | None
    path: tuple[Cell, ...]

    @property
    def reachable(self) -> bool:
        return self.distance is not None


def solve_maze(grid: Sequence[Sequence[int]]) -> MazeResult:
    """Find a shortest route from ``(0, 0)`` to the bottom-right cell.

    Cells holding ``0`` are open, any other value is a wall. The start cell is
    always entered, as the search begins there.
    """
    rows = len(grid)
    if rows == 0 or len(grid[0]) == 0:
        raise ValueError("the maze must have at least one cell")
    cols = len(grid[0])
    if any(len(row) != cols for row in grid):
        raise ValueError("every row of the maze must have the same length")

    start: Cell = (0, 0)
    distance: dict[Cell, int] = {start: 0}
    previous: dict[Cell, Cell] = {}
    queue: deque[Cell] = deque([start])

    while queue:
        x, y = current = queue.popleft()
        for dx, dy in _STEPS:
            nx, ny = x + dx, y + dy
            nxt = (nx, ny)
            if (
                0 <= nx < rows
                and 0 <= ny < cols
                and grid[nx][ny] == 0
                and nxt not in distance
            ):
                distance[nxt] = distance[current] + 1
                previous[nxt] = current
                queue.append(nxt)

    exit_cell: Cell = (rows - 1, cols - 1)
    if exit_cell not in distance:
        return MazeResult(None, ())

    path = [exit_cell]
    while path[-1] != start:
        path.append(previous[path[-1]])
    path.reverse()
    return MazeResult(distance[exit_cell], tuple(path))