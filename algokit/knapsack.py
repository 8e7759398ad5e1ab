"""0/1 knapsack on volumes: fill a box as full as possible."""

from __future__ import annotations

from typing import Iterable


def max_fill(capacity: int, volumes: Iterable[int]) -> int:
    """Return the largest total of a subset of ``volumes`` not above ``capacity``."""
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    limit = (1 << (capacity + 1)) - 1
    reachable = 1
    for volume in volumes:
        if volume < 0:
            raise ValueError("volumes must not be negative")
        reachable |= (reachable << volume) & limit
    return reachable.bit_length() - 1


def min_remaining_space(capacity: int, volumes: Iterable[int]) -> int:
    """Return the smallest space that can be left empty in the box."""
    return capacity - max_fill(capacity, volumes)