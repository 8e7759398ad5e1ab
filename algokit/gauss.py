"""Gaussian elimination with partial pivoting."""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

EPS = 1e-6


class GaussError(ArithmeticError):
    """The system has no unique solution."""


class NoSolutionError(GaussError):
    """The system is inconsistent."""


class InfiniteSolutionsError(GaussError):
    """The system has infinitely many solutions."""


def solve_linear_system(augmented: Sequence[Sequence[float]]) -> list[float]:
    """Solve an ``n x (n + 1)`` augmented system and return the unknowns."""
    n = len(augmented)
    rows = [[float(v) for v in row] for row in augmented]
    if any(len(row) != n + 1 for row in rows):
        raise ValueError(f"every row must have {n + 1} entries")

    r = 0
    for c in range(n):
        t = max(range(r, n), key=lambda i: abs(rows[i][c]))
        if abs(rows[t][c]) < EPS:
            continue
        rows[t], rows[r] = rows[r], rows[t]

        pivot_row = rows[r]
        pivot = pivot_row[c]
        for j in range(c, n + 1):
            pivot_row[j] /= pivot

        for row in rows[r + 1:]:
            factor = row[c]
            if abs(factor) > EPS:
                for j in range(c, n + 1):
                    row[j] -= pivot_row[j] * factor
        r += 1

    if r < n:
        if any(abs(row[n]) > EPS for row in rows[r:]):
            raise NoSolutionError("no solution")
        raise InfiniteSolutionsError("infinite")

    for i in range(n - 1, -1, -1):
        for j in range(i + 1, n):
            rows[i][n] -= rows[i][j] * rows[j][n]

    return [row[n] for row in rows]


def _parse(text: str) -> list[list[float]]:
    tokens = text.split()
    if not tokens:
        raise ValueError("missing system size")
    n = int(tokens[0])
    values = [float(tok) for tok in tokens[1:1 + n * (n + 1)]]
    if len(values) != n * (n + 1):
        raise ValueError("not enough coefficients")
    width = n + 1
    return [values[i * width:(i + 1) * width] for i in range(n)]


def main(argv: Sequence[str] | None = None) -> int:
    """Read a system, solve it and print the result."""
    parser = argparse.ArgumentParser(description="Solve a linear system.")
    parser.add_argument("file", nargs="?", help="input file (default: stdin)")
    args = parser.parse_args(argv)

    if args.file:
        with open(args.file, encoding="utf-8") as handle:
            text = handle.read()
    else:
        text = sys.stdin.read()

    try:
        solution = solve_linear_system(_parse(text))
    except InfiniteSolutionsError:
        sys.stdout.write("infinite")
    except NoSolutionError:
        sys.stdout.write("no solution")
    else:
        for value in solution:
            sys.stdout.write(f"{value:.2f}\n")
    return 0