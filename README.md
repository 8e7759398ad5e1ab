# algokit

A small collection of classic algorithms and data structures written in plain
Python with no third-party dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `algokit.disjoint_set` | `DisjointSet(size)` over `0 .. size - 1` with path compression: `find`, `union`, `connected`; out-of-range elements raise `IndexError` |
| `algokit.gauss` | `solve_linear_system` using Gaussian elimination with partial pivoting; raises `NoSolutionError` or `InfiniteSolutionsError` (both subclasses of `GaussError`) |
| `algokit.strings` | `bkdr_hash` (signed 64-bit, base 19 by default), `count_hash_matches`, `prefix_function`, `kmp_count` (overlapping occurrences), `longest_palindrome_length` (Manacher) |
| `algokit.trie` | `Trie` with `insert` and `has_prefix`, which tells whether a string is a prefix of some inserted word |
| `algokit.heap` | `IndexedHeap`, a min-heap whose entries can be deleted or updated by insertion number (`insert`, `peek_min`, `pop_min`, `delete`, `update`), plus `run_commands` for a text command stream |
| `algokit.knapsack` | `max_fill` and `min_remaining_space` for the 0/1 box-filling problem |
| `algokit.maze` | `solve_maze`, breadth-first search on a 0/1 grid from the top-left to the bottom-right cell, returning a `MazeResult` with `distance`, `path` and `reachable` |
| `algokit.queens` | `solve_by_rows` and `solve_by_cells`, generators of N-queens boards, and `format_board` |
| `algokit.graph` | `topological_order` (raises `CycleError`) and `bfs_distance` on unweighted undirected graphs |
| `algokit.shortest_path` | `bellman_ford` with a limit on the number of edges, `floyd_warshall`, and `has_negative_cycle` (SPFA) |
| `algokit.mst` | `kruskal` minimum spanning tree weight; raises `DisconnectedGraphError` |

## Examples

```python
from algokit.disjoint_set import DisjointSet

sets = DisjointSet(10)
sets.union(1, 2)
sets.union(2, 3)
sets.connected(1, 3)   # True
sets.connected(1, 4)   # False
```

```python
from algokit.knapsack import min_remaining_space

# A box of volume 24 and six items: the box can be filled exactly.
min_remaining_space(24, [8, 3, 12, 7, 9, 7])   # 0
```

```python
from algokit.trie import Trie

trie = Trie()
trie.insert("apple")
trie.has_prefix("app")   # True
trie.has_prefix("apt")   # False
```

```python
from algokit.gauss import solve_linear_system, GaussError

try:
    solution = solve_linear_system([[1, 1, 3], [1, -1, 1]])   # [2.0, 1.0]
except GaussError as err:
    print(err)
```

```python
from algokit.heap import run_commands

# I x inserts, PM reports the minimum, DM removes it,
# D k deletes the k-th inserted value, C k x changes it to x.
run_commands(["I 5", "I 3", "PM", "C 2 9", "PM", "D 1", "I 7", "PM"])   # [3, 5, 7]
```

Graph functions take the number of vertices and an iterable of edges; vertices
are numbered from 1. Weighted edges are `(a, b, weight)` triples.

```python
from algokit.graph import topological_order, CycleError

try:
    order = topological_order(3, [(1, 2), (2, 3)])   # [1, 2, 3]
except CycleError:
    order = None
```

`bfs_distance` and `bellman_ford` return `None` when the target cannot be
reached; `floyd_warshall` returns a dict keyed by `(a, b)` with `math.inf` for
unreachable pairs.

## Command line

`algokit-gauss` reads a linear system from a file named on the command line, or
from standard input when no file is given: first the number of unknowns `n`,
then `n` rows of `n + 1` numbers (coefficients followed by the right-hand
side). It prints each unknown with two decimals, or `infinite` when the system
has infinitely many solutions, or `no solution` when it has none.

```
printf '2\n1 1 3\n1 -1 1\n' | algokit-gauss
```

## What it does not do

`algokit-gauss` is the only command. Everything else is a library: there are no
commands that read mazes, graphs, heap command streams or word lists from
standard input; call the functions from Python instead.