"""Classic algorithms and data structures in plain Python."""

__version__ = "0.1.0"

__all__ = [
    "disjoint_set",
    "gauss",
    "strings",
    "trie",
    "heap",
    "knapsack",
    "maze",
    "queens",
    "graph",
    "shortest_path",
    "mst",
]