import pytest

from algokit.mst import DisconnectedGraphError, kruskal


def test_triangle():
    assert kruskal(3, [(1, 2, 1), (2, 3, 2), (1, 3, 3)]) == 3


def test_single_edge():
    assert kruskal(2, [(1, 2, 7)]) == 7


def test_parallel_edges_take_lightest():
    assert kruskal(2, [(1, 2, 9), (2, 1, 4), (1, 2, 6)]) == 4


def test_single_node_has_zero_weight():
    assert kruskal(1, []) == 0


def test_tree_input_weight_is_sum():
    edges = [(1, 2, 5), (1, 3, -2), (3, 4, 8), (3, 5, 1)]
    assert kruskal(5, edges) == sum(w for _, _, w in edges)


def test_adding_edges_never_increases_weight():
    base = [(1, 2, 5), (2, 3, 5), (3, 4, 5)]
    extra = base + [(1, 4, 1), (2, 4, 2)]
    assert kruskal(4, extra) <= kruskal(4, base)


def test_weight_independent_of_edge_order():
    edges = [(1, 2, 3), (2, 3, 1), (3, 4, 4), (1, 4, 2), (2, 4, 5)]
    assert kruskal(4, edges) == kruskal(4, list(reversed(edges)))


def test_disconnected_graph_raises():
    with pytest.raises(DisconnectedGraphError):
        kruskal(4, [(1, 2, 1), (3, 4, 1)])


def test_unknown_node_rejected():
    with pytest.raises(ValueError):
        kruskal(2, [(1, 3, 1)])