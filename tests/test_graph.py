import pytest

from algokit.graph import CycleError, bfs_distance, topological_order


def _assert_topological(n, edges, order):
    assert sorted(order) == list(range(1, n + 1))
    position = {node: i for i, node in enumerate(order)}
    for a, b in edges:
        assert position[a] < position[b]


def test_chain_has_forced_order():
    assert topological_order(3, [(1, 2), (2, 3)]) == [1, 2, 3]


def test_reverse_chain():
    assert topological_order(3, [(3, 2), (2, 1)]) == [3, 2, 1]


def test_dag_order_respects_edges():
    edges = [(1, 2), (1, 3), (3, 4), (2, 4), (5, 4), (5, 1)]
    order = topological_order(5, edges)
    _assert_topological(5, edges, order)


def test_isolated_nodes_ascending():
    assert topological_order(4, []) == [1, 2, 3, 4]


def test_cycle_raises():
    with pytest.raises(CycleError):
        topological_order(3, [(1, 2), (2, 3), (3, 1)])


def test_self_loop_raises():
    with pytest.raises(CycleError):
        topological_order(2, [(1, 1)])


def test_topological_rejects_unknown_node():
    with pytest.raises(ValueError):
        topological_order(2, [(1, 3)])


def test_bfs_distance_on_path():
    edges = [(1, 2), (2, 3), (3, 4)]
    assert bfs_distance(4, edges) == 3


def test_bfs_distance_is_symmetric_and_undirected():
    edges = [(2, 1), (3, 2), (4, 3), (1, 5), (5, 4)]
    forward = bfs_distance(5, edges, 1, 4)
    backward = bfs_distance(5, edges, 4, 1)
    assert forward == backward
    assert forward <= bfs_distance(5, edges, 1, 3) + 1


def test_bfs_distance_shortcut_shortens():
    path = [(1, 2), (2, 3), (3, 4), (4, 5)]
    longer = bfs_distance(5, path)
    shorter = bfs_distance(5, path + [(1, 5)])
    assert shorter == 1
    assert shorter < longer


def test_bfs_distance_same_node():
    assert bfs_distance(3, [(1, 2)], 2, 2) == 0


def test_bfs_distance_unreachable():
    assert bfs_distance(4, [(1, 2), (3, 4)]) is None


def test_bfs_distance_rejects_unknown_node():
    with pytest.raises(ValueError):
        bfs_distance(3, [(1, 2)], 0, 3)