import itertools

import pytest

from algokit.knapsack import max_fill, min_remaining_space


def test_classic_box_example():
    assert min_remaining_space(24, [8, 3, 12, 7, 9, 7]) == 0


def _brute(capacity, volumes):
    best = 0
    for r in range(len(volumes) + 1):
        for combo in itertools.combinations(volumes, r):
            if sum(combo) <= capacity:
                best = max(best, sum(combo))
    return best


@pytest.mark.parametrize(
    "capacity, volumes",
    [
        (10, [3, 5, 7]),
        (1, [2, 3]),
        (100, [13, 27, 41, 9, 2]),
        (17, [4, 4, 4, 4, 4]),
        (0, [1, 2]),
    ],
)
def test_matches_brute_force(capacity, volumes):
    assert max_fill(capacity, volumes) == _brute(capacity, volumes)
    assert min_remaining_space(capacity, volumes) == capacity - _brute(capacity, volumes)


def test_no_items_leaves_box_empty():
    assert max_fill(20, []) == 0
    assert min_remaining_space(20, []) == 20


def test_items_exactly_fill():
    assert max_fill(15, [5, 10]) == 15


def test_each_item_used_once():
    assert max_fill(10, [3]) == 3


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        max_fill(-1, [1])


def test_negative_volume_rejected():
    with pytest.raises(ValueError):
        max_fill(5, [2, -1])