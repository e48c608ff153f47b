import random

import pytest

from algolab.sorting import binary_insert_sort, bubble_sort, quick_sort, straight_insert_sort


def test_demo_array():
    data = [23, 31, 49, 31, 6, 19]
    expected = [6, 19, 23, 31, 31, 49]
    assert binary_insert_sort(data) == expected
    assert bubble_sort(data) == expected
    assert quick_sort(data) == expected
    assert straight_insert_sort(data) == expected


def test_bubble_demo_array():
    data = [46, 31, 6, 19, 23, 31]
    expected = [6, 19, 23, 31, 31, 46]
    assert binary_insert_sort(data) == expected
    assert bubble_sort(data) == expected
    assert quick_sort(data) == expected
    assert straight_insert_sort(data) == expected


def test_input_not_modified():
    data = [5, 3, 9, 1]
    snapshot = list(data)
    assert binary_insert_sort(data) == [1, 3, 5, 9]
    assert bubble_sort(data) == [1, 3, 5, 9]
    assert quick_sort(data) == [1, 3, 5, 9]
    assert straight_insert_sort(data) == [1, 3, 5, 9]
    assert data == snapshot


@pytest.mark.parametrize("data", [[], [7], [2, 1], [1, 1, 1], [3, 2, 1, 0, -1]])
def test_edge_cases(data):
    expected = sorted(data)
    assert binary_insert_sort(data) == expected
    assert bubble_sort(data) == expected
    assert quick_sort(data) == expected
    assert straight_insert_sort(data) == expected


def test_random_lists():
    rng = random.Random(1234)
    for _ in range(50):
        data = [rng.randint(-50, 50) for _ in range(rng.randint(0, 40))]
        expected = sorted(data)
        assert binary_insert_sort(data) == expected
        assert bubble_sort(data) == expected
        assert quick_sort(data) == expected
        assert straight_insert_sort(data) == expected


def test_large_sorted_input():
    data = list(range(300))
    backwards = list(reversed(data))
    assert binary_insert_sort(backwards) == data
    assert bubble_sort(backwards) == data
    assert quick_sort(backwards) == data
    assert straight_insert_sort(backwards) == data