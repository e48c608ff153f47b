import pytest

from algolab.min_heap import MinHeap

VALUES = [23, 31, 49, 31, 6, 19, 46, 12]


def _is_heap(items):
    return all(
        not items[child] < items[(child - 1) // 2] for child in range(1, len(items))
    )


def test_build_satisfies_heap_property():
    heap = MinHeap(VALUES, capacity=10)
    assert _is_heap(list(heap))
    assert sorted(heap) == sorted(VALUES)


def test_pop_yields_ascending_order():
    heap = MinHeap(VALUES, capacity=10)
    assert [heap.pop() for _ in range(len(VALUES))] == sorted(VALUES)
    assert len(heap) == 0


def test_push_keeps_heap_property():
    heap = MinHeap(capacity=10)
    for value in VALUES:
        heap.push(value)
        assert _is_heap(list(heap))
    assert heap.pop() == min(VALUES)


def test_str_lists_array_order():
    assert str(MinHeap([3, 1, 2], capacity=5)) == "1 3 2 "


def test_full_heap_raises():
    heap = MinHeap([1, 2], capacity=2)
    with pytest.raises(OverflowError):
        heap.push(0)


def test_empty_heap_raises():
    with pytest.raises(IndexError):
        MinHeap().pop()


@pytest.mark.parametrize("items, capacity", [([], 0), ([1, 2, 3], 2)])
def test_bad_construction(items, capacity):
    with pytest.raises(ValueError):
        MinHeap(items, capacity)