"""Comparison sorts: straight insertion, binary insertion, bubble and quick sort.

Every function leaves its argument untouched and returns a new ascending list.
"""

from __future__ import annotations

from typing import Iterable, List, TypeVar

T = TypeVar("T")


def straight_insert_sort(items: Iterable[T]) -> List[T]:
    """Sort by shifting each element left past every larger predecessor."""
    result = list(items)
    for i in range(1, len(result)):
        current = result[i]
        j = i - 1
        while j >= 0 and current < result[j]:
            result[j + 1] = result[j]
            j -= 1
        result[j + 1] = current
    return result


def binary_insert_sort(items: Iterable[T]) -> List[T]:
    """Sort by inserting each element at a position found by binary search.

    When an equal element is met during the search, the new one goes
    directly after it.
    """
    result: List[T] = []
    for item in items:
        low, high = 0, len(result) - 1
        position = None
        while low <= high:
            mid = (low + high) // 2
            if result[mid] == item:
                position = mid + 1
                break
            if result[mid] < item:
                low = mid + 1
            else:
                high = mid - 1
        result.insert(low if position is None else position, item)
    return result


def bubble_sort(items: Iterable[T]) -> List[T]:
    """Sort by repeatedly swapping adjacent out-of-order pairs."""
    result = list(items)
    n = len(result)
    for done in range(n - 1):
        swapped = False
        for j in range(n - done - 1):
            if result[j] > result[j + 1]:
                result[j], result[j + 1] = result[j + 1], result[j]
                swapped = True
        if not swapped:
            break
    return result


def _partition(values: list, low: int, high: int) -> int:
    """Place values[low] at its final position within [low, high] and return it."""
    pivot = values[low]
    i, j = low, high
    while i < j:
        while i < j and values[j] >= pivot:
            j -= 1
        if i < j:
            values[i] = values[j]
            i += 1
        while i < j and values[i] <= pivot:
            i += 1
        if i < j:
            values[j] = values[i]
            j -= 1
    values[i] = pivot
    return i


def quick_sort(items: Iterable[T]) -> List[T]:
    """Sort by recursive partitioning around the first element of each range."""
    result = list(items)
    pending = [(0, len(result) - 1)] if len(result) > 1 else []
    while pending:
        low, high = pending.pop()
        middle = _partition(result, low, high)
        if middle - 1 > low:
            pending.append((low, middle - 1))
        if middle + 1 < high:
            pending.append((middle + 1, high))
    return result