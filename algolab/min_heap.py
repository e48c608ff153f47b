"""Bounded binary min-heap."""

from __future__ import annotations

from typing import Any, Iterable, Iterator, List

DEFAULT_CAPACITY = 10


class MinHeap:
    """Min-heap in an array with a fixed capacity; items need only support <."""

    def __init__(self, items: Iterable[Any] = (), capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity <= 0:
            raise ValueError("heap capacity must be at least 1")
        self._heap: List[Any] = list(items)
        if len(self._heap) > capacity:
            raise ValueError("more items than capacity")
        self._capacity = capacity
        for start in range((len(self._heap) - 2) // 2, -1, -1):
            self._sift_down(start)

    def _sift_down(self, start: int) -> None:
        heap = self._heap
        size = len(heap)
        item = heap[start]
        i, child = start, 2 * start + 1
        while child < size:
            if child + 1 < size and heap[child + 1] < heap[child]:
                child += 1
            if not heap[child] < item:
                break
            heap[i] = heap[child]
            i, child = child, 2 * child + 1
        heap[i] = item

    def _sift_up(self, end: int) -> None:
        heap = self._heap
        item = heap[end]
        i = end
        while i > 0:
            parent = (i - 1) // 2
            if not item < heap[parent]:
                break
            heap[i] = heap[parent]
            i = parent
        heap[i] = item

    def push(self, item: Any) -> None:
        """Add item; raise OverflowError when full."""
        if len(self._heap) == self._capacity:
            raise OverflowError("heap is full")
        self._heap.append(item)
        self._sift_up(len(self._heap) - 1)

    def pop(self) -> Any:
        """Remove and return the smallest item; raise IndexError when empty."""
        if not self._heap:
            raise IndexError("pop from empty heap")
        top = self._heap[0]
        last = self._heap.pop()
        if self._heap:
            self._heap[0] = last
            self._sift_down(0)
        return top

    def __len__(self) -> int:
        return len(self._heap)

    def __iter__(self) -> Iterator[Any]:
        """Items in array order."""
        return iter(list(self._heap))

    def __str__(self) -> str:
        return "".join(f"{item} " for item in self._heap)