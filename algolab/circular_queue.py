"""Fixed-capacity circular queue."""

from __future__ import annotations

from typing import Any, Iterator, List

DEFAULT_CAPACITY = 10


class CircularQueue:
    """First-in first-out queue in a ring of fixed size."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self._slots: List[Any] = [None] * capacity
        self._front = 0
        self._count = 0

    @property
    def capacity(self) -> int:
        return len(self._slots)

    def enqueue(self, item: Any) -> None:
        """Add item at the rear; raise OverflowError when full."""
        if self._count == len(self._slots):
            raise OverflowError("queue is full")
        self._slots[(self._front + self._count) % len(self._slots)] = item
        self._count += 1

    def dequeue(self) -> Any:
        """Remove and return the front item; raise IndexError when empty."""
        if not self._count:
            raise IndexError("dequeue from empty queue")
        item = self._slots[self._front]
        self._slots[self._front] = None
        self._front = (self._front + 1) % len(self._slots)
        self._count -= 1
        return item

    def is_empty(self) -> bool:
        return self._count == 0

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[Any]:
        size = len(self._slots)
        for offset in range(self._count):
            yield self._slots[(self._front + offset) % size]