"""Bounded stack held in contiguous storage."""

from __future__ import annotations

from typing import Any, Iterator, List

DEFAULT_CAPACITY = 30


class SeqStack:
    """Last-in first-out stack that refuses to grow past its capacity."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self._capacity = capacity
        self._items: List[Any] = []

    def is_empty(self) -> bool:
        return not self._items

    def push(self, item: Any) -> None:
        """Place item on top; raise OverflowError when full."""
        if len(self._items) == self._capacity:
            raise OverflowError("stack is full")
        self._items.append(item)

    def pop(self) -> Any:
        """Remove and return the top item; raise IndexError when empty."""
        if not self._items:
            raise IndexError("pop from empty stack")
        return self._items.pop()

    def top(self) -> Any:
        """Return the top item without removing it."""
        if not self._items:
            raise IndexError("top of empty stack")
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Items from top to bottom."""
        return reversed(list(self._items))