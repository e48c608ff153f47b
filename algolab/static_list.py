"""Static linked list: nodes live in a fixed array and link by index."""

from __future__ import annotations

from typing import Any, Iterator, List

DEFAULT_CAPACITY = 30
_END = -1


class StaticList:
    """Linked list whose links are array indices.

    Slot 0 is the head and holds no data, so a list with capacity n
    stores at most n - 1 elements. Free slots form a chain of their own.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 2:
            raise ValueError("capacity must be at least 2")
        self._data: List[Any] = [None] * capacity
        self._next: List[int] = [index + 1 for index in range(capacity)]
        self._next[0] = _END
        self._next[-1] = _END
        self._head = 0
        self._avail = 1
        self._length = 0

    def _take_slot(self) -> int:
        if self._avail == _END:
            raise OverflowError("static list is full")
        slot = self._avail
        self._avail = self._next[slot]
        return slot

    def _slot_before(self, position: int) -> int:
        slot = self._head
        for _ in range(position - 1):
            slot = self._next[slot]
        return slot

    def _link_after(self, before: int, item: Any) -> None:
        slot = self._take_slot()
        self._data[slot] = item
        self._next[slot] = self._next[before]
        self._next[before] = slot
        self._length += 1

    def push_front(self, item: Any) -> None:
        """Insert item as the first element."""
        self._link_after(self._head, item)

    def insert(self, position: int, item: Any) -> None:
        """Insert item so that it ends up at position (1..len+1)."""
        if not 1 <= position <= self._length + 1:
            raise IndexError(f"position {position} out of range 1..{self._length + 1}")
        self._link_after(self._slot_before(position), item)

    def delete(self, position: int) -> Any:
        """Remove and return the element at position, freeing its slot."""
        if not 1 <= position <= self._length:
            raise IndexError(f"position {position} out of range 1..{self._length}")
        before = self._slot_before(position)
        slot = self._next[before]
        self._next[before] = self._next[slot]
        item = self._data[slot]
        self._data[slot] = None
        self._next[slot] = self._avail
        self._avail = slot
        self._length -= 1
        return item

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[Any]:
        slot = self._next[self._head]
        while slot != _END:
            yield self._data[slot]
            slot = self._next[slot]