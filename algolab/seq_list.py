"""Bounded sequential list with 1-based positions."""

from __future__ import annotations

from typing import Any, Iterable, Iterator, List

DEFAULT_CAPACITY = 100


class SeqList:
    """A list held in contiguous storage that never grows past its capacity."""

    def __init__(self, items: Iterable[Any] = (), capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._items: List[Any] = list(items)
        if len(self._items) > capacity:
            raise ValueError("more items than capacity")
        self._capacity = capacity

    @property
    def capacity(self) -> int:
        return self._capacity

    def is_empty(self) -> bool:
        return not self._items

    def clear(self) -> None:
        self._items.clear()

    def _ensure_room(self) -> None:
        if len(self._items) == self._capacity:
            raise OverflowError("list is full")

    def _check(self, position: int, upper: int) -> None:
        if not 1 <= position <= upper:
            raise IndexError(f"position {position} out of range 1..{upper}")

    def append(self, item: Any) -> None:
        """Add item at the end."""
        self._ensure_room()
        self._items.append(item)

    def insert(self, position: int, item: Any) -> None:
        """Insert item so that it ends up at position (1..len+1)."""
        self._ensure_room()
        self._check(position, len(self._items) + 1)
        self._items.insert(position - 1, item)

    def delete(self, position: int) -> Any:
        """Remove and return the element at position."""
        self._check(position, len(self._items))
        return self._items.pop(position - 1)

    def get(self, position: int) -> Any:
        self._check(position, len(self._items))
        return self._items[position - 1]

    def set(self, position: int, item: Any) -> None:
        self._check(position, len(self._items))
        self._items[position - 1] = item

    def locate(self, item: Any) -> int:
        """Return the position of the first element equal to item."""
        for position, value in enumerate(self._items, start=1):
            if value == item:
                return position
        raise ValueError(f"{item!r} is not in the list")

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._items))

    def __repr__(self) -> str:
        return f"SeqList({self._items!r}, capacity={self._capacity})"

    def copy(self) -> "SeqList":
        """Return an independent list with the same elements and capacity."""
        return SeqList(self._items, self._capacity)