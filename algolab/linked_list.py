"""Singly linked list with a head sentinel and 1-based positions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Optional


@dataclass(slots=True)
class _Node:
    value: Any = None
    next: Optional["_Node"] = None


class LinkedList:
    """A chain of nodes addressed by position, counting from 1."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._head = _Node()
        self._length = 0
        tail = self._head
        for item in items:
            tail.next = _Node(item)
            tail = tail.next
            self._length += 1

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[Any]:
        node = self._head.next
        while node is not None:
            yield node.value
            node = node.next

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def _node_at(self, position: int) -> _Node:
        node = self._head
        for _ in range(position):
            node = node.next
        return node

    def _check(self, position: int, upper: int) -> None:
        if not 1 <= position <= upper:
            raise IndexError(f"position {position} out of range 1..{upper}")

    def clear(self) -> None:
        """Remove every element."""
        self._head.next = None
        self._length = 0

    def append(self, item: Any) -> None:
        """Add item after the current last node."""
        tail = self._node_at(self._length)
        tail.next = _Node(item)
        self._length += 1

    def insert(self, position: int, item: Any) -> None:
        """Insert item so that it ends up at position (1..len+1)."""
        self._check(position, self._length + 1)
        before = self._node_at(position - 1)
        before.next = _Node(item, before.next)
        self._length += 1

    def delete(self, position: int) -> Any:
        """Remove and return the element at position."""
        self._check(position, self._length)
        before = self._node_at(position - 1)
        target = before.next
        before.next = target.next
        self._length -= 1
        return target.value

    def locate(self, item: Any) -> int:
        """Return the position of the first element equal to item."""
        for position, value in enumerate(self, start=1):
            if value == item:
                return position
        raise ValueError(f"{item!r} is not in the list")

    def get(self, position: int) -> Any:
        """Return the element at position."""
        self._check(position, self._length)
        return self._node_at(position).value

    def set(self, position: int, item: Any) -> None:
        """Replace the element at position."""
        self._check(position, self._length)
        self._node_at(position).value = item

    def copy(self) -> "LinkedList":
        """Return an independent list with the same elements."""
        return LinkedList(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LinkedList):
            return NotImplemented
        return len(self) == len(other) and list(self) == list(other)