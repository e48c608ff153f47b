"""Hash tables using the division method: open addressing and separate chaining."""

from __future__ import annotations

from enum import Enum
from typing import Iterator, List, Optional


class _Slot(Enum):
    EMPTY = "empty"
    USED = "used"
    DELETED = "deleted"


class ClosedHashTable:
    """Open-addressing table with linear probing and tombstone deletion."""

    def __init__(self, size: int, divisor: int) -> None:
        if size <= 0:
            raise ValueError("size must be positive")
        if not 0 < divisor <= size:
            raise ValueError("divisor must lie between 1 and size")
        self._size = size
        self._divisor = divisor
        self._keys: List[Optional[int]] = [None] * size
        self._tags: List[_Slot] = [_Slot.EMPTY] * size

    def _home(self, key: int) -> int:
        return key % self._divisor

    def _blocks(self, index: int, key: int) -> bool:
        tag = self._tags[index]
        return (tag is _Slot.USED and self._keys[index] != key) or tag is _Slot.DELETED

    def search(self, key: int) -> int:
        """Return the slot holding key; raise KeyError if it is absent."""
        home = self._home(key)
        index, collisions = home, 0
        while collisions < self._size and self._blocks(index, key):
            collisions += 1
            index = (home + collisions) % self._size
        if collisions >= self._size or self._tags[index] is _Slot.EMPTY:
            raise KeyError(key)
        return index

    def insert(self, key: int) -> bool:
        """Store key; return False if already present, raise OverflowError if full."""
        home = self._home(key)
        index, collisions = home, 0
        free: Optional[int] = None
        while collisions < self._size and self._blocks(index, key):
            if free is None and self._tags[index] is _Slot.DELETED:
                free = index
            collisions += 1
            index = (home + collisions) % self._size
        if collisions >= self._size and free is None:
            raise OverflowError("hash table is full")
        if self._tags[index] is _Slot.USED and self._keys[index] == key:
            return False
        target = index if free is None else free
        self._keys[target] = key
        self._tags[target] = _Slot.USED
        return True

    def delete(self, key: int) -> None:
        """Mark the slot of key as deleted; raise KeyError if it is absent."""
        self._tags[self.search(key)] = _Slot.DELETED

    def render(self) -> str:
        """Show every slot: ' * ' deleted, ' # ' empty, the key otherwise."""
        parts = []
        for key, tag in zip(self._keys, self._tags):
            if tag is _Slot.DELETED:
                parts.append(" * ")
            elif tag is _Slot.EMPTY:
                parts.append(" # ")
            else:
                parts.append(f" {key} ")
        return "".join(parts)

    def copy(self) -> "ClosedHashTable":
        """Return an independent table with the same slots."""
        clone = ClosedHashTable(self._size, self._divisor)
        clone._keys = list(self._keys)
        clone._tags = list(self._tags)
        return clone

    def __contains__(self, key: object) -> bool:
        try:
            self.search(key)  # type: ignore[arg-type]
        except KeyError:
            return False
        return True


class OpenHashTable:
    """Separate-chaining table; new keys go to the front of their chain."""

    def __init__(self, divisor: int = 11) -> None:
        if divisor <= 0:
            raise ValueError("divisor must be positive")
        self._divisor = divisor
        self._buckets: List[List[int]] = [[] for _ in range(divisor)]

    def _home(self, key: int) -> int:
        return key % self._divisor

    def find(self, key: int) -> int:
        """Return the bucket holding key; raise KeyError if it is absent."""
        bucket = self._home(key)
        if key not in self._buckets[bucket]:
            raise KeyError(key)
        return bucket

    def insert(self, key: int) -> None:
        """Add key at the head of its chain; raise ValueError if already present."""
        bucket = self._home(key)
        if key in self._buckets[bucket]:
            raise ValueError(f"key {key} already present")
        self._buckets[bucket].insert(0, key)

    def render(self) -> str:
        """One line per bucket: its number, a colon and the chained keys."""
        return "\n".join(
            f"{index}: " + "".join(f"{key} " for key in chain)
            for index, chain in enumerate(self._buckets)
        )

    def __contains__(self, key: object) -> bool:
        try:
            self.find(key)  # type: ignore[arg-type]
        except KeyError:
            return False
        return True

    def __iter__(self) -> Iterator[int]:
        for chain in self._buckets:
            yield from chain