"""Disjoint sets with union by size."""

from __future__ import annotations

from typing import Dict, Generic, Hashable, Iterable, List, TypeVar

T = TypeVar("T", bound=Hashable)


class UnionFind(Generic[T]):
    """Equivalence classes over a fixed set of items.

    A root stores minus the size of its class; any other entry stores the
    index of its parent.
    """

    def __init__(self, items: Iterable[T]) -> None:
        self._items: List[T] = list(items)
        self._parents: List[int] = [-1] * len(self._items)
        self._index: Dict[T, int] = {}
        for position, item in enumerate(self._items):
            self._index.setdefault(item, position)

    def find_root(self, item: T) -> int:
        """Return the index of the root of item's class; raise KeyError if unknown."""
        index = self._index[item]
        while self._parents[index] > -1:
            index = self._parents[index]
        return index

    def union(self, first: T, second: T) -> None:
        """Merge the classes of two items, hanging the smaller under the larger."""
        root_a = self.find_root(first)
        root_b = self.find_root(second)
        if root_a == root_b:
            return
        if self._parents[root_a] > self._parents[root_b]:
            self._parents[root_b] += self._parents[root_a]
            self._parents[root_a] = root_b
        else:
            self._parents[root_a] += self._parents[root_b]
            self._parents[root_b] = root_a

    def is_different(self, first: T, second: T) -> bool:
        """True when the two items lie in different classes."""
        return self.find_root(first) != self.find_root(second)

    def __str__(self) -> str:
        pairs = ",".join(f"({parent},{item})" for parent, item in zip(self._parents, self._items))
        return f"[{pairs}]"