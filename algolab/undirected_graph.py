"""Undirected graph stored as adjacency lists, with depth- and breadth-first traversal."""

from __future__ import annotations

from collections import deque
from typing import Any, Iterable, Iterator, List, Optional

DEFAULT_CAPACITY = 4


class UndirectedGraph:
    """Undirected graph whose edges are recorded in both endpoints' lists."""

    def __init__(self, vertices: Iterable[Any] = (), capacity: Optional[int] = None) -> None:
        self._vertices: List[Any] = list(vertices)
        if capacity is None:
            capacity = max(DEFAULT_CAPACITY, len(self._vertices))
        if len(self._vertices) > capacity:
            raise ValueError("more vertices than capacity")
        self._capacity = capacity
        self._arcs: List[List[int]] = [[] for _ in self._vertices]

    @property
    def capacity(self) -> int:
        return self._capacity

    def _check(self, index: int) -> None:
        if not 0 <= index < len(self._vertices):
            raise IndexError(f"vertex index {index} out of range")

    def insert_arc(self, first: int, second: int) -> None:
        """Add an edge, placing each endpoint at the front of the other's list."""
        self._check(first)
        self._check(second)
        if first == second:
            raise ValueError("endpoints must differ")
        self._arcs[first].insert(0, second)
        self._arcs[second].insert(0, first)

    def neighbors(self, index: int) -> List[int]:
        """Indices adjacent to index, in list order."""
        self._check(index)
        return list(self._arcs[index])

    def render(self) -> str:
        """Each vertex followed by the indices of its neighbours."""
        return "".join(
            f"{value}: " + "".join(f"{t} " for t in arcs) + "\n"
            for value, arcs in zip(self._vertices, self._arcs)
        )

    def _dfs_from(self, start: int, visited: List[bool]) -> List[Any]:
        order = [self._vertices[start]]
        visited[start] = True
        stack: List[Iterator[int]] = [iter(self._arcs[start])]
        while stack:
            for nxt in stack[-1]:
                if not visited[nxt]:
                    visited[nxt] = True
                    order.append(self._vertices[nxt])
                    stack.append(iter(self._arcs[nxt]))
                    break
            else:
                stack.pop()
        return order

    def _bfs_from(self, start: int, visited: List[bool]) -> List[Any]:
        order = [self._vertices[start]]
        visited[start] = True
        queue = deque([start])
        while queue:
            current = queue.popleft()
            for nxt in self._arcs[current]:
                if not visited[nxt]:
                    visited[nxt] = True
                    order.append(self._vertices[nxt])
                    queue.append(nxt)
        return order

    def _components(self, visit) -> List[List[Any]]:
        visited = [False] * len(self._vertices)
        return [
            visit(start, visited)
            for start in range(len(self._vertices))
            if not visited[start]
        ]

    def dfs(self) -> List[List[Any]]:
        """Depth-first order, one list per connected component."""
        return self._components(self._dfs_from)

    def bfs(self) -> List[List[Any]]:
        """Breadth-first order, one list per connected component."""
        return self._components(self._bfs_from)