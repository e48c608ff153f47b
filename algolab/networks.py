"""Weighted networks stored as adjacency matrices, directed and undirected."""

from __future__ import annotations

from typing import Any, Iterable, List, Optional

DEFAULT_INFINITY = 100


class Network:
    """Directed weighted network; a missing arc carries the weight ``infinity``."""

    _symmetric = False

    def __init__(self, vertices: Iterable[Any] = (), infinity: int = DEFAULT_INFINITY) -> None:
        self._vertices: List[Any] = list(vertices)
        self._infinity = infinity
        size = len(self._vertices)
        self._weights: List[List[int]] = [[infinity] * size for _ in range(size)]

    @property
    def infinity(self) -> int:
        """The weight that marks the absence of an arc."""
        return self._infinity

    def _check(self, index: int, name: str = "vertex") -> None:
        if not 0 <= index < len(self._vertices):
            raise IndexError(f"{name} index {index} out of range")

    def _validate(self, source: int, target: int, weight: int) -> None:
        self._check(source, "source")
        self._check(target, "target")
        if source == target:
            raise ValueError("source and target must differ")
        if weight == self._infinity:
            raise ValueError("weight must differ from infinity")

    def insert_arc(self, source: int, target: int, weight: int) -> None:
        """Set the weight of the arc from source to target."""
        self._validate(source, target, weight)
        self._weights[source][target] = weight

    def vertex(self, index: int) -> Any:
        """Return the value of the vertex at index."""
        self._check(index)
        return self._vertices[index]

    def vertex_count(self) -> int:
        return len(self._vertices)

    def arc_count(self) -> int:
        """Number of arcs; an undirected edge counts once."""
        present = sum(
            weight != self._infinity for row in self._weights for weight in row
        )
        return present // 2 if self._symmetric else present

    def weight(self, source: int, target: int) -> int:
        """Weight of the arc from source to target, or infinity if there is none."""
        self._check(source, "source")
        self._check(target, "target")
        return self._weights[source][target]

    def first_adjacent(self, index: int) -> Optional[int]:
        """Lowest index adjacent to index, or None."""
        return self.next_adjacent(index, -1)

    def next_adjacent(self, index: int, after: int) -> Optional[int]:
        """Lowest index above after that is adjacent to index, or None."""
        self._check(index)
        row = self._weights[index]
        for target in range(after + 1, len(row)):
            if row[target] != self._infinity:
                return target
        return None

    def neighbors(self, index: int) -> List[int]:
        """Indices adjacent to index, in ascending order."""
        self._check(index)
        return [t for t, w in enumerate(self._weights[index]) if w != self._infinity]

    def render(self) -> str:
        """The weight matrix, one bracketed line per row."""
        return "".join(
            "[ " + "".join(f"{weight} " for weight in row) + "]\n"
            for row in self._weights
        )


class DirectedNetwork(Network):
    """Network whose arcs run one way."""


class UndirectedNetwork(Network):
    """Network whose edges carry the same weight in both directions."""

    _symmetric = True

    def insert_arc(self, source: int, target: int, weight: int) -> None:
        """Set the weight of the edge between source and target."""
        self._validate(source, target, weight)
        self._weights[source][target] = weight
        self._weights[target][source] = weight