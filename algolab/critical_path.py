"""Activity-on-edge networks and their critical path."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Any, Iterable, List, Tuple

from .topo_sort import CycleError

INFINITY = 1000


class ActivityNetwork:
    """Directed weighted network held as adjacency lists; new arcs go to the front."""

    def __init__(self, vertices: Iterable[Any] = ()) -> None:
        self._vertices: List[Any] = list(vertices)
        self._arcs: List[List[Tuple[int, int]]] = [[] for _ in self._vertices]

    def _check(self, index: int, name: str = "vertex") -> None:
        if not 0 <= index < len(self._vertices):
            raise IndexError(f"{name} index {index} out of range")

    def insert_arc(self, source: int, target: int, weight: int) -> None:
        """Add an arc of the given weight from source to target."""
        self._check(source, "source")
        self._check(target, "target")
        if source == target:
            raise ValueError("source and target must differ")
        self._arcs[source].insert(0, (target, weight))

    def vertex(self, index: int) -> Any:
        """Return the value of the vertex at index."""
        self._check(index)
        return self._vertices[index]

    def vertex_count(self) -> int:
        return len(self._vertices)

    def in_degrees(self) -> List[int]:
        """Number of arcs entering each vertex."""
        degrees = [0] * len(self._vertices)
        for arcs in self._arcs:
            for target, _ in arcs:
                degrees[target] += 1
        return degrees

    def neighbors(self, index: int) -> List[int]:
        """Indices adjacent to index, in list order."""
        self._check(index)
        return [target for target, _ in self._arcs[index]]

    def weight(self, source: int, target: int) -> int:
        """Weight of the arc from source to target, or INFINITY if there is none."""
        self._check(source, "source")
        self._check(target, "target")
        for adjacent, weight in self._arcs[source]:
            if adjacent == target:
                return weight
        return INFINITY

    def render(self) -> str:
        """Each vertex with its (target, weight) pairs, then a line of in-degrees."""
        lines = [
            f"{value}: " + "".join(f"({t},{w}) " for t, w in arcs)
            for value, arcs in zip(self._vertices, self._arcs)
        ]
        lines.append("".join(f"{d} " for d in self.in_degrees()))
        return "".join(line + "\n" for line in lines)


@dataclass
class CriticalPathResult:
    """Earliest and latest event times per vertex and the critical activities."""

    earliest: List[int] = field(default_factory=list)
    latest: List[int] = field(default_factory=list)
    activities: List[Tuple[Any, Any]] = field(default_factory=list)


def critical_path(network: ActivityNetwork) -> CriticalPathResult:
    """Compute event times and the activities whose slack is zero.

    Raises CycleError if the network holds a directed cycle.
    """
    count = network.vertex_count()
    if count == 0:
        return CriticalPathResult()
    degrees = network.in_degrees()
    queue = deque(index for index, degree in enumerate(degrees) if degree == 0)
    order: List[int] = []
    earliest = [0] * count
    while queue:
        current = queue.popleft()
        order.append(current)
        for target in network.neighbors(current):
            degrees[target] -= 1
            if degrees[target] == 0:
                queue.append(target)
            earliest[target] = max(
                earliest[target], earliest[current] + network.weight(current, target)
            )
    if len(order) < count:
        raise CycleError([network.vertex(index) for index in order])

    finish = earliest[order[-1]]
    latest = [finish] * count
    for current in reversed(order[:-1]):
        for target in network.neighbors(current):
            latest[current] = min(
                latest[current], latest[target] - network.weight(current, target)
            )

    activities = [
        (network.vertex(source), network.vertex(target))
        for source in range(count)
        for target in network.neighbors(source)
        if earliest[source] == latest[target] - network.weight(source, target)
    ]
    return CriticalPathResult(earliest, latest, activities)