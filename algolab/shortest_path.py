"""Shortest paths in directed networks: Bellman-Ford, Dijkstra and Floyd."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Optional

from .networks import Network


def _walk(vertices: List[Any], previous: List[Optional[int]], source: int, target: int) -> List[Any]:
    if target == source:
        return [vertices[source]]
    if previous[target] is None:
        raise ValueError(f"{vertices[target]!r} cannot be reached from {vertices[source]!r}")
    route = [target]
    current = target
    while previous[current] is not None and len(route) <= len(vertices):
        current = previous[current]  # type: ignore[assignment]
        route.append(current)
    return [vertices[index] for index in reversed(route)]


@dataclass
class SingleSourcePaths:
    """Distances and predecessors from one start vertex."""

    vertices: List[Any]
    start: int
    distances: List[int]
    previous: List[Optional[int]]
    infinity: int

    def route(self, target: int) -> List[Any]:
        """Vertex values along the shortest path from start to target."""
        if not 0 <= target < len(self.vertices):
            raise IndexError(f"vertex index {target} out of range")
        return _walk(self.vertices, self.previous, self.start, target)


@dataclass
class AllPairsPaths:
    """Distances and predecessors between every pair of vertices."""

    vertices: List[Any]
    distances: List[List[int]]
    previous: List[List[Optional[int]]]
    infinity: int

    def route(self, source: int, target: int) -> List[Any]:
        """Vertex values along the shortest path from source to target."""
        for index in (source, target):
            if not 0 <= index < len(self.vertices):
                raise IndexError(f"vertex index {index} out of range")
        return _walk(self.vertices, self.previous[source], source, target)


def _initial(network: Network, start: int):
    count = network.vertex_count()
    network.vertex(start)
    infinity = network.infinity
    distances = [network.weight(start, i) if i != start else 0 for i in range(count)]
    previous: List[Optional[int]] = [
        start if i != start and distances[i] != infinity else None for i in range(count)
    ]
    return count, infinity, distances, previous


def bellman_ford(network: Network, start: int = 0) -> SingleSourcePaths:
    """Single-source shortest paths allowing negative arc weights."""
    count, infinity, distances, previous = _initial(network, start)
    for _ in range(2, count):
        snapshot = list(distances)
        for source in range(count):
            if source == start or snapshot[source] == infinity:
                continue
            for target in network.neighbors(source):
                candidate = snapshot[source] + network.weight(source, target)
                if candidate < distances[target]:
                    distances[target] = candidate
                    previous[target] = source
    vertices = [network.vertex(i) for i in range(count)]
    return SingleSourcePaths(vertices, start, distances, previous, infinity)


def dijkstra(network: Network, start: int = 0) -> SingleSourcePaths:
    """Single-source shortest paths for non-negative arc weights."""
    count, infinity, distances, previous = _initial(network, start)
    settled = [False] * count
    settled[start] = True
    for _ in range(1, count):
        best, chosen = infinity, None
        for index in range(count):
            if not settled[index] and distances[index] < best:
                best, chosen = distances[index], index
        if chosen is None:
            break
        settled[chosen] = True
        for target in network.neighbors(chosen):
            candidate = best + network.weight(chosen, target)
            if not settled[target] and candidate < distances[target]:
                distances[target] = candidate
                previous[target] = chosen
    vertices = [network.vertex(i) for i in range(count)]
    return SingleSourcePaths(vertices, start, distances, previous, infinity)


def floyd(network: Network) -> AllPairsPaths:
    """Shortest paths between every pair of vertices."""
    count = network.vertex_count()
    infinity = network.infinity
    distances = [
        [network.weight(i, j) if i != j else 0 for j in range(count)] for i in range(count)
    ]
    previous: List[List[Optional[int]]] = [
        [i if i != j and distances[i][j] != infinity else None for j in range(count)]
        for i in range(count)
    ]
    for k in range(count):
        for i in range(count):
            if i == k or distances[i][k] == infinity:
                continue
            for j in range(count):
                if j == k or i == j or distances[k][j] == infinity:
                    continue
                candidate = distances[i][k] + distances[k][j]
                if candidate < distances[i][j]:
                    distances[i][j] = candidate
                    previous[i][j] = previous[k][j]
    vertices = [network.vertex(i) for i in range(count)]
    return AllPairsPaths(vertices, distances, previous, infinity)