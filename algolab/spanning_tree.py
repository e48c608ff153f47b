"""Minimum spanning trees of undirected networks: Kruskal's and Prim's algorithms."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List

from .min_heap import MinHeap
from .networks import Network
from .union_find import UnionFind


@dataclass(frozen=True)
class SpanEdge:
    """A tree edge between two vertex values; edges order by weight alone."""

    first: Any
    second: Any
    weight: int

    def __lt__(self, other: "SpanEdge") -> bool:
        return self.weight < other.weight

    def __str__(self) -> str:
        return f"({self.first},{self.second}) {self.weight}"


class DisconnectedError(ValueError):
    """Raised when the network is not connected; edges keeps the tree built so far."""

    def __init__(self, edges: List[SpanEdge]) -> None:
        super().__init__("the network is not connected, it has no spanning tree")
        self.edges = edges


def kruskal(network: Network) -> List[SpanEdge]:
    """Return the tree edges in the order Kruskal's algorithm accepts them."""
    count = network.vertex_count()
    vertices = [network.vertex(i) for i in range(count)]
    heap = MinHeap(capacity=max(network.arc_count(), 1))
    for i in range(count):
        for j in network.neighbors(i):
            if i < j:
                heap.push(SpanEdge(vertices[i], vertices[j], network.weight(i, j)))
    sets = UnionFind(vertices)
    tree: List[SpanEdge] = []
    while len(tree) < count - 1:
        if not len(heap):
            raise DisconnectedError(tree)
        edge = heap.pop()
        if sets.is_different(edge.first, edge.second):
            tree.append(edge)
            sets.union(edge.first, edge.second)
    return tree


def prim(network: Network, start: int = 0) -> List[SpanEdge]:
    """Return the tree edges in the order Prim's algorithm adds them from start."""
    count = network.vertex_count()
    if count == 0:
        return []
    network.vertex(start)
    in_tree = [False] * count
    in_tree[start] = True
    low = [network.weight(start, i) if i != start else 0 for i in range(count)]
    near = [start] * count
    tree: List[SpanEdge] = []
    for _ in range(count - 1):
        best, chosen = network.infinity, None
        for index in range(count):
            if not in_tree[index] and low[index] < best:
                best, chosen = low[index], index
        if chosen is None:
            raise DisconnectedError(tree)
        in_tree[chosen] = True
        tree.append(SpanEdge(network.vertex(near[chosen]), network.vertex(chosen), best))
        for k in network.neighbors(chosen):
            weight = network.weight(chosen, k)
            if not in_tree[k] and weight < low[k]:
                low[k] = weight
                near[k] = chosen
    return tree