"""Topological ordering of a directed graph."""

from __future__ import annotations

from typing import Any, List

from .graph import DirectedGraph


class CycleError(ValueError):
    """Raised when the graph holds a directed cycle; order keeps the vertices output so far."""

    def __init__(self, order: List[Any]) -> None:
        super().__init__("the graph contains a directed cycle")
        self.order = order


def topological_order(graph: DirectedGraph) -> List[Any]:
    """Return the vertices in topological order.

    Vertices of in-degree zero wait on a stack, so the most recently
    freed vertex is output first.
    """
    degrees = graph.in_degrees()
    stack = [index for index, degree in enumerate(degrees) if degree == 0]
    order: List[Any] = []
    while stack:
        current = stack.pop()
        order.append(graph.vertex(current))
        for target in graph.neighbors(current):
            degrees[target] -= 1
            if degrees[target] == 0:
                stack.append(target)
    if len(order) < graph.vertex_count():
        raise CycleError(order)
    return order