"""Directed graph stored as adjacency lists, with new arcs placed at the front."""

from __future__ import annotations

import argparse
import sys
from typing import Any, Iterable, Iterator, List, Optional, Sequence

DEFAULT_CAPACITY = 10

_MENU = "\n".join(
    [
        "1. 显示当前有向图",
        "2. 插入顶点",
        "3. 插入弧",
        "4. 删除弧",
        "5. 删除顶点",
        "6. 输出给定顶点v的第一个邻接顶点",
        "7. 输出给定顶点v1关于某一个顶点v2的下一邻接顶点",
        "0. 退出",
    ]
)
_PROMPT = "请选择功能(0~7):"


class DirectedGraph:
    """Directed graph over a bounded number of vertices addressed by index."""

    def __init__(self, vertices: Iterable[Any] = (), capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._vertices: List[Any] = list(vertices)
        if len(self._vertices) > capacity:
            raise ValueError("more vertices than capacity")
        self._capacity = capacity
        self._arcs: List[List[int]] = [[] for _ in self._vertices]

    @property
    def capacity(self) -> int:
        return self._capacity

    def _check(self, index: int, name: str = "vertex") -> None:
        if not 0 <= index < len(self._vertices):
            raise IndexError(f"{name} index {index} out of range")

    def clear(self) -> None:
        """Remove every arc, keeping the vertices."""
        for arcs in self._arcs:
            arcs.clear()

    def is_empty(self) -> bool:
        return not self._vertices

    def vertex(self, index: int) -> Any:
        """Return the value of the vertex at index."""
        self._check(index)
        return self._vertices[index]

    def index_of(self, vertex: Any) -> int:
        """Return the index of vertex; raise ValueError if it is absent."""
        for index, value in enumerate(self._vertices):
            if value == vertex:
                return index
        raise ValueError(f"{vertex!r} is not a vertex")

    def insert_arc(self, source: int, target: int) -> None:
        """Add an arc from source to target at the front of source's list."""
        self._check(source, "source")
        self._check(target, "target")
        if source == target:
            raise ValueError("source and target must differ")
        self._arcs[source].insert(0, target)

    def insert_vertex(self, vertex: Any) -> None:
        """Add a vertex without arcs; raise OverflowError when full."""
        if len(self._vertices) == self._capacity:
            raise OverflowError("the graph cannot hold more vertices")
        self._vertices.append(vertex)
        self._arcs.append([])

    def delete_arc(self, source: int, target: int) -> bool:
        """Remove the first arc from source to target; return whether one was found."""
        self._check(source, "source")
        self._check(target, "target")
        arcs = self._arcs[source]
        if target in arcs:
            arcs.remove(target)
            return True
        return False

    def delete_vertex(self, vertex: Any) -> None:
        """Remove vertex and its arcs; the last vertex takes over its index."""
        index = self.index_of(vertex)
        for other, arcs in enumerate(self._arcs):
            if other != index:
                arcs[:] = [target for target in arcs if target != index]
        last = len(self._vertices) - 1
        if index == last:
            self._vertices.pop()
            self._arcs.pop()
            return
        self._vertices[index] = self._vertices.pop()
        self._arcs[index] = self._arcs.pop()
        for arcs in self._arcs:
            arcs[:] = [index if target == last else target for target in arcs]

    def vertex_count(self) -> int:
        return len(self._vertices)

    def arc_count(self) -> int:
        return sum(len(arcs) for arcs in self._arcs)

    def first_adjacent(self, index: int) -> Optional[int]:
        """First vertex adjacent to index, or None if it has no arcs."""
        self._check(index)
        arcs = self._arcs[index]
        return arcs[0] if arcs else None

    def next_adjacent(self, index: int, after: int) -> Optional[int]:
        """The vertex following after in index's list, or None."""
        self._check(index)
        self._check(after)
        arcs = self._arcs[index]
        if after not in arcs:
            return None
        position = arcs.index(after) + 1
        return arcs[position] if position < len(arcs) else None

    def neighbors(self, index: int) -> List[int]:
        """Indices adjacent to index, in list order."""
        self._check(index)
        return list(self._arcs[index])

    def in_degrees(self) -> List[int]:
        """Number of arcs entering each vertex."""
        degrees = [0] * len(self._vertices)
        for arcs in self._arcs:
            for target in arcs:
                degrees[target] += 1
        return degrees

    def render(self) -> str:
        """Summary line, then each vertex with the names of its adjacent vertices."""
        lines = [f"该有向图共{self.vertex_count()}个顶点,{self.arc_count()}条弧"]
        for value, arcs in zip(self._vertices, self._arcs):
            adjacent = "".join(f"{self._vertices[t]} " for t in arcs) if arcs else "无"
            lines.append(f"{value}的邻接顶点为: {adjacent}")
        return "".join(line + "\n" for line in lines)

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._vertices))


def _take(chars: Iterator[str], count: int) -> List[str]:
    values = [next(chars, None) for _ in range(count)]
    if any(value is None for value in values):
        raise EOFError
    return values  # type: ignore[return-value]


def _run(choice: str, graph: DirectedGraph, chars: Iterator[str]) -> None:
    if choice == "1":
        print("\n1. 显示当前有向图")
        print(graph.render(), end="")
    elif choice == "2":
        print("\n2. 插入顶点")
        (vertex,) = _take(chars, 1)
        graph.insert_vertex(vertex)
    elif choice == "3":
        print("\n3. 插入弧")
        first, second = _take(chars, 2)
        graph.insert_arc(graph.index_of(first), graph.index_of(second))
    elif choice == "4":
        print("\n4. 删除弧")
        first, second = _take(chars, 2)
        graph.delete_arc(graph.index_of(first), graph.index_of(second))
    elif choice == "5":
        print("\n5. 删除顶点")
        (vertex,) = _take(chars, 1)
        graph.delete_vertex(vertex)
    elif choice == "6":
        print("\n6. 输出给定顶点v的第一个邻接顶点")
        (vertex,) = _take(chars, 1)
        found = graph.first_adjacent(graph.index_of(vertex))
        name = "无" if found is None else graph.vertex(found)
        print(f"该顶点的第一个邻接顶点为:{name}")
    elif choice == "7":
        print("\n7. 输出给定顶点v1关于某一个顶点v2的下一邻接顶点")
        first, second = _take(chars, 2)
        found = graph.next_adjacent(graph.index_of(first), graph.index_of(second))
        name = "无" if found is None else graph.vertex(found)
        print(f"下一邻接顶点为:{name}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the menu over a sample graph, reading one-character commands."""
    parser = argparse.ArgumentParser(description="Edit a small directed graph.")
    parser.add_argument("file", nargs="?", help="command file (default: standard input)")
    args = parser.parse_args(argv)
    if args.file:
        with open(args.file, encoding="utf-8") as handle:
            text = handle.read()
    else:
        text = sys.stdin.read()

    graph = DirectedGraph("ABC")
    for source, target in ((0, 2), (0, 1), (1, 2), (2, 1)):
        graph.insert_arc(source, target)

    print(_MENU)
    print(_PROMPT, end="")
    chars = (ch for ch in text if not ch.isspace())
    for choice in chars:
        if choice == "0":
            break
        try:
            _run(choice, graph, chars)
        except EOFError:
            break
        except (ValueError, IndexError, OverflowError) as error:
            print(error)
        if choice in "234567":
            print("执行完毕")
        print()
        print(_PROMPT, end="")
    print()
    return 0


if __name__ == "__main__":
    sys.exit(main())