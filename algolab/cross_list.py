"""Sparse matrix as an orthogonal list: every node is linked along its row and its column."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator, List, Optional, Tuple, Union

from .sparse_matrix import Triple, format_rows

TripleLike = Union[Triple, Tuple[int, int, Any]]


@dataclass(eq=False)
class _Node:
    row: int
    col: int
    value: Any
    right: Optional["_Node"] = None
    down: Optional["_Node"] = None


class CrossList:
    """Sparse matrix whose non-zero entries are chained by row and by column."""

    def __init__(self, rows: int = 0, cols: int = 0, triples: Iterable[TripleLike] = ()) -> None:
        if rows < 0 or cols < 0:
            raise ValueError("matrix dimensions must not be negative")
        self._rows = rows
        self._cols = cols
        self._row_heads: List[Optional[_Node]] = [None] * rows
        self._col_heads: List[Optional[_Node]] = [None] * cols
        self._count = 0
        for item in triples:
            t = item if isinstance(item, Triple) else Triple(*item)
            self.set(t.row, t.col, t.value)

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    def _check(self, row: int, col: int) -> None:
        if not (0 <= row < self._rows and 0 <= col < self._cols):
            raise IndexError(f"({row}, {col}) lies outside {self._rows}x{self._cols}")

    def clear(self) -> None:
        """Remove every entry."""
        self._row_heads = [None] * self._rows
        self._col_heads = [None] * self._cols
        self._count = 0

    def _unlink(self, node: _Node, left: Optional[_Node]) -> None:
        if left is None:
            self._row_heads[node.row] = node.right
        else:
            left.right = node.right
        above: Optional[_Node] = None
        current = self._col_heads[node.col]
        while current is not node:
            above, current = current, current.down  # type: ignore[union-attr]
        if above is None:
            self._col_heads[node.col] = node.down
        else:
            above.down = node.down
        self._count -= 1

    def set(self, row: int, col: int, value: Any) -> None:
        """Store value at (row, col); a zero value removes the entry."""
        self._check(row, col)
        left: Optional[_Node] = None
        node = self._row_heads[row]
        while node is not None and node.col < col:
            left, node = node, node.right
        if node is not None and node.col == col:
            if value == 0:
                self._unlink(node, left)
            else:
                node.value = value
            return
        if value == 0:
            return
        fresh = _Node(row, col, value, right=node)
        if left is None:
            self._row_heads[row] = fresh
        else:
            left.right = fresh
        above: Optional[_Node] = None
        below = self._col_heads[col]
        while below is not None and below.row < row:
            above, below = below, below.down
        fresh.down = below
        if above is None:
            self._col_heads[col] = fresh
        else:
            above.down = fresh
        self._count += 1

    def get(self, row: int, col: int) -> Any:
        """Return the value at (row, col), or 0 where nothing is stored."""
        self._check(row, col)
        node = self._row_heads[row]
        while node is not None and node.col < col:
            node = node.right
        if node is not None and node.col == col:
            return node.value
        return 0

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[Triple]:
        """Non-zero entries in row-major order."""
        for head in self._row_heads:
            node = head
            while node is not None:
                yield Triple(node.row, node.col, node.value)
                node = node.right

    def __str__(self) -> str:
        return format_rows(self._rows, self._cols, self.get)

    def __repr__(self) -> str:
        return f"CrossList({self._rows}, {self._cols}, {list(self)!r})"