"""Sparse matrices stored as a list of (row, column, value) triples."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from itertools import accumulate
from typing import Any, Iterable, List, Optional, Sequence, Tuple, Union


@dataclass(frozen=True)
class Triple:
    """One non-zero entry of a sparse matrix."""

    row: int
    col: int
    value: Any


TripleLike = Union[Triple, Tuple[int, int, Any]]


def _as_triple(item: TripleLike) -> Triple:
    return item if isinstance(item, Triple) else Triple(*item)


def format_rows(rows: int, cols: int, cell) -> str:
    """Render a matrix one bracketed line per row, each cell left-aligned in 3 columns."""
    return "".join(
        "[  " + "".join(f"{cell(i, j)!s:<3}" for j in range(cols)) + "]\n"
        for i in range(rows)
    )


class TriSparseMatrix:
    """Matrix of a given shape holding only its non-zero entries, in row-major order."""

    def __init__(self, rows: int = 0, cols: int = 0, triples: Iterable[TripleLike] = ()) -> None:
        if rows < 0 or cols < 0:
            raise ValueError("matrix dimensions must not be negative")
        self._rows = rows
        self._cols = cols
        self._triples: Tuple[Triple, ...] = tuple(_as_triple(t) for t in triples)
        for t in self._triples:
            if not (0 <= t.row < rows and 0 <= t.col < cols):
                raise ValueError(f"entry ({t.row}, {t.col}) lies outside {rows}x{cols}")

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def triples(self) -> Tuple[Triple, ...]:
        return self._triples

    def __len__(self) -> int:
        return len(self._triples)

    def simple_transpose(self) -> "TriSparseMatrix":
        """Transpose by scanning all entries once per column."""
        result = [
            Triple(t.col, t.row, t.value)
            for column in range(self._cols)
            for t in self._triples
            if t.col == column
        ]
        return TriSparseMatrix(self._cols, self._rows, result)

    def fast_transpose(self) -> "TriSparseMatrix":
        """Transpose in one pass using per-column counts and start positions."""
        counts = [0] * self._cols
        for t in self._triples:
            counts[t.col] += 1
        positions = list(accumulate(counts[:-1], initial=0))
        slots: List[Optional[Triple]] = [None] * len(self._triples)
        for t in self._triples:
            slots[positions[t.col]] = Triple(t.col, t.row, t.value)
            positions[t.col] += 1
        return TriSparseMatrix(self._cols, self._rows, slots)  # type: ignore[arg-type]

    def copy(self) -> "TriSparseMatrix":
        """Return a matrix with the same shape and entries."""
        return TriSparseMatrix(self._rows, self._cols, self._triples)

    def __str__(self) -> str:
        pending = iter(self._triples)
        current = next(pending, None)

        def cell(i: int, j: int) -> Any:
            nonlocal current
            if current is not None and current.row == i and current.col == j:
                value = current.value
                current = next(pending, None)
                return value
            return 0

        return format_rows(self._rows, self._cols, cell)

    def __repr__(self) -> str:
        return f"TriSparseMatrix({self._rows}, {self._cols}, {list(self._triples)!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TriSparseMatrix):
            return NotImplemented
        return (self._rows, self._cols, self._triples) == (
            other._rows,
            other._cols,
            other._triples,
        )

    def __hash__(self) -> int:
        return hash((self._rows, self._cols, self._triples))


def _read_matrix(text: str) -> TriSparseMatrix:
    tokens = [int(token) for token in text.split()]
    if len(tokens) < 3:
        raise ValueError("expected rows, columns and entry count")
    rows, cols, count = tokens[:3]
    fields = tokens[3:]
    if len(fields) < 3 * count:
        raise ValueError("not enough entries")
    triples = [Triple(*fields[3 * k : 3 * k + 3]) for k in range(count)]
    return TriSparseMatrix(rows, cols, triples)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read a matrix as rows, columns, count and row/col/value triples; print it and its transpose."""
    parser = argparse.ArgumentParser(description="Print a sparse matrix and its transpose.")
    parser.add_argument("file", nargs="?", help="input file (default: standard input)")
    args = parser.parse_args(argv)
    if args.file:
        with open(args.file, encoding="utf-8") as handle:
            text = handle.read()
    else:
        text = sys.stdin.read()
    matrix = _read_matrix(text)
    print(matrix)
    print(matrix.fast_transpose(), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())