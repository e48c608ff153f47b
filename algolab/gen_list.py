"""Generalized lists: letters as atoms and parenthesised sublists, e.g. ((a,b),c)."""

from __future__ import annotations

from typing import Tuple, Union

Item = Union[str, "Tuple[Item, ...]"]


def _parse(text: str, pos: int) -> Tuple[Tuple[Item, ...], int]:
    if pos >= len(text) or text[pos] != "(":
        raise ValueError("a generalized list must start with '('")
    pos += 1
    items = []
    while pos < len(text):
        char = text[pos]
        if char.isascii() and char.isalpha():
            items.append(char)
            pos += 1
        elif char == "(":
            sub, pos = _parse(text, pos)
            items.append(sub)
        elif char == ")":
            pos += 1
            break
        else:
            pos += 1
    return tuple(items), pos


def _depth(items: Tuple[Item, ...]) -> int:
    return 1 + max((_depth(item) for item in items if isinstance(item, tuple)), default=0)


def _render(items: Tuple[Item, ...]) -> str:
    return "(" + ",".join(item if isinstance(item, str) else _render(item) for item in items) + ")"


class GenList:
    """A generalized list parsed from text; characters other than letters and parentheses are ignored."""

    def __init__(self, text: str = "()") -> None:
        self._items, _ = _parse(text, 0)

    @property
    def items(self) -> Tuple[Item, ...]:
        """The elements as nested tuples of single-letter strings."""
        return self._items

    def depth(self) -> int:
        """Nesting depth; a list without sublists has depth 1."""
        return _depth(self._items)

    def copy(self) -> "GenList":
        """Return a list with the same structure."""
        clone = GenList()
        clone._items = self._items
        return clone

    def __str__(self) -> str:
        return _render(self._items)

    def __repr__(self) -> str:
        return f"GenList({str(self)!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GenList):
            return NotImplemented
        return self._items == other._items

    def __hash__(self) -> int:
        return hash(self._items)