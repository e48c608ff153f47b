"""Polynomials kept as lists of terms in descending order of exponent."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Sequence, Tuple, Union


@dataclass(frozen=True)
class Term:
    """One term: coefficient times x to the power of the exponent."""

    coef: int
    expn: int


TermLike = Union[Term, Tuple[int, int]]


def _merge(first: Sequence[Term], second: Sequence[Term], sign: int) -> List[Term]:
    """Combine two descending term lists, scaling the second by sign."""
    result: List[Term] = []
    i = j = 0
    while i < len(first) and j < len(second):
        a, b = first[i], second[j]
        if a.expn > b.expn:
            result.append(a)
            i += 1
        elif a.expn < b.expn:
            result.append(Term(sign * b.coef, b.expn))
            j += 1
        else:
            coef = a.coef + sign * b.coef
            if coef != 0:
                result.append(Term(coef, a.expn))
            i += 1
            j += 1
    result.extend(first[i:])
    result.extend(Term(sign * b.coef, b.expn) for b in second[j:])
    return result


class Polynomial:
    """A polynomial whose terms are expected in descending order of exponent."""

    def __init__(self, terms: Iterable[TermLike] = ()) -> None:
        self._terms: Tuple[Term, ...] = tuple(
            term if isinstance(term, Term) else Term(*term) for term in terms
        )

    def __iter__(self) -> Iterator[Term]:
        return iter(self._terms)

    def __len__(self) -> int:
        return len(self._terms)

    def __add__(self, other: object) -> "Polynomial":
        if not isinstance(other, Polynomial):
            return NotImplemented
        return Polynomial(_merge(self._terms, other._terms, 1))

    def __sub__(self, other: object) -> "Polynomial":
        if not isinstance(other, Polynomial):
            return NotImplemented
        return Polynomial(_merge(self._terms, other._terms, -1))

    def __mul__(self, other: object) -> "Polynomial":
        if not isinstance(other, Polynomial):
            return NotImplemented
        total = Polynomial()
        for b in other._terms:
            partial = Polynomial(
                Term(a.coef * b.coef, a.expn + b.expn) for a in self._terms
            )
            total = total + partial
        return total

    def __str__(self) -> str:
        if not self._terms:
            return ""
        first, *rest = self._terms
        parts = [f"{first.coef}x^{first.expn}"]
        for term in rest:
            sign = "+" if term.coef > 0 else ""
            power = f"x^{term.expn}" if term.expn != 0 else ""
            parts.append(f"{sign}{term.coef}{power}")
        return "".join(parts)

    def __repr__(self) -> str:
        return f"Polynomial({list(self._terms)!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self._terms == other._terms

    def __hash__(self) -> int:
        return hash(self._terms)