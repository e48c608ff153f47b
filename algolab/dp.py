"""0/1 knapsack and maximum contiguous subsequence sum."""

from __future__ import annotations

from typing import Sequence


def knapsack(weights: Sequence[int], values: Sequence[int], capacity: int) -> int:
    """Return the largest total value of items whose weights fit in capacity."""
    if len(weights) != len(values):
        raise ValueError("weights and values must have the same length")
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    if any(weight < 0 for weight in weights):
        raise ValueError("weights must not be negative")
    if not weights:
        return 0
    first_weight, first_value = weights[0], values[0]
    row = [first_value if room >= first_weight else 0 for room in range(capacity + 1)]
    for weight, value in zip(weights[1:], values[1:]):
        row = [
            max(row[room], row[room - weight] + value) if room >= weight else row[room]
            for room in range(capacity + 1)
        ]
    return row[capacity]


def _check(seq: Sequence[int]) -> None:
    if not seq:
        raise ValueError("sequence must not be empty")


def max_subsequence_sum_brute(seq: Sequence[int]) -> int:
    """Largest sum of a contiguous run, trying every start: O(n^2).

    A sequence of only negative numbers yields its largest element.
    """
    _check(seq)
    if all(value < 0 for value in seq):
        return max(seq)
    best = 0
    for start in range(len(seq)):
        running = 0
        for value in seq[start:]:
            running += value
            best = max(best, running)
    return best


def max_subsequence_sum(seq: Sequence[int]) -> int:
    """Largest sum of a contiguous run in a single pass: O(n).

    A sequence of only negative numbers yields its largest element.
    """
    _check(seq)
    if all(value < 0 for value in seq):
        return max(seq)
    best = running = 0
    for value in seq:
        running += value
        if running <= 0:
            running = 0
        else:
            best = max(best, running)
    return best