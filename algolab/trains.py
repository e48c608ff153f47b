"""Train dispatching through a stack-shaped station and an exit track."""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional, Sequence, Tuple

from .seq_stack import SeqStack

ENTER = "enter"
LEAVE = "leave"

_Car = Tuple[str, int]


def _top_rank(stack: SeqStack) -> int:
    return 0 if stack.is_empty() else stack.top()[1]


def dispatch(arrivals: Sequence[str], departures: Sequence[str]) -> List[Tuple[str, str]]:
    """Return the moves that turn the arrival order into the departure order.

    Each move is (car, ENTER) for entering the station or (car, LEAVE)
    for moving from the station onto the exit track.
    """
    arrivals = list(arrivals)
    departures = list(departures)
    if sorted(arrivals) != sorted(departures):
        raise ValueError("arrivals and departures must hold the same cars")

    cars: List[_Car] = [(car, rank) for rank, car in enumerate(departures, start=1)]
    for i, wanted in enumerate(arrivals[:-1]):
        j = next(k for k in range(i, len(cars)) if cars[k][0] == wanted)
        cars[i], cars[j] = cars[j], cars[i]

    capacity = max(len(cars), 1)
    station = SeqStack(capacity)
    exit_track = SeqStack(capacity)
    moves: List[Tuple[str, str]] = []

    def to_exit() -> None:
        car = station.pop()
        exit_track.push(car)
        moves.append((car[0], LEAVE))

    def to_station(car: _Car) -> None:
        station.push(car)
        moves.append((car[0], ENTER))

    expected = 1
    for car in cars:
        rank = car[1]
        if rank == expected:
            to_station(car)
            to_exit()
            expected += 1
        elif rank < _top_rank(station):
            to_station(car)
        else:
            while not station.is_empty() and rank > station.top()[1]:
                to_exit()
            to_station(car)
            while not station.is_empty() and _top_rank(exit_track) > expected:
                to_station(exit_track.pop())
            if _top_rank(exit_track) == expected:
                expected += 1
    while not station.is_empty():
        to_exit()
    return moves


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read arrival and departure orders and print each move."""
    parser = argparse.ArgumentParser(description="Dispatch trains through a station.")
    parser.add_argument("arrivals", nargs="?", help="arrival order, one letter per car")
    parser.add_argument("departures", nargs="?", help="departure order, one letter per car")
    args = parser.parse_args(argv)
    arrivals = args.arrivals if args.arrivals is not None else input("输入进站序列:").strip()
    departures = (
        args.departures if args.departures is not None else input("输入出站序列:").strip()
    )
    labels = {ENTER: "进调度站", LEAVE: "出调度站"}
    for car, move in dispatch(arrivals, departures):
        print(f"{car}{labels[move]}")
    return 0


if __name__ == "__main__":
    sys.exit(main())