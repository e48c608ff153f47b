"""Job scheduling: highest response ratio next, shortest job first, first come first served."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass, replace
from typing import Iterable, List, Optional, Sequence, Set, Tuple

_HEADER = "".join(f"{title:>6}" for title in ("JOBS", "AT", "RT", "ST", "WT", "ET"))


@dataclass(frozen=True)
class Job:
    """A job with its arrival and run time, plus the times a schedule assigns."""

    name: str
    arrival: int
    run: int
    start: Optional[int] = None
    wait: Optional[int] = None
    end: Optional[int] = None

    def row(self) -> str:
        """One table row: name, arrival, run, start, wait and end, six columns wide."""
        if self.start is None:
            raise ValueError(f"job {self.name} has not been scheduled")
        fields = (self.name, self.arrival, self.run, self.start, self.wait, self.end)
        return "".join(f"{field:>6}" for field in fields)


def _run_at(job: Job, start: int) -> Job:
    return replace(job, start=start, wait=start - job.arrival, end=start + job.run)


def _arrived(jobs: Sequence[Job], begin: int, time: int, done: Set[int]) -> Tuple[List[int], int]:
    """Indices of unfinished jobs in the leading run that arrived by time, and where that run stops."""
    index = begin
    waiting = []
    while index < len(jobs) and jobs[index].arrival <= time:
        if index not in done:
            waiting.append(index)
        index += 1
    return waiting, index


def _schedule(jobs: List[Job], first: int, begin: int, pick) -> List[Job]:
    done = {first}
    order = [_run_at(jobs[first], jobs[first].arrival)]
    while len(done) < len(jobs):
        previous_end = order[-1].end
        waiting, stop = _arrived(jobs, begin, previous_end, done)
        if waiting:
            chosen = pick(waiting, previous_end)
            start = previous_end
        else:
            chosen = stop
            start = jobs[chosen].arrival
        done.add(chosen)
        order.append(_run_at(jobs[chosen], start))
    return order


def _require(jobs: Iterable[Job]) -> List[Job]:
    jobs = list(jobs)
    if not jobs:
        raise ValueError("no jobs to schedule")
    return jobs


def hrn(jobs: Iterable[Job]) -> List[Job]:
    """Schedule by highest response ratio; jobs are given in order of arrival."""
    jobs = _require(jobs)

    def pick(waiting: List[int], now: int) -> int:
        return max(waiting, key=lambda k: (now - jobs[k].arrival) / jobs[k].run)

    return _schedule(jobs, 0, 1, pick)


def sjf(jobs: Iterable[Job]) -> List[Job]:
    """Schedule by shortest run time; jobs are given in order of arrival."""
    jobs = _require(jobs)
    _, stop = _arrived(jobs, 1, jobs[0].arrival, set())
    tied = [0] + [k for k in range(1, stop) if jobs[k].arrival == jobs[0].arrival]
    first = min(tied, key=lambda k: jobs[k].run)

    def pick(waiting: List[int], now: int) -> int:
        return min(waiting, key=lambda k: jobs[k].run)

    return _schedule(jobs, first, 0, pick)


def fcfs(jobs: Iterable[Job]) -> List[Job]:
    """Schedule in the order given."""
    order: List[Job] = []
    for job in _require(jobs):
        if not order or job.arrival > order[-1].end:
            start = job.arrival
        else:
            start = order[-1].end
        order.append(_run_at(job, start))
    return order


def average_wait(jobs: Iterable[Job]) -> float:
    """Mean waiting time of scheduled jobs."""
    waits = [job.wait for job in jobs]
    if not waits:
        raise ValueError("no jobs")
    if any(wait is None for wait in waits):
        raise ValueError("every job must be scheduled")
    return sum(waits) / len(waits)


def format_schedule(jobs: Iterable[Job]) -> str:
    """Header line followed by one row per job, each ending with a newline."""
    return "".join(line + "\n" for line in [_HEADER, *(job.row() for job in jobs)])


def _read_jobs(text: str) -> List[Job]:
    tokens = text.split()
    if not tokens:
        raise ValueError("missing job count")
    count = int(tokens[0])
    fields = tokens[1:]
    if len(fields) < 3 * count:
        raise ValueError("not enough job descriptions")
    return [
        Job(fields[3 * k], int(fields[3 * k + 1]), int(fields[3 * k + 2]))
        for k in range(count)
    ]


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read a job count and name/arrival/run lines, print the three schedules."""
    parser = argparse.ArgumentParser(description="Compare HRN, SJF and FCFS schedules.")
    parser.add_argument("file", nargs="?", help="input file (default: standard input)")
    args = parser.parse_args(argv)
    if args.file:
        with open(args.file, encoding="utf-8") as handle:
            text = handle.read()
    else:
        text = sys.stdin.read()
    jobs = _read_jobs(text)
    for title, method in (
        ("响应比高者优先算法执行顺序：", hrn),
        ("最短作业优先算法执行顺序：", sjf),
        ("先来先服务算法执行顺序：", fcfs),
    ):
        order = method(jobs)
        print(title)
        print(format_schedule(order), end="")
        print(f"平均等待时间：{average_wait(order):g}")
        print()
    return 0


if __name__ == "__main__":
    sys.exit(main())