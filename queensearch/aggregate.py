"""Merging per-task results into one `SearchResult`.

Results are sorted by their partition key before they are combined, so the
output does not depend on the order in which concurrent tasks completed.
Counts are summed; solution lists are concatenated in key order, which
reproduces the single-task enumeration order because tasks are keyed by
their fixed leading columns.
"""
from __future__ import annotations

from typing import Iterable, List, Optional

from .board import Board
from .stats import Mode, SearchResult, Status, TaskResult


def aggregate(
    results: Iterable[TaskResult],
    size: int,
    mode: Mode = Mode.COUNT,
    tasks_total: Optional[int] = None,
    elapsed: Optional[float] = None,
) -> SearchResult:
    """Combine task results into the final answer.

    Parameters
    ----------
    results : Iterable[TaskResult]
        Results in any order, each tagged with its partition key.
    size : int
        Board dimension N.
    mode : Mode
        Count or Enumerate; in Count mode ``solutions`` stays ``None``.
    tasks_total : int | None
        Number of tasks that were scheduled. When more tasks were scheduled
        than results supplied, the missing ones count as cancelled.
    elapsed : float | None
        Wall time of the whole solve; defaults to the sum of task times.

    Returns
    -------
    SearchResult
        ``COMPLETED`` if every scheduled task finished, ``CANCELLED``
        otherwise. Cancelled tasks contribute nothing.
    """
    mode = Mode(mode)
    ordered = sorted(results, key=lambda r: r.key)
    finished = [r for r in ordered if not r.cancelled]
    if tasks_total is None:
        tasks_total = len(ordered)

    count = sum(r.count for r in finished)
    solutions = None
    if mode is Mode.ENUMERATE:
        merged: List[Board] = []
        for r in finished:
            merged.extend(r.solutions)
        solutions = tuple(merged)

    complete = len(finished) == len(ordered) and len(ordered) >= tasks_total
    return SearchResult(
        size=size,
        mode=mode,
        status=Status.COMPLETED if complete else Status.CANCELLED,
        count=count,
        solutions=solutions,
        nodes=sum(r.nodes for r in finished),
        elapsed=elapsed if elapsed is not None else sum(r.elapsed for r in ordered),
        tasks_total=tasks_total,
        tasks_completed=len(finished),
    )
