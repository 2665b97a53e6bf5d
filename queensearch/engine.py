"""Depth-first backtracking over one N-Queens subtree.

The engine fills rows in order, trying columns in ascending order at every
row. A placement is committed to the task's private `ConstraintState`,
explored, and undone when the search comes back to that row. The walk is
iterative: an explicit stack of `_Frame` records replaces recursion, so deep
boards do not hit the interpreter's recursion limit.

Ordering contract
-----------------
Ascending columns at every row make enumeration order lexicographic in the
placement, which fixes the order of solutions for a given task and lets the
aggregator reproduce the sequential order from parallel tasks.

Cancellation
------------
Every ``poll_interval`` loop iterations the engine checks an optional
event-like object (anything with ``is_set()``) and an optional absolute
deadline in epoch seconds. A cancelled task returns ``cancelled=True`` and
contributes nothing to the final result.
"""

from __future__ import annotations

from dataclasses import dataclass
from time import perf_counter, time
from typing import Any, List, Optional

from loguru import logger

from . import settings
from .board import Board
from .partition import SearchTask
from .stats import Mode, TaskResult


@dataclass
class _Frame:
    """Mutable stack frame for one row of the search."""

    row: int
    next_col: int = 0
    placed: int = -1


class SearchEngine:
    """Backtracking search producing a count or the list of solutions.

    Parameters
    ----------
    mode : Mode | str
        ``Mode.COUNT`` only counts, ``Mode.ENUMERATE`` also records boards.
    cancel : object | None
        Cooperative cancellation flag exposing ``is_set()``.
    deadline : float | None
        Absolute wall-clock limit (``time.time()`` scale).
    poll_interval : int | None
        Loop iterations between two cancellation checks. Defaults to
        ``settings.CANCEL_POLL_INTERVAL``.
    """

    def __init__(
        self,
        mode: Mode = Mode.COUNT,
        cancel: Optional[Any] = None,
        deadline: Optional[float] = None,
        poll_interval: Optional[int] = None,
    ):
        self.mode = Mode(mode)
        self.cancel = cancel
        self.deadline = deadline
        if poll_interval is None:
            poll_interval = settings.CANCEL_POLL_INTERVAL
        self.poll_interval = max(1, poll_interval)

    def _should_stop(self) -> bool:
        if self.cancel is not None and self.cancel.is_set():
            return True
        return self.deadline is not None and time() >= self.deadline

    def run(self, task: SearchTask) -> TaskResult:
        """Explore every completion of ``task.prefix`` and report the result."""
        start = perf_counter()
        size = task.size
        collect = self.mode is Mode.ENUMERATE

        if self._should_stop():
            return TaskResult(task.key, 0, elapsed=perf_counter() - start, cancelled=True)

        # A prefix that already fills the board is itself a solution.
        if task.start_row >= size:
            solutions = (Board(task.prefix, size),) if collect else ()
            return TaskResult(task.key, 1, solutions, 0, perf_counter() - start)

        state = task.state.copy()
        positions: List[int] = list(task.prefix)
        solutions_found: List[Board] = []
        count = 0
        explored = 0
        countdown = self.poll_interval
        stack: List[_Frame] = [_Frame(task.start_row)]

        while stack:
            countdown -= 1
            if countdown <= 0:
                countdown = self.poll_interval
                if self._should_stop():
                    logger.debug("Task {} cancelled after {} nodes", task.key, explored)
                    return TaskResult(
                        task.key, 0, nodes=explored, elapsed=perf_counter() - start, cancelled=True
                    )

            frame = stack[-1]
            row = frame.row

            if frame.placed >= 0:
                # Coming back to this row: undo the placement before trying the next column.
                state.remove(row, frame.placed)
                positions.pop()
                frame.placed = -1

            col = frame.next_col
            while col < size:
                explored += 1
                if state.can_place(row, col):
                    break
                col += 1

            if col >= size:
                # Every column on this row has been tried; the branch is exhausted.
                stack.pop()
                continue

            frame.next_col = col + 1
            state.place(row, col)
            positions.append(col)
            frame.placed = col

            if row + 1 == size:
                count += 1
                if collect:
                    solutions_found.append(Board(tuple(positions), size))
            else:
                stack.append(_Frame(row + 1))

        return TaskResult(
            task.key,
            count,
            tuple(solutions_found),
            explored,
            perf_counter() - start,
        )


def run_task(
    task: SearchTask,
    mode: Mode = Mode.COUNT,
    cancel: Optional[Any] = None,
    deadline: Optional[float] = None,
    poll_interval: Optional[int] = None,
) -> TaskResult:
    """Worker wrapper running one task (top-level so executors can pickle it)."""
    return SearchEngine(mode, cancel, deadline, poll_interval).run(task)
