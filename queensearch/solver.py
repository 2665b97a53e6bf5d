"""Single entry point for every N-Queens solving strategy.

`solve` takes a board size, a `Mode` (count or enumerate) and a
`Parallelism` (sequential or parallel) and always returns a `SearchResult`:

- Sequential: one task rooted at row 0, run in the calling thread.
- Parallel: the first rows are fixed by `partition`, the resulting tasks run
    on a bounded worker pool, and `aggregate` merges what they return. Tasks
    share no state; each one carries its own constraint state and is
    combined only after it completes.

Invalid requests raise `InvalidInputError` before any task is created.
Cancellation (a set ``cancel`` flag, an expired ``time_limit`` or a
``KeyboardInterrupt`` while waiting for workers) is not an error: the result
comes back with ``status == Status.CANCELLED`` and holds whatever the
completed tasks produced.

Enumerate mode returns solutions in the same order for both strategies:
lexicographic in the placement, which is the order of the sequential
single-task search.
"""
from __future__ import annotations

import threading
from concurrent.futures import ProcessPoolExecutor, ThreadPoolExecutor, as_completed
from enum import Enum
from time import perf_counter, time
from typing import Any, Dict, List, Optional, Type, Union

from loguru import logger

from . import settings
from .aggregate import aggregate
from .constraints import STATE_KINDS
from .engine import run_task
from .errors import InvalidInputError, require_int
from .partition import SearchTask, partition
from .stats import Mode, ProgressPrinter, SearchResult, TaskResult


class Parallelism(str, Enum):
    """How the search tree is explored."""

    SEQUENTIAL = "sequential"
    PARALLEL = "parallel"


EXECUTORS: Dict[str, Type[Any]] = {
    "process": ProcessPoolExecutor,
    "thread": ThreadPoolExecutor,
}


def _coerce(enum_cls: Type[Enum], value: Any, label: str) -> Any:
    try:
        return enum_cls(value)
    except ValueError:
        choices = ", ".join(member.value for member in enum_cls)
        raise InvalidInputError(f"Unknown {label} {value!r}; expected one of: {choices}") from None


def _validate_size(n: Any) -> int:
    require_int(n, "Board size")
    limit = settings.MAX_BOARD_SIZE
    if limit is not None and n > limit:
        raise InvalidInputError(f"Board size {n} exceeds the supported maximum of {limit}")
    return n


def _run_sequential(
    task: SearchTask,
    mode: Mode,
    cancel: Optional[Any],
    deadline: Optional[float],
    poll_interval: int,
) -> List[TaskResult]:
    try:
        return [run_task(task, mode, cancel, deadline, poll_interval)]
    except KeyboardInterrupt:
        logger.warning("Sequential search for N={} interrupted", task.size)
        return [TaskResult(task.key, 0, cancelled=True)]


def _run_parallel(
    tasks: List[SearchTask],
    mode: Mode,
    workers: int,
    executor_kind: str,
    cancel: Optional[Any],
    deadline: Optional[float],
    poll_interval: int,
    progress: bool,
) -> List[TaskResult]:
    """Run ``tasks`` on a worker pool and return results in completion order."""
    results: List[TaskResult] = []
    if not tasks:
        return results

    if cancel is None and executor_kind == "thread":
        # lets an interrupt stop threads that are already searching
        cancel = threading.Event()

    printer = ProgressPrinter(len(tasks), f"N={tasks[0].size} {mode.value}") if progress else None
    pool = EXECUTORS[executor_kind](max_workers=min(workers, len(tasks)))
    interrupted = False
    try:
        futures = [
            pool.submit(run_task, task, mode, cancel, deadline, poll_interval) for task in tasks
        ]
        for index, future in enumerate(as_completed(futures), start=1):
            result = future.result()
            results.append(result)
            logger.debug(
                "Task {} finished: count={}, nodes={}, cancelled={}",
                result.key,
                result.count,
                result.nodes,
                result.cancelled,
            )
            if printer is not None:
                printer.update(index, f"prefix={list(result.key)} solutions={result.count}")
    except KeyboardInterrupt:
        interrupted = True
        logger.warning(
            "Interrupted with {}/{} tasks finished; cancelling the rest", len(results), len(tasks)
        )
        setter = getattr(cancel, "set", None)
        if setter is not None:
            setter()
    finally:
        pool.shutdown(wait=not interrupted, cancel_futures=True)
    return results


def solve(
    n: int,
    mode: Union[Mode, str] = Mode.COUNT,
    parallelism: Union[Parallelism, str] = Parallelism.SEQUENTIAL,
    *,
    depth: Optional[int] = None,
    workers: Optional[int] = None,
    executor: Optional[str] = None,
    state_kind: Optional[str] = None,
    time_limit: Optional[float] = None,
    cancel: Optional[Any] = None,
    progress: bool = False,
) -> SearchResult:
    """Count or enumerate the N-Queens solutions for an ``n`` x ``n`` board.

    Parameters
    ----------
    n : int
        Board size (0 <= n <= ``settings.MAX_BOARD_SIZE``).
    mode : Mode | str
        'count' or 'enumerate'.
    parallelism : Parallelism | str
        'sequential' or 'parallel'.
    depth : int | None
        Leading rows fixed per parallel task (default
        ``settings.PARTITION_DEPTH``). Ignored for sequential solving.
    workers : int | None
        Pool size for parallel solving (default ``settings.NUM_PROCESSES``).
    executor : str | None
        'process' or 'thread' (default ``settings.EXECUTOR``).
    state_kind : str | None
        'bitmask' or 'array' (default ``settings.STATE_KIND``).
    time_limit : float | None
        Seconds after which running tasks stop (default
        ``settings.TIME_LIMIT``).
    cancel : object | None
        Cooperative cancellation flag exposing ``is_set()``. With the process
        executor it must be shareable across processes, such as
        ``multiprocessing.Manager().Event()``.
    progress : bool
        Print one progress line per finished parallel task.

    Returns
    -------
    SearchResult
        ``value`` is the count (Count) or the list of boards (Enumerate).

    Raises
    ------
    InvalidInputError
        For a negative, non-integer or oversized ``n`` and for unknown or
        out-of-range options. Raised before any search work starts.
    """
    n = _validate_size(n)
    mode = _coerce(Mode, mode, "mode")
    parallelism = _coerce(Parallelism, parallelism, "parallelism")

    if depth is None:
        depth = settings.PARTITION_DEPTH
    require_int(depth, "Partition depth")
    if workers is None:
        workers = settings.NUM_PROCESSES
    require_int(workers, "Worker count", minimum=1)
    if executor is None:
        executor = settings.EXECUTOR
    if executor not in EXECUTORS:
        raise InvalidInputError(
            f"Unknown executor {executor!r}; expected one of: {', '.join(EXECUTORS)}"
        )
    if state_kind is None:
        state_kind = settings.STATE_KIND
    if state_kind not in STATE_KINDS:
        raise InvalidInputError(
            f"Unknown state kind {state_kind!r}; expected one of: {', '.join(STATE_KINDS)}"
        )
    if (
        parallelism is Parallelism.PARALLEL
        and executor == "process"
        and isinstance(cancel, threading.Event)
    ):
        raise InvalidInputError(
            "threading.Event cannot reach worker processes; "
            "use multiprocessing.Manager().Event() or executor='thread'"
        )
    if time_limit is None:
        time_limit = settings.TIME_LIMIT

    start = perf_counter()
    deadline = time() + time_limit if time_limit is not None else None
    poll_interval = settings.CANCEL_POLL_INTERVAL

    if parallelism is Parallelism.SEQUENTIAL:
        task = SearchTask.root(n, state_kind)
        results = _run_sequential(task, mode, cancel, deadline, poll_interval)
        tasks_total = 1
    else:
        tasks = partition(n, depth, state_kind)
        results = _run_parallel(
            tasks, mode, workers, executor, cancel, deadline, poll_interval, progress
        )
        tasks_total = len(tasks)

    result = aggregate(results, n, mode, tasks_total, perf_counter() - start)
    if result.partial:
        logger.warning(
            "N={} {} search cancelled: {}/{} tasks completed, {} solutions so far",
            n,
            mode.value,
            result.tasks_completed,
            result.tasks_total,
            result.count,
        )
    else:
        logger.info(
            "N={} {} ({}) finished: {} solutions, {} nodes, {:.4f}s",
            n,
            mode.value,
            parallelism.value,
            result.count,
            result.nodes,
            result.elapsed,
        )
    return result
