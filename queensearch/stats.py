"""Result shapes shared by the engine, the aggregator and the facade.

Defines the solving modes, the outcome status, the per-task record
produced by `SearchEngine.run` and the final `SearchResult` returned by
`solve`, plus a small stdout progress reporter for long parallel runs.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple, Union

from .board import Board


class Mode(str, Enum):
    """What a search produces: a solution count or the solutions themselves."""

    COUNT = "count"
    ENUMERATE = "enumerate"


class Status(str, Enum):
    """Whether the whole search space was explored."""

    COMPLETED = "completed"
    CANCELLED = "cancelled"


@dataclass(frozen=True)
class TaskResult:
    """Outcome of one `SearchTask`.

    ``solutions`` is empty in count mode. A cancelled task reports
    ``cancelled=True`` with no count and no solutions.
    """

    key: Tuple[int, ...]
    count: int
    solutions: Tuple[Board, ...] = ()
    nodes: int = 0
    elapsed: float = 0.0
    cancelled: bool = False


@dataclass(frozen=True)
class SearchResult:
    """Unified answer returned by `queensearch.solve`.

    Attributes
    ----------
    size : int
        Board dimension N.
    mode : Mode
        Requested mode.
    status : Status
        ``COMPLETED`` when every task finished, ``CANCELLED`` otherwise.
    count : int
        Number of solutions found by the completed tasks.
    solutions : tuple[Board, ...] | None
        Solutions in enumeration order (Enumerate mode), ``None`` in Count
        mode.
    nodes : int
        Candidate placements examined across completed tasks.
    elapsed : float
        Wall-clock seconds for the whole solve.
    tasks_total, tasks_completed : int
        Number of tasks scheduled and number that finished without being
        cancelled.
    """

    size: int
    mode: Mode
    status: Status
    count: int
    solutions: Optional[Tuple[Board, ...]] = None
    nodes: int = 0
    elapsed: float = 0.0
    tasks_total: int = 0
    tasks_completed: int = 0

    @property
    def partial(self) -> bool:
        """True if the result only covers part of the search space."""
        return self.status is Status.CANCELLED

    @property
    def value(self) -> Union[int, List[Board]]:
        """The count in Count mode, the list of solutions in Enumerate mode."""
        if self.mode is Mode.COUNT:
            return self.count
        return list(self.solutions or ())


class ProgressPrinter:
    """Minimal, stdout-only progress reporter for long-running loops.

    Parameters
    ----------
    total : int
        Total number of steps/items expected. Values <= 0 are coerced to 1 to
        avoid division by zero when reporting percentages.
    label : str
        Short label printed in front of the progress counters.
    """

    def __init__(self, total: int, label: str):
        self.total = max(1, total)
        self.label = label

    def update(self, index: int, detail: str = "") -> None:
        """Print a single-line progress update to stdout."""
        percent = (index / self.total) * 100
        suffix = f" - {detail}" if detail else ""
        print(f"[{self.label}] {index}/{self.total} ({percent:.0f}%)" + suffix)
