"""Splitting the N-Queens search tree into independent subtrees.

A `SearchTask` fixes the columns of the first ``depth`` rows. The tasks
emitted by `partition` cover every conflict-free prefix of that length
exactly once, so their subtrees are disjoint and together form the whole
search tree rooted at row 0. Prefixes that already conflict hold no
solution and are skipped.

Each task carries its own `ConstraintState`; nothing is shared between
tasks, which lets them run on separate threads or processes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

from loguru import logger

from . import settings
from .constraints import ConstraintState, make_state
from .errors import require_int


SHORT_BOARD_POLICIES = ("clamp", "single")


@dataclass(frozen=True)
class SearchTask:
    """One unit of independent search work.

    Attributes
    ----------
    size : int
        Board dimension N.
    prefix : tuple[int, ...]
        Columns fixed on rows ``0..start_row-1``.
    start_row : int
        First row the engine has to fill; equals ``len(prefix)``.
    state : ConstraintState
        Private state with the prefix already applied. Engines copy it
        before mutating.
    """

    size: int
    prefix: Tuple[int, ...]
    start_row: int
    state: ConstraintState

    @property
    def key(self) -> Tuple[int, ...]:
        """Partition key used to restore a deterministic result order."""
        return self.prefix

    @classmethod
    def root(cls, size: int, state_kind: str = "bitmask") -> "SearchTask":
        """Task covering the whole board from row 0."""
        return cls(size, (), 0, make_state(size, state_kind))


def _resolve_depth(size: int, depth: int, short_board: str) -> int:
    if short_board not in SHORT_BOARD_POLICIES:
        raise ValueError(
            f"Unknown short-board policy {short_board!r}; expected one of {SHORT_BOARD_POLICIES}"
        )
    if depth <= size:
        return depth
    return size if short_board == "clamp" else 0


def partition(
    size: int,
    depth: int = 1,
    state_kind: str = "bitmask",
    short_board: Optional[str] = None,
) -> List[SearchTask]:
    """Return the independent tasks obtained by fixing the first ``depth`` rows.

    Parameters
    ----------
    size : int
        Board dimension N (N >= 0).
    depth : int
        Number of leading rows fixed per task. ``0`` yields a single task
        rooted at row 0.
    state_kind : str
        Constraint representation handed to the tasks ('bitmask' | 'array').
    short_board : str | None
        Policy when ``size < depth``: 'clamp' fixes all ``size`` rows,
        'single' falls back to one unsplit task. Defaults to
        ``settings.SHORT_BOARD_POLICY``.

    Returns
    -------
    list[SearchTask]
        Tasks in ascending lexicographic order of their prefixes.

    Raises
    ------
    InvalidInputError
        If ``size`` or ``depth`` is negative or not an integer.
    """
    require_int(size, "Board size")
    require_int(depth, "Partition depth")
    if short_board is None:
        short_board = settings.SHORT_BOARD_POLICY
    effective = _resolve_depth(size, depth, short_board)

    tasks: List[SearchTask] = []
    state = make_state(size, state_kind)
    prefix: List[int] = []

    # Depth-first walk over the leading rows, ascending columns at every row.
    def _extend(row: int) -> None:
        if row == effective:
            tasks.append(SearchTask(size, tuple(prefix), row, state.copy()))
            return
        for col in range(size):
            if not state.can_place(row, col):
                continue
            state.place(row, col)
            prefix.append(col)
            _extend(row + 1)
            prefix.pop()
            state.remove(row, col)

    _extend(0)
    logger.debug(
        "Partitioned N={} at depth {} (requested {}) into {} tasks",
        size,
        effective,
        depth,
        len(tasks),
    )
    return tasks
