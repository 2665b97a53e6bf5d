"""Immutable queen placements.

A `Board` stores one column index per occupied row, rows filled from 0
without gaps. Placing a queen returns a new `Board`, so a branch of the
search can hold on to its placement while siblings keep extending theirs.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Tuple

from .utils import conflicts, is_consistent, is_valid_solution


@dataclass(frozen=True)
class Board:
    """A complete or partial placement where ``columns[row] = col``.

    Parameters
    ----------
    columns : Sequence[int]
        Column of the queen on each filled row, starting at row 0.
    size : int, optional
        Board dimension N. Defaults to ``len(columns)``, i.e. a complete
        placement.
    """

    columns: Tuple[int, ...]
    size: int = -1

    def __post_init__(self) -> None:
        object.__setattr__(self, "columns", tuple(self.columns))
        if self.size < 0:
            object.__setattr__(self, "size", len(self.columns))

    @classmethod
    def empty(cls, size: int) -> "Board":
        """Return a board of dimension ``size`` with no queen placed."""
        return cls((), size)

    def __len__(self) -> int:
        return len(self.columns)

    def __iter__(self) -> Iterator[int]:
        return iter(self.columns)

    def __getitem__(self, row: int) -> int:
        return self.columns[row]

    @property
    def is_complete(self) -> bool:
        """True when every row holds a queen."""
        return len(self.columns) == self.size

    def place(self, col: int) -> "Board":
        """Return a new board with a queen at ``(len(self), col)``."""
        if self.is_complete:
            raise ValueError(f"board of size {self.size} is already full")
        return Board(self.columns + (col,), self.size)

    def conflicts(self) -> int:
        """Number of attacking queen pairs among the placed queens."""
        return conflicts(self.columns)

    def is_consistent(self) -> bool:
        """True if the placed queens are in range and do not attack each other."""
        return is_consistent(self.columns, self.size)

    def is_valid(self) -> bool:
        """True if this board is a complete solution for its size."""
        return is_valid_solution(self.columns, self.size)

