"""Incremental constraint tracking for row-by-row queen placement.

Two interchangeable representations of the same state are provided:

- `BitmaskState`: three Python integers used as bit-sets (default).
- `ArrayState`: three boolean lists, the classic ``row_used``/``diag_used``
    masks of textbook backtracking.

Index layout
------------
- columns: bit/slot ``col`` in ``[0, N)``.
- rising diagonals: ``row + col`` in ``[0, 2N-2]``.
- falling diagonals: ``row - col + (N - 1)`` in ``[0, 2N-2]``; the offset maps
    negative differences to non-negative indices.

Every method is O(1). Inputs come from the engine and the partitioner and
are in range by construction, so no bounds checks are made.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Sequence


class ConstraintState(ABC):
    """Occupied columns and diagonals for the queens placed so far."""

    size: int

    @abstractmethod
    def can_place(self, row: int, col: int) -> bool:
        ...

    @abstractmethod
    def place(self, row: int, col: int) -> None:
        ...

    @abstractmethod
    def remove(self, row: int, col: int) -> None:
        ...

    @abstractmethod
    def copy(self) -> "ConstraintState":
        ...

    @classmethod
    @abstractmethod
    def empty(cls, size: int) -> "ConstraintState":
        ...

    @classmethod
    def from_prefix(cls, size: int, prefix: Sequence[int]) -> "ConstraintState":
        """Build a state with ``prefix[row]`` placed on each leading row.

        Raises ``ValueError`` if the prefix is conflicting.
        """
        state = cls.empty(size)
        for row, col in enumerate(prefix):
            if not state.can_place(row, col):
                raise ValueError(f"prefix {tuple(prefix)} conflicts at row {row}")
            state.place(row, col)
        return state


class BitmaskState(ConstraintState):
    """Bit-set form: bit ``i`` of each integer marks line ``i`` as taken."""

    __slots__ = ("size", "columns", "diag_up", "diag_down")

    def __init__(self, size: int, columns: int = 0, diag_up: int = 0, diag_down: int = 0):
        self.size = size
        self.columns = columns
        self.diag_up = diag_up
        self.diag_down = diag_down

    @classmethod
    def empty(cls, size: int) -> "BitmaskState":
        return cls(size)

    def can_place(self, row: int, col: int) -> bool:
        return not (
            (self.columns >> col) & 1
            or (self.diag_up >> (row + col)) & 1
            or (self.diag_down >> (row - col + self.size - 1)) & 1
        )

    def place(self, row: int, col: int) -> None:
        self.columns |= 1 << col
        self.diag_up |= 1 << (row + col)
        self.diag_down |= 1 << (row - col + self.size - 1)

    def remove(self, row: int, col: int) -> None:
        self.columns &= ~(1 << col)
        self.diag_up &= ~(1 << (row + col))
        self.diag_down &= ~(1 << (row - col + self.size - 1))

    def copy(self) -> "BitmaskState":
        return BitmaskState(self.size, self.columns, self.diag_up, self.diag_down)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BitmaskState):
            return NotImplemented
        return (self.size, self.columns, self.diag_up, self.diag_down) == (
            other.size,
            other.columns,
            other.diag_up,
            other.diag_down,
        )

    def __repr__(self) -> str:
        return (
            f"BitmaskState(size={self.size}, columns={self.columns:#b}, "
            f"diag_up={self.diag_up:#b}, diag_down={self.diag_down:#b})"
        )


class ArrayState(ConstraintState):
    """Boolean-list form with one slot per column and per diagonal."""

    __slots__ = ("size", "col_used", "diag_up_used", "diag_down_used")

    def __init__(self, size: int):
        self.size = size
        self.col_used: List[bool] = [False] * size
        self.diag_up_used: List[bool] = [False] * max(0, 2 * size - 1)
        self.diag_down_used: List[bool] = [False] * max(0, 2 * size - 1)

    @classmethod
    def empty(cls, size: int) -> "ArrayState":
        return cls(size)

    def can_place(self, row: int, col: int) -> bool:
        return not (
            self.col_used[col]
            or self.diag_up_used[row + col]
            or self.diag_down_used[row - col + self.size - 1]
        )

    def place(self, row: int, col: int) -> None:
        self.col_used[col] = True
        self.diag_up_used[row + col] = True
        self.diag_down_used[row - col + self.size - 1] = True

    def remove(self, row: int, col: int) -> None:
        self.col_used[col] = False
        self.diag_up_used[row + col] = False
        self.diag_down_used[row - col + self.size - 1] = False

    def copy(self) -> "ArrayState":
        clone = ArrayState(self.size)
        clone.col_used = self.col_used.copy()
        clone.diag_up_used = self.diag_up_used.copy()
        clone.diag_down_used = self.diag_down_used.copy()
        return clone

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ArrayState):
            return NotImplemented
        return (
            self.size == other.size
            and self.col_used == other.col_used
            and self.diag_up_used == other.diag_up_used
            and self.diag_down_used == other.diag_down_used
        )

    def __repr__(self) -> str:
        cols = [c for c, used in enumerate(self.col_used) if used]
        return f"ArrayState(size={self.size}, columns={cols})"


STATE_KINDS = {
    "bitmask": BitmaskState,
    "array": ArrayState,
}


def make_state(size: int, kind: str = "bitmask") -> ConstraintState:
    """Return an empty constraint state of the requested representation."""
    try:
        state_cls = STATE_KINDS[kind]
    except KeyError:
        raise ValueError(
            f"Unknown state kind {kind!r}; expected one of {sorted(STATE_KINDS)}"
        ) from None
    return state_cls.empty(size)
