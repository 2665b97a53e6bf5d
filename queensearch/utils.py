"""Conflict counting helpers for N-Queens placements.

These primitives work on plain integer sequences so they can check
placements that were never produced by the engine (hand-written boards,
permutations from the brute-force oracle, test fixtures).

Representation
--------------
Placements are encoded as a 1D sequence where ``board[row] = col``.
"""

from __future__ import annotations

from collections import Counter
from typing import Sequence


def conflicts(board: Sequence[int]) -> int:
    """Compute the number of conflicting queen pairs in O(N).

    Counts queens per column and per diagonal with hash maps; every group of
    ``k`` queens sharing a line contributes ``k * (k - 1) / 2`` pairs.
    """
    col_count: Counter[int] = Counter()
    diag_up: Counter[int] = Counter()
    diag_down: Counter[int] = Counter()

    for row, col in enumerate(board):
        col_count[col] += 1
        diag_up[row + col] += 1
        diag_down[row - col] += 1

    def _pairs(counter: Counter[int]) -> int:
        total = 0
        for count in counter.values():
            if count > 1:
                total += count * (count - 1) // 2
        return total

    return _pairs(col_count) + _pairs(diag_up) + _pairs(diag_down)


def conflicts_on2(board: Sequence[int]) -> int:
    """Compute the number of conflicting queen pairs in O(N^2).

    Reference implementation used to cross-check ``conflicts``.
    """
    n = len(board)
    conflicts_count = 0
    for i in range(n):
        for j in range(i + 1, n):
            if board[i] == board[j] or abs(board[i] - board[j]) == abs(i - j):
                conflicts_count += 1
    return conflicts_count


def is_consistent(board: Sequence[int], size: int) -> bool:
    """Return True if a (possibly partial) placement has no conflicts.

    Every column must be an ``int`` in ``[0, size)``; rows beyond
    ``len(board)`` are simply unassigned.
    """
    if len(board) > size:
        return False
    for col in board:
        # bool is an int subclass but never a column index
        if not isinstance(col, int) or isinstance(col, bool):
            return False
        if col < 0 or col >= size:
            return False
    return conflicts(board) == 0


def is_valid_solution(board: Sequence[int], size: int = -1) -> bool:
    """Return True if the board is a complete N-Queens solution.

    Contract
    - Input: sequence where board[row] = col (0-based indices); ``size``
      defaults to ``len(board)``.
    - Valid if: exactly ``size`` queens, all columns in range, no pair of
      queens attacks each other. The empty board is the unique solution
      for ``size == 0``.
    """
    if size < 0:
        size = len(board)
    if len(board) != size:
        return False
    return is_consistent(board, size)
