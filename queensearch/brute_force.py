"""Exhaustive permutation search, used as an independent oracle.

Every placement with one queen per row and per column is a permutation of
``range(N)``; filtering the permutations with the standalone validator
gives the full solution set without sharing any code path with the
backtracking engine. The cost is ``N!`` validity checks, so this is meant
for small boards only.
"""
from __future__ import annotations

from concurrent.futures import ProcessPoolExecutor
from itertools import compress, permutations
from typing import List, Optional

from .board import Board
from .utils import is_valid_solution


def brute_force_solutions(size: int, workers: Optional[int] = None) -> List[Board]:
    """Return every solution for ``size`` in lexicographic order.

    Parameters
    ----------
    size : int
        Board dimension N (N >= 0).
    workers : int | None
        When greater than 1, validity checks are spread over a
        ``ProcessPoolExecutor`` with that many processes.
    """
    candidates = list(permutations(range(size)))
    if workers is not None and workers > 1 and len(candidates) > 1:
        chunksize = max(1, len(candidates) // (workers * 4))
        with ProcessPoolExecutor(max_workers=workers) as executor:
            flags = list(executor.map(is_valid_solution, candidates, chunksize=chunksize))
    else:
        flags = [is_valid_solution(candidate) for candidate in candidates]
    return [Board(candidate, size) for candidate in compress(candidates, flags)]
