"""Global settings for the N-Queens search engine.

This module centralizes tunable constants used by the solver facade, the
partitioner and the engine. Values are read at call time, so they can be
overridden at runtime either directly or through
`queensearch.config_manager.apply_configuration`.
"""
from __future__ import annotations

import multiprocessing
from typing import Optional

from loguru import logger

# Number of worker processes to use (leave one core for the OS)
NUM_PROCESSES: int = max(1, multiprocessing.cpu_count() - 1)

# Worker pool kind for parallel solving: 'process' | 'thread'
EXECUTOR: str = "process"

# Leading rows fixed per parallel task (1 = split on the column of row 0)
PARTITION_DEPTH: int = 1

# What to do when the board has fewer rows than PARTITION_DEPTH:
# 'clamp' fixes the whole board, 'single' falls back to one unsplit task
SHORT_BOARD_POLICY: str = "clamp"

# Largest accepted board size (None = no limit)
MAX_BOARD_SIZE: Optional[int] = 64

# Constraint representation used by the engine: 'bitmask' | 'array'
STATE_KIND: str = "bitmask"

# Engine loop iterations between two cancellation checks
CANCEL_POLL_INTERVAL: int = 64

# Default wall-clock limit for a whole solve in seconds (None = no limit)
TIME_LIMIT: Optional[float] = None


def set_time_limit(limit: Optional[float] = None) -> None:
    """Configure the default wall-clock limit applied by ``solve``.

    Parameters
    - limit: seconds before running tasks are cancelled (None disables it).
    """
    global TIME_LIMIT
    TIME_LIMIT = limit
    if TIME_LIMIT is not None:
        logger.info("Solve time limit set to {}s", TIME_LIMIT)
    else:
        logger.info("Solve time limit disabled")
