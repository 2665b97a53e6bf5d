"""Exhaustive N-Queens search, sequential or split across a worker pool."""

from loguru import logger

from .aggregate import aggregate
from .board import Board
from .brute_force import brute_force_solutions
from .config_manager import ConfigManager, apply_configuration
from .constraints import ArrayState, BitmaskState, ConstraintState, make_state
from .engine import SearchEngine, run_task
from .errors import InvalidInputError, QueenSearchError
from .partition import SearchTask, partition
from .solver import Parallelism, solve
from .stats import Mode, ProgressPrinter, SearchResult, Status, TaskResult
from .utils import conflicts, conflicts_on2, is_valid_solution

# Library code stays quiet until an application opts in with logger.enable("queensearch").
logger.disable(__name__)

__all__ = [
    # facade
    "solve",
    "Mode",
    "Parallelism",
    "Status",
    "SearchResult",
    # engine pieces
    "Board",
    "ConstraintState",
    "BitmaskState",
    "ArrayState",
    "make_state",
    "SearchEngine",
    "run_task",
    "TaskResult",
    "SearchTask",
    "partition",
    "aggregate",
    "brute_force_solutions",
    # validation
    "conflicts",
    "conflicts_on2",
    "is_valid_solution",
    # errors
    "QueenSearchError",
    "InvalidInputError",
    # configuration and progress
    "ConfigManager",
    "apply_configuration",
    "ProgressPrinter",
]
