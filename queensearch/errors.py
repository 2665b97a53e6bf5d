"""Exception types raised by the search package.

Only invalid requests are errors. A search that was cancelled is reported
through ``SearchResult.status`` instead, so callers can still read the
partial aggregate.
"""

from __future__ import annotations


class QueenSearchError(Exception):
    """Base class for every error raised by ``queensearch``."""


class InvalidInputError(QueenSearchError, ValueError):
    """A request was rejected before any search work started."""


def require_int(value, label: str, minimum: int = 0) -> int:
    """Return ``value`` if it is an integer >= ``minimum``, else raise `InvalidInputError`."""
    # bool is an int subclass but never a size, depth or worker count
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidInputError(f"{label} must be an integer, got {value!r}")
    if value < minimum:
        raise InvalidInputError(f"{label} must be >= {minimum}, got {value}")
    return value
