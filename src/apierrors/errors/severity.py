"""Severity vocabulary carried by every domain error.

Values double as logger method names: ``send_http_error`` calls
``getattr(logger, severity.value)``.
"""

import logging
from enum import Enum

TRACE_LEVEL = 5


class Severity(str, Enum):
    """Logging severities, ordered trace < debug < info < warn < error < fatal.

    * ``fatal``: the service is going to stop or become unusable.
    * ``error``: fatal for a particular request; the service keeps serving others.
    * ``warn``: something an operator should eventually look at.
    * ``info``: detail on regular operation, including expected request failures.
    * ``debug``: anything too verbose for ``info``.
    * ``trace``: very detailed logging, including from external libraries.
    """

    TRACE = "trace"
    DEBUG = "debug"
    INFO = "info"
    WARN = "warn"
    ERROR = "error"
    FATAL = "fatal"

    @property
    def rank(self) -> int:
        return _RANKS[self]

    @property
    def stdlib_level(self) -> int:
        """Matching ``logging`` level number."""
        return _STDLIB_LEVELS[self]

    @classmethod
    def parse(cls, name: str) -> "Severity":
        """Resolve a severity from either its own name or a stdlib level name.

        Raises:
            ValueError: If ``name`` matches neither vocabulary.
        """
        key = name.strip().lower()
        try:
            return cls(_ALIASES.get(key, key))
        except ValueError:
            raise ValueError(f"Unknown severity: {name!r}") from None

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Severity):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Severity):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Severity):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Severity):
            return NotImplemented
        return self.rank >= other.rank


_RANKS = {
    Severity.TRACE: 10,
    Severity.DEBUG: 20,
    Severity.INFO: 30,
    Severity.WARN: 40,
    Severity.ERROR: 50,
    Severity.FATAL: 60,
}

_STDLIB_LEVELS = {
    Severity.TRACE: TRACE_LEVEL,
    Severity.DEBUG: logging.DEBUG,
    Severity.INFO: logging.INFO,
    Severity.WARN: logging.WARNING,
    Severity.ERROR: logging.ERROR,
    Severity.FATAL: logging.CRITICAL,
}

_ALIASES = {"warning": "warn", "critical": "fatal"}
