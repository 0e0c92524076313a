"""Environment-based service configuration."""

import os
from dataclasses import dataclass, field

from apierrors.errors.severity import Severity

_STDLIB_NAMES = {
    Severity.TRACE: "TRACE",
    Severity.DEBUG: "DEBUG",
    Severity.INFO: "INFO",
    Severity.WARN: "WARNING",
    Severity.ERROR: "ERROR",
    Severity.FATAL: "CRITICAL",
}


@dataclass(frozen=True)
class ServiceSettings:
    """Immutable service configuration read from environment variables.

    ``log_level`` accepts either ``warn``/``fatal`` style severity names or
    stdlib level names and is stored as the stdlib upper-case name.
    """

    service_name: str
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    log_format: str = field(default_factory=lambda: os.getenv("LOG_FORMAT", "json"))
    debug: bool = field(default_factory=lambda: os.getenv("DEBUG", "false").lower() == "true")

    def __post_init__(self) -> None:
        object.__setattr__(self, "log_level", _STDLIB_NAMES[Severity.parse(self.log_level)])

    @property
    def severity(self) -> Severity:
        return Severity.parse(self.log_level)
