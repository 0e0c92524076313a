"""Structlog configuration exposing every ``Severity`` as a logger method."""

import logging
import sys
from typing import Any

import structlog

from apierrors.config import ServiceSettings
from apierrors.errors.severity import TRACE_LEVEL, Severity
from apierrors.logging.processors import (
    add_service_name,
    censor_sensitive_data,
    serialize_error_payloads,
)

logging.addLevelName(TRACE_LEVEL, "TRACE")


class SeverityBoundLogger(structlog.stdlib.BoundLogger):
    """Stdlib bound logger with ``trace``, ``warn`` and ``fatal`` methods."""

    def trace(self, event: str | None = None, *args: Any, **kw: Any) -> Any:
        if args:
            kw["positional_args"] = args
        try:
            event_args, event_kw = self._process_event("trace", event, kw)
        except structlog.DropEvent:
            return None
        return self._logger.log(TRACE_LEVEL, *event_args, **event_kw)

    def warn(self, event: str | None = None, *args: Any, **kw: Any) -> Any:
        return self.warning(event, *args, **kw)

    def fatal(self, event: str | None = None, *args: Any, **kw: Any) -> Any:
        return self.critical(event, *args, **kw)


def setup_logging(service_name: str, log_level: str = "INFO", log_format: str = "json") -> None:
    """Configure structlog and stdlib logging for the entire process.

    ``log_level`` accepts severity names (``warn``, ``fatal``, ``trace``) as
    well as stdlib level names.
    """
    level = Severity.parse(log_level).stdlib_level
    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        add_service_name(service_name),
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        censor_sensitive_data,
        serialize_error_payloads,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.processors.CallsiteParameterAdder(
            {
                structlog.processors.CallsiteParameter.FILENAME,
                structlog.processors.CallsiteParameter.FUNC_NAME,
                structlog.processors.CallsiteParameter.LINENO,
            },
            additional_ignores=["apierrors.logging", "apierrors.errors"],
        ),
    ]
    if log_format == "dev":
        renderer: structlog.types.Processor = structlog.dev.ConsoleRenderer(colors=True)
    else:
        renderer = structlog.processors.JSONRenderer()

    structlog.configure(
        processors=[*shared_processors, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=SeverityBoundLogger,
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)
    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(level)


def configure_logging(settings: ServiceSettings) -> None:
    """Apply ``settings`` through ``setup_logging``."""
    setup_logging(settings.service_name, settings.log_level, settings.log_format)


def get_logger(**initial_bindings: object) -> SeverityBoundLogger:
    """Return a structlog bound logger."""
    return structlog.get_logger(**initial_bindings)
