"""Structured logging for services reporting HTTP errors."""

from apierrors.logging.setup import (
    SeverityBoundLogger,
    configure_logging,
    get_logger,
    setup_logging,
)

__all__ = ["SeverityBoundLogger", "configure_logging", "get_logger", "setup_logging"]
