"""apierrors - Domain errors and HTTP error reporting for request handlers."""

__version__ = "0.1.0"

from apierrors.config import ServiceSettings
from apierrors.errors import (
    DomainError,
    InvalidAuthTokenError,
    InvalidCredentialsError,
    MissingStatusCodeError,
    RequestValidationError,
    Severity,
    TransportError,
    send_http_error,
)
from apierrors.errors.handlers import (
    error_response,
    raise_transport_error,
    register_error_handlers,
)
from apierrors.logging import get_logger, setup_logging

__all__ = [
    "DomainError",
    "InvalidAuthTokenError",
    "InvalidCredentialsError",
    "MissingStatusCodeError",
    "RequestValidationError",
    "ServiceSettings",
    "Severity",
    "TransportError",
    "error_response",
    "get_logger",
    "raise_transport_error",
    "register_error_handlers",
    "send_http_error",
    "setup_logging",
]
