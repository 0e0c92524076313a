"""Domain error taxonomy and HTTP error dispatch."""

from apierrors.errors.dispatch import send_http_error
from apierrors.errors.exceptions import (
    DomainError,
    InvalidAuthTokenError,
    InvalidCredentialsError,
    RequestValidationError,
    domain_error_types,
    is_domain_error,
)
from apierrors.errors.severity import Severity
from apierrors.errors.stack import capture_call_site
from apierrors.errors.transport import (
    MissingStatusCodeError,
    TransportError,
    TransportHTTPException,
    to_transport_error,
)

__all__ = [
    "DomainError",
    "InvalidAuthTokenError",
    "InvalidCredentialsError",
    "MissingStatusCodeError",
    "RequestValidationError",
    "Severity",
    "TransportError",
    "TransportHTTPException",
    "capture_call_site",
    "domain_error_types",
    "is_domain_error",
    "send_http_error",
    "to_transport_error",
]
