"""Structlog processors for services reporting HTTP errors."""

from typing import Any

from apierrors.errors.transport import TransportError

_SENSITIVE_KEYS = frozenset(
    {
        "password",
        "passwd",
        "token",
        "auth_token",
        "access_token",
        "refresh_token",
        "api_key",
        "apikey",
        "secret",
        "secret_key",
        "authorization",
        "cookie",
        "credentials",
    }
)


def censor_sensitive_data(logger: Any, method: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    """Redact values for keys that look like secrets."""
    for key in event_dict:
        if key.lower() in _SENSITIVE_KEYS:
            event_dict[key] = "***REDACTED***"
    return event_dict


def add_service_name(service_name: str) -> Any:
    """Return a processor that binds service=<name> to every event."""

    def processor(logger: Any, method: str, event_dict: dict[str, Any]) -> dict[str, Any]:
        event_dict.setdefault("service", service_name)
        return event_dict

    return processor


def serialize_error_payloads(
    logger: Any, method: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Render the ``error`` value as plain data instead of its ``repr``."""
    error = event_dict.get("error")
    if isinstance(error, TransportError):
        event_dict["error"] = error.model_dump()
    elif isinstance(error, BaseException):
        event_dict["error"] = {"type": type(error).__name__, "message": str(error)}
    return event_dict
