"""Domain error taxonomy.

Each variant fixes its ``severity`` and HTTP ``status_code`` as class
attributes. ``name`` is the wire error code and stays writable so validation
call sites can pick a domain-specific code::

    if not body.get("user_id"):
        error = RequestValidationError("BadUserId", "Invalid or missing User ID")
        return send_http_error(logger, next_stage, error)

    # answered with HTTP 400 and body
    # {"code": "BadUserId", "message": "Invalid or missing User ID"}
"""

import weakref
from typing import Any

from apierrors.errors.messages import format_message
from apierrors.errors.severity import Severity
from apierrors.errors.stack import capture_construction_site

_FIXED_ATTRIBUTES = frozenset({"severity", "status_code"})

_registry: "weakref.WeakSet[type[DomainError]]" = weakref.WeakSet()


class DomainError(Exception):
    """Base class for errors that map onto an HTTP error response.

    Attributes:
        name: Wire error code. Defaults to the class name.
        message: Human-readable message built from the constructor arguments.
        severity: Level ``send_http_error`` logs this error at.
        status_code: HTTP status of the response. ``None`` means the variant
            cannot be converted yet.
        stack: Frames of the code that constructed the error.
    """

    severity: Severity = Severity.ERROR
    status_code: int | None = None

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        _registry.add(cls)

    def __init__(self, *message_args: Any) -> None:
        self.message = format_message(*message_args)
        super().__init__(self.message)
        self.name = type(self).__name__
        self.stack = capture_construction_site(self)

    def __setattr__(self, name: str, value: Any) -> None:
        if name in _FIXED_ATTRIBUTES:
            raise AttributeError(f"{type(self).__name__}.{name} is fixed per error variant")
        super().__setattr__(name, value)

    def __reduce__(self) -> tuple[Any, ...]:
        # Variant constructors do not take the message back, so rebuild from state.
        return _restore, (type(self), dict(self.__dict__))


_registry.add(DomainError)


def _restore(cls: type[DomainError], state: dict[str, Any]) -> DomainError:
    error = cls.__new__(cls)
    Exception.__init__(error, state.get("message", ""))
    error.__dict__.update(state)
    return error


class RequestValidationError(DomainError):
    """Request data failed validation; ``name`` is the caller's error code."""

    severity = Severity.INFO
    status_code = 400

    def __init__(self, name: str | None = None, *message_args: Any) -> None:
        super().__init__(*message_args)
        if name:
            self.name = name


class InvalidAuthTokenError(DomainError):
    severity = Severity.INFO
    status_code = 401

    def __init__(self) -> None:
        super().__init__("Invalid auth token")


class InvalidCredentialsError(DomainError):
    severity = Severity.INFO
    status_code = 401

    def __init__(self) -> None:
        super().__init__("Invalid credentials")


def is_domain_error(error: object) -> bool:
    """Whether ``error``'s exact type is a registered ``DomainError`` variant."""
    return type(error) in _registry


def domain_error_types() -> frozenset[type[DomainError]]:
    """Snapshot of every registered variant, ``DomainError`` included."""
    return frozenset(_registry)
