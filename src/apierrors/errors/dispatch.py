"""Single entry point request handlers use to report a failure."""

from collections.abc import Callable
from typing import Any

from apierrors.errors.exceptions import is_domain_error
from apierrors.errors.severity import Severity
from apierrors.errors.stack import capture_call_site
from apierrors.errors.transport import to_transport_error

Continuation = Callable[[Any], Any]


def send_http_error(logger: Any, continuation: Continuation, error: BaseException) -> None:
    """Log ``error`` at its severity and forward it to ``continuation``.

    Domain errors are converted to a ``TransportError`` and logged at their
    own severity. Anything else is forwarded untouched and logged at
    ``error``. The log record carries the stack of *this* call under
    ``send_http_error_stack``, since the error's own traceback may come from
    an earlier event loop turn.

    Args:
        logger: Object exposing one method per ``Severity`` value, called as
            ``method(event, **fields)``.
        continuation: Next stage; receives the logged payload exactly once.
        error: The failure to report.

    Raises:
        MissingStatusCodeError: If a domain error variant lacks a status code.
            Nothing is logged or forwarded in that case.
    """
    call_site = capture_call_site()

    if is_domain_error(error):
        payload: Any = to_transport_error(error)
        severity = Severity(error.severity)
    else:
        payload = error
        severity = Severity.ERROR

    log = getattr(logger, severity.value)
    log("http_error", error=payload, send_http_error_stack=call_site)
    continuation(payload)
