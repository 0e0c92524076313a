"""FastAPI glue around ``send_http_error``."""

from typing import Any, NoReturn

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from apierrors.errors.dispatch import send_http_error
from apierrors.errors.exceptions import DomainError
from apierrors.errors.transport import TransportError, TransportHTTPException
from apierrors.logging import get_logger

INTERNAL_ERROR_BODY = {"code": "InternalServerError", "message": "Internal server error"}


def error_response(payload: Any) -> JSONResponse:
    """Render a dispatched payload. Unclassified errors never expose internals."""
    if isinstance(payload, TransportError):
        return JSONResponse(status_code=payload.status_code, content=payload.to_body())
    return JSONResponse(status_code=500, content=INTERNAL_ERROR_BODY)


def raise_transport_error(payload: Any) -> NoReturn:
    """Continuation for route handlers: hand the payload back to FastAPI.

    With ``register_error_handlers`` installed the response body is the same
    ``{"code", "message"}`` object the registered handlers render.
    """
    if isinstance(payload, TransportError):
        raise payload.to_http_exception()
    raise payload


def register_error_handlers(app: FastAPI, logger: Any = None) -> None:
    """Route uncaught exceptions through ``send_http_error``.

    Args:
        app: The FastAPI application instance to register handlers on.
        logger: Logger passed to ``send_http_error``. Defaults to ``get_logger()``.
    """
    log = logger if logger is not None else get_logger()

    def dispatch(exc: Exception) -> JSONResponse:
        responses: list[JSONResponse] = []
        send_http_error(log, lambda payload: responses.append(error_response(payload)), exc)
        return responses[0]

    @app.exception_handler(DomainError)
    async def handle_domain_error(request: Request, exc: DomainError) -> JSONResponse:
        return dispatch(exc)

    @app.exception_handler(TransportHTTPException)
    async def handle_transport_error(request: Request, exc: TransportHTTPException) -> JSONResponse:
        # Already dispatched and logged by the route.
        return error_response(exc.payload)

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
        return dispatch(exc)
