"""Conversion of domain errors into the wire-level error payload."""

from fastapi import HTTPException
from pydantic import BaseModel, ConfigDict

from apierrors.errors.exceptions import DomainError


class MissingStatusCodeError(TypeError):
    """A domain error variant reached conversion without a ``status_code``.

    Signals misuse of the taxonomy by the caller, never a failed request.
    """


class TransportHTTPException(HTTPException):
    """``HTTPException`` carrying the ``TransportError`` it was raised for."""

    def __init__(self, payload: "TransportError") -> None:
        super().__init__(status_code=payload.status_code, detail=payload.to_body())
        self.payload = payload


class TransportError(BaseModel):
    """Error payload handed to the HTTP layer.

    ``status_code`` drives the response status; ``code`` and ``message``
    form the response body.
    """

    model_config = ConfigDict(frozen=True)

    code: str
    status_code: int
    message: str

    def to_body(self) -> dict[str, str]:
        return {"code": self.code, "message": self.message}

    def to_http_exception(self) -> TransportHTTPException:
        return TransportHTTPException(self)


def to_transport_error(error: DomainError) -> TransportError:
    """Map a domain error onto its ``TransportError``.

    Raises:
        MissingStatusCodeError: If the error's variant defines no ``status_code``.
    """
    if not error.status_code:
        raise MissingStatusCodeError(
            f'Please define "status_code" for {type(error).__name__}'
        )

    return TransportError(
        code=error.name,
        status_code=error.status_code,
        message=error.message,
    )
