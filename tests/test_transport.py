"""Tests for domain error to transport error conversion."""

import pytest


class TestToTransportError:
    def test_converts_credentials_error(self):
        from apierrors.errors import InvalidCredentialsError, TransportError, to_transport_error

        payload = to_transport_error(InvalidCredentialsError())
        assert payload == TransportError(
            code="InvalidCredentialsError",
            status_code=401,
            message="Invalid credentials",
        )
        assert payload.model_dump() == {
            "code": "InvalidCredentialsError",
            "status_code": 401,
            "message": "Invalid credentials",
        }

    def test_code_follows_renamed_error(self):
        from apierrors.errors import RequestValidationError, to_transport_error

        err = RequestValidationError(None, "Invalid or missing User ID")
        err.name = "BadUserId"
        payload = to_transport_error(err)
        assert payload.code == "BadUserId"
        assert payload.status_code == 400
        assert payload.message == "Invalid or missing User ID"

    def test_application_variant(self):
        from apierrors.errors import DomainError, to_transport_error

        class QuotaExceededError(DomainError):
            status_code = 429

        payload = to_transport_error(QuotaExceededError("quota of %d reached", 5))
        assert payload.code == "QuotaExceededError"
        assert payload.status_code == 429
        assert payload.message == "quota of 5 reached"

    def test_payload_is_immutable(self):
        from pydantic import ValidationError

        from apierrors.errors import InvalidAuthTokenError, to_transport_error

        payload = to_transport_error(InvalidAuthTokenError())
        with pytest.raises(ValidationError):
            payload.status_code = 500


class TestMissingStatusCode:
    def test_variant_without_status_code_fails_hard(self):
        from apierrors.errors import DomainError, MissingStatusCodeError, to_transport_error

        class UnmappedError(DomainError):
            pass

        with pytest.raises(MissingStatusCodeError, match="UnmappedError"):
            to_transport_error(UnmappedError("no status"))

    def test_base_error_has_no_status_code(self):
        from apierrors.errors import DomainError, MissingStatusCodeError, to_transport_error

        with pytest.raises(MissingStatusCodeError, match="DomainError"):
            to_transport_error(DomainError("bare"))

    def test_fault_is_not_a_domain_error(self):
        from apierrors.errors import DomainError, MissingStatusCodeError, is_domain_error

        assert issubclass(MissingStatusCodeError, TypeError)
        assert not issubclass(MissingStatusCodeError, DomainError)
        assert not is_domain_error(MissingStatusCodeError("x"))


class TestWireShape:
    def test_body(self):
        from apierrors.errors import TransportError

        payload = TransportError(code="BadUserId", status_code=400, message="Invalid or missing User ID")
        assert payload.to_body() == {"code": "BadUserId", "message": "Invalid or missing User ID"}

    def test_http_exception(self):
        from fastapi import HTTPException

        from apierrors.errors import TransportError

        payload = TransportError(code="InvalidAuthTokenError", status_code=401, message="Invalid auth token")
        exc = payload.to_http_exception()
        assert isinstance(exc, HTTPException)
        assert exc.payload is payload
        assert exc.status_code == 401
        assert exc.detail == {"code": "InvalidAuthTokenError", "message": "Invalid auth token"}
