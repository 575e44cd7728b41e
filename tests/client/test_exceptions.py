"""Unit tests for the storeclient exception hierarchy.

The hierarchy being tested:
    StoreClientError (base)
    ├── TransportError
    │   ├── ConnectionError
    │   └── TimeoutError
    └── APIError
        ├── BadRequestError (HTTP 400)
        ├── UnauthorizedError (HTTP 401)
        ├── NotFoundError (HTTP 404)
        ├── ServerError (HTTP 5xx)
        ├── UnexpectedStatusError
        └── InvalidResponseError
"""

import builtins

import pytest

from storeclient.exceptions import (
    APIError,
    BadRequestError,
    ConnectionError,
    InvalidResponseError,
    NotFoundError,
    ServerError,
    StoreClientError,
    TimeoutError,
    TransportError,
    UnauthorizedError,
    UnexpectedStatusError,
)


# =============================================================================
# StoreClientError Tests (Base Exception)
# =============================================================================

class TestStoreClientError:
    """Tests for the base StoreClientError exception class."""

    def test_message_attribute(self) -> None:
        error = StoreClientError("Something went wrong")
        assert error.message == "Something went wrong"
        assert str(error) == "Something went wrong"

    def test_is_exception(self) -> None:
        assert issubclass(StoreClientError, Exception)


# =============================================================================
# Transport Errors
# =============================================================================

class TestTransportError:
    """Tests for TransportError and its subclasses."""

    def test_str_names_the_exchange(self) -> None:
        error = TransportError("failed to connect", method="GET", url="https://fakestoreapi.com/products")
        assert str(error) == "GET https://fakestoreapi.com/products: failed to connect"

    def test_str_without_exchange(self) -> None:
        assert str(TransportError("failed to connect")) == "failed to connect"

    def test_subclasses(self) -> None:
        assert issubclass(ConnectionError, TransportError)
        assert issubclass(TimeoutError, TransportError)
        assert not issubclass(APIError, TransportError)


class TestConnectionError:
    """Tests for ConnectionError."""

    def test_keeps_cause(self) -> None:
        cause = OSError("refused")
        error = ConnectionError("failed to connect", method="POST", url="https://fakestoreapi.com/carts", cause=cause)
        assert error.cause is cause
        assert str(error) == "POST https://fakestoreapi.com/carts: failed to connect"

    def test_does_not_shadow_builtin_hierarchy(self) -> None:
        """Client ConnectionError is caught as StoreClientError, not builtins.ConnectionError."""
        assert issubclass(ConnectionError, StoreClientError)
        assert not issubclass(ConnectionError, builtins.ConnectionError)


class TestTimeoutError:
    """Tests for TimeoutError."""

    def test_str_with_timeout_and_exchange(self) -> None:
        error = TimeoutError(
            "no response",
            timeout=10.0,
            method="GET",
            url="https://api.escuelajs.co/api/v1/products",
        )
        assert str(error) == "GET https://api.escuelajs.co/api/v1/products: no response after 10.0s"

    def test_str_with_timeout_only(self) -> None:
        assert str(TimeoutError("no response", timeout=90.0)) == "no response after 90.0s"

    def test_str_plain(self) -> None:
        assert str(TimeoutError("no response")) == "no response"

    def test_does_not_shadow_builtin_hierarchy(self) -> None:
        assert not issubclass(TimeoutError, builtins.TimeoutError)


# =============================================================================
# API Errors
# =============================================================================

class TestAPIError:
    """Tests for APIError and its status-specific subclasses."""

    def test_attributes(self) -> None:
        error = APIError(
            message="Forbidden resource",
            status_code=403,
            error_type="Forbidden",
            details={"reason": "admin only"},
            response_body={"message": "Forbidden resource"},
        )
        assert error.status_code == 403
        assert error.error_type == "Forbidden"
        assert error.details == {"reason": "admin only"}
        assert error.response_body == {"message": "Forbidden resource"}

    def test_str_with_error_type(self) -> None:
        error = APIError("Forbidden resource", status_code=403, error_type="Forbidden")
        assert str(error) == "[HTTP 403] [Forbidden] Forbidden resource"

    def test_str_without_error_type(self) -> None:
        assert str(APIError("teapot", status_code=418)) == "[HTTP 418] teapot"

    @pytest.mark.parametrize(
        "error, status_code",
        [
            (BadRequestError("bad"), 400),
            (UnauthorizedError("who"), 401),
            (NotFoundError("gone"), 404),
            (ServerError("boom"), 500),
            (ServerError("down", status_code=503), 503),
        ],
    )
    def test_status_codes(self, error: APIError, status_code: int) -> None:
        assert error.status_code == status_code
        assert isinstance(error, APIError)
        assert isinstance(error, StoreClientError)

    def test_unexpected_status(self) -> None:
        error = UnexpectedStatusError(
            "Expected HTTP 201",
            status_code=200,
            expected_status=201,
            response_body={"id": 1},
        )
        assert error.expected_status == 201
        assert error.status_code == 200
        assert error.error_type == "unexpected_status"
        assert str(error) == "[HTTP 200] [unexpected_status] Expected HTTP 201"

    def test_catch_specific_via_base(self) -> None:
        with pytest.raises(APIError) as exc_info:
            raise BadRequestError("Could not find any entity", error_type="EntityNotFoundError")
        assert exc_info.value.status_code == 400

    def test_invalid_response(self) -> None:
        error = InvalidResponseError("not JSON", status_code=200, response_body="<html>")
        assert error.error_type == "invalid_json"
        assert error.response_body == "<html>"
        assert str(error) == "[HTTP 200] [invalid_json] not JSON"
        assert isinstance(error, APIError)
