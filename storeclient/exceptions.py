"""Exception hierarchy for the store API clients.

This module defines all exceptions that can be raised by the storeclient
library. The hierarchy allows catching specific error types or broader
categories as needed.

Exception Hierarchy:
    StoreClientError (base)
    ├── TransportError - No response came back
    │   ├── ConnectionError - Network/connection failures
    │   └── TimeoutError - Request exceeded the suite timeout
    └── APIError - Server returned an unexpected status or body
        ├── BadRequestError (HTTP 400)
        ├── UnauthorizedError (HTTP 401)
        ├── NotFoundError (HTTP 404)
        ├── ServerError (HTTP 5xx)
        ├── UnexpectedStatusError (success status other than the contracted one)
        └── InvalidResponseError (success status with a body that is not JSON)

Example:
    Catching specific errors::

        try:
            client.products.get(999999)
        except BadRequestError as e:
            print(f"Rejected: {e.message}")

    Catching all API errors::

        try:
            client.auth.login(email="john@mail.com", password="wrong")
        except APIError as e:
            print(f"API error {e.status_code}: {e.message}")
"""

from typing import Any


class StoreClientError(Exception):
    """Root of every error a store client raises.

    Attributes:
        message: What went wrong, without transport or status decoration.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


class TransportError(StoreClientError):
    """No response came back from the store.

    Attributes:
        method: HTTP method of the failed exchange.
        url: Full URL of the failed exchange.
    """

    def __init__(self, message: str, method: str | None = None, url: str | None = None) -> None:
        self.method = method
        self.url = url
        super().__init__(message)

    def _exchange(self) -> str:
        return " ".join(part for part in (self.method, self.url) if part)

    def __str__(self) -> str:
        exchange = self._exchange()
        if exchange:
            return f"{exchange}: {self.message}"
        return self.message


class ConnectionError(TransportError):
    """The store host refused or dropped the connection.

    Attributes:
        cause: The httpx exception raised by the transport.
    """

    def __init__(
        self,
        message: str,
        method: str | None = None,
        url: str | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.cause = cause
        super().__init__(message, method=method, url=url)


class TimeoutError(TransportError):
    """The store did not answer within the suite timeout.

    Platzi exchanges are bounded at 10 seconds and FakeStore exchanges at
    90 seconds unless configured otherwise.

    Attributes:
        timeout: The bound that was exceeded, in seconds.
    """

    def __init__(
        self,
        message: str,
        timeout: float | None = None,
        method: str | None = None,
        url: str | None = None,
    ) -> None:
        self.timeout = timeout
        super().__init__(message, method=method, url=url)

    def __str__(self) -> str:
        text = super().__str__()
        if self.timeout is not None:
            return f"{text} after {self.timeout}s"
        return text


class APIError(StoreClientError):
    """Server answered with a status the caller did not expect.

    Base class for all API-level errors.

    Attributes:
        message: Human-readable error message.
        status_code: HTTP status code from the server.
        error_type: Error label from the response body (e.g. "Bad Request").
        details: Additional error details from the response.
        response_body: Raw response body for debugging.
    """

    def __init__(
        self,
        message: str,
        status_code: int,
        error_type: str | None = None,
        details: dict[str, Any] | None = None,
        response_body: Any = None,
    ) -> None:
        self.status_code = status_code
        self.error_type = error_type
        self.details = details
        self.response_body = response_body
        super().__init__(message)

    def __str__(self) -> str:
        if self.error_type:
            return f"[HTTP {self.status_code}] [{self.error_type}] {self.message}"
        return f"[HTTP {self.status_code}] {self.message}"


class BadRequestError(APIError):
    """Request rejected by the server (HTTP 400).

    The Platzi API also answers 400 for lookups of unknown ids.
    """

    def __init__(
        self,
        message: str,
        error_type: str | None = None,
        details: dict[str, Any] | None = None,
        response_body: Any = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=400,
            error_type=error_type,
            details=details,
            response_body=response_body,
        )


class UnauthorizedError(APIError):
    """Credentials missing or rejected (HTTP 401)."""

    def __init__(
        self,
        message: str,
        error_type: str | None = None,
        details: dict[str, Any] | None = None,
        response_body: Any = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=401,
            error_type=error_type,
            details=details,
            response_body=response_body,
        )


class NotFoundError(APIError):
    """Resource or route not found (HTTP 404)."""

    def __init__(
        self,
        message: str,
        error_type: str | None = None,
        details: dict[str, Any] | None = None,
        response_body: Any = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=404,
            error_type=error_type,
            details=details,
            response_body=response_body,
        )


class ServerError(APIError):
    """Server-side failure (HTTP 5xx).

    Example:
        try:
            client.products.create(...)
        except ServerError as e:
            print(f"Server error {e.status_code}: {e.message}")
    """

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        error_type: str | None = None,
        details: dict[str, Any] | None = None,
        response_body: Any = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=status_code,
            error_type=error_type,
            details=details,
            response_body=response_body,
        )


class UnexpectedStatusError(APIError):
    """Request succeeded with a status other than the contracted one.

    Raised, for instance, when a create endpoint answers 200 instead of 201.

    Attributes:
        expected_status: The status the endpoint is contracted to return.
    """

    def __init__(
        self,
        message: str,
        status_code: int,
        expected_status: int,
        response_body: Any = None,
    ) -> None:
        self.expected_status = expected_status
        super().__init__(
            message=message,
            status_code=status_code,
            error_type="unexpected_status",
            response_body=response_body,
        )


class InvalidResponseError(APIError):
    """Request succeeded but the body could not be decoded as JSON.

    Attributes:
        response_body: The undecodable body as text.
    """

    def __init__(self, message: str, status_code: int, response_body: str | None = None) -> None:
        super().__init__(
            message=message,
            status_code=status_code,
            error_type="invalid_json",
            response_body=response_body,
        )
