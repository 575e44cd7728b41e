"""Internal HTTP handling utilities for the store clients.

This module provides the low-level HTTP communication layer used by all
sub-clients. It handles:
- Making HTTP requests against a fixed base URL
- Raw exchanges for callers that assert on status codes themselves
- Response parsing and mapping of error statuses to exceptions
- Connection management and the per-client timeout

This is an internal module and should not be imported directly by users.
"""

import logging
from typing import Any, Literal

import httpx

from storeclient.exceptions import (
    APIError,
    BadRequestError,
    ConnectionError,
    InvalidResponseError,
    NotFoundError,
    ServerError,
    TimeoutError,
    UnauthorizedError,
    UnexpectedStatusError,
)

logger = logging.getLogger(__name__)

# HTTP methods supported by the client
HttpMethod = Literal["GET", "POST", "PUT", "PATCH", "DELETE"]

# Longest body excerpt carried into log lines
BODY_EXCERPT_LENGTH = 200


def _decode_body(response: httpx.Response) -> Any:
    """Return the decoded JSON body, the text for non-JSON bodies, or None."""
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text


def _parse_error_response(response: httpx.Response) -> tuple[str, str | None, dict | None]:
    """Parse an error response to extract message, type, and details.

    Understands the NestJS error format used by the Platzi API
    (``{"message": ..., "error": ..., "statusCode": ...}`` where ``message``
    may be a list of validation messages) as well as plain text bodies,
    which FakeStoreAPI sends for most errors.

    Args:
        response: The HTTP response to parse.

    Returns:
        A tuple of (message, error_type, details).
    """
    body = _decode_body(response)

    if isinstance(body, dict):
        message = body.get("message")
        error_type = body.get("error") or body.get("name")
        if isinstance(message, list):
            return "; ".join(str(m) for m in message), error_type, {"errors": message}
        if isinstance(message, str):
            return message, error_type, None
        if isinstance(body.get("error"), str):
            return body["error"], None, None
        return str(body), None, None

    if isinstance(body, str) and body.strip():
        return body.strip(), None, None

    return f"HTTP {response.status_code} error", None, None


def _raise_for_status(response: httpx.Response, expected_status: int | None = None) -> None:
    """Raise an appropriate exception for unexpected status codes.

    Args:
        response: The HTTP response to check.
        expected_status: Success status the endpoint is contracted to
            return. Any other 2xx status raises UnexpectedStatusError.

    Raises:
        BadRequestError: For HTTP 400 responses.
        UnauthorizedError: For HTTP 401 responses.
        NotFoundError: For HTTP 404 responses.
        ServerError: For HTTP 5xx responses.
        APIError: For other HTTP 4xx responses.
        UnexpectedStatusError: For a success status other than expected_status.
    """
    status_code = response.status_code

    if response.is_success:
        if expected_status is not None and status_code != expected_status:
            raise UnexpectedStatusError(
                message=f"Expected HTTP {expected_status} from {response.request.method} "
                f"{response.request.url}",
                status_code=status_code,
                expected_status=expected_status,
                response_body=_decode_body(response),
            )
        return

    message, error_type, details = _parse_error_response(response)
    response_body = _decode_body(response)

    if status_code == 400:
        raise BadRequestError(
            message=message,
            error_type=error_type,
            details=details,
            response_body=response_body,
        )
    elif status_code == 401:
        raise UnauthorizedError(
            message=message,
            error_type=error_type,
            details=details,
            response_body=response_body,
        )
    elif status_code == 404:
        raise NotFoundError(
            message=message,
            error_type=error_type,
            details=details,
            response_body=response_body,
        )
    elif status_code >= 500:
        raise ServerError(
            message=message,
            status_code=status_code,
            error_type=error_type,
            details=details,
            response_body=response_body,
        )
    else:
        raise APIError(
            message=message,
            status_code=status_code,
            error_type=error_type,
            details=details,
            response_body=response_body,
        )


class HTTPClient:
    """Synchronous HTTP client for one store API.

    Wraps httpx.Client with error handling and convenience methods.
    Requests are never retried; the timeout is the only bound on how long
    a call may hang.

    Attributes:
        base_url: The base URL for all API requests.
        timeout: Request timeout in seconds.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        headers: dict[str, str] | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """Initialize the HTTP client.

        Args:
            base_url: The base URL for all API requests.
            timeout: Request timeout in seconds.
            headers: Headers sent with every request.
            transport: Custom transport (e.g., MockTransport for testing).
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

        self._client = httpx.Client(
            base_url=self.base_url,
            timeout=timeout,
            headers=headers,
            transport=transport,
        )

    def close(self) -> None:
        """Close the HTTP client and release resources."""
        self._client.close()

    def __enter__(self) -> "HTTPClient":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def send(
        self,
        method: HttpMethod,
        path: str,
        params: dict[str, Any] | None = None,
        json: Any = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        """Perform one exchange and return the raw response.

        Error statuses are returned, not raised, so callers can assert on
        them. Transport failures are still mapped to client exceptions.

        Args:
            method: The HTTP method (GET, POST, etc.).
            path: The URL path (appended to base_url).
            params: Query parameters; None values are dropped.
            json: JSON body to send with the request.
            headers: Extra headers for this request only.

        Returns:
            The httpx response.

        Raises:
            ConnectionError: If the connection fails.
            TimeoutError: If the request times out.
        """
        url = f"{self.base_url}{path}"

        if params:
            params = {k: v for k, v in params.items() if v is not None}

        try:
            response = self._client.request(
                method=method,
                url=path,
                params=params,
                json=json,
                headers=headers,
            )
        except httpx.ConnectError as e:
            raise ConnectionError(
                message="failed to connect",
                method=method,
                url=url,
                cause=e,
            ) from e
        except httpx.TimeoutException as e:
            raise TimeoutError(
                message="no response",
                timeout=self.timeout,
                method=method,
                url=url,
            ) from e

        logger.debug(
            "%s %s -> %s %s",
            method,
            response.request.url,
            response.status_code,
            response.text[:BODY_EXCERPT_LENGTH],
        )
        return response

    def request(
        self,
        method: HttpMethod,
        path: str,
        params: dict[str, Any] | None = None,
        json: Any = None,
        headers: dict[str, str] | None = None,
        expected_status: int | None = None,
    ) -> Any:
        """Make an HTTP request and return the parsed JSON response.

        Args:
            method: The HTTP method (GET, POST, etc.).
            path: The URL path (appended to base_url).
            params: Query parameters to include in the URL.
            json: JSON body to send with the request.
            headers: Extra headers for this request only.
            expected_status: Success status the endpoint must return.

        Returns:
            The parsed JSON response body, or None for empty responses.

        Raises:
            ConnectionError: If the connection fails.
            TimeoutError: If the request times out.
            APIError: If the server returns an unexpected status.
            InvalidResponseError: If a success body is not JSON.
        """
        response = self.send(method, path, params=params, json=json, headers=headers)
        _raise_for_status(response, expected_status=expected_status)

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise InvalidResponseError(
                message=f"{method} {response.request.url} answered with a body that is not JSON",
                status_code=response.status_code,
                response_body=response.text,
            ) from e

    def get(
        self,
        path: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """Make a GET request; the contracted status is 200."""
        return self.request("GET", path, params=params, headers=headers, expected_status=200)

    def post(
        self,
        path: str,
        json: Any = None,
        expected_status: int = 201,
    ) -> Any:
        """Make a POST request; both store APIs answer 201 on creation."""
        return self.request("POST", path, json=json, expected_status=expected_status)

    def put(self, path: str, json: Any = None) -> Any:
        """Make a PUT request; the contracted status is 200."""
        return self.request("PUT", path, json=json, expected_status=200)

    def patch(self, path: str, json: Any = None) -> Any:
        """Make a PATCH request; the contracted status is 200."""
        return self.request("PATCH", path, json=json, expected_status=200)

    def delete(self, path: str) -> Any:
        """Make a DELETE request; the contracted status is 200."""
        return self.request("DELETE", path, expected_status=200)
