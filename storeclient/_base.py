"""Base class for all sub-clients.

Each resource family of a store API (products, categories, users, auth,
carts) gets a sub-client built on ``BaseClient``. The helpers here pin
the success status each verb is contracted to return.

This is an internal module and should not be imported directly by users.
"""

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from storeclient._http import HTTPClient


class BaseClient:
    """Base class for resource sub-clients.

    Every resource client (products, users, carts, ...) shares the HTTP
    client of the top-level client it belongs to.

    Attributes:
        _http: The shared HTTP client for making requests.
    """

    _BASE_PATH = ""

    def __init__(self, http_client: "HTTPClient") -> None:
        """Initialize the sub-client.

        Args:
            http_client: The HTTP client owned by the top-level client.
        """
        self._http = http_client

    def _path(self, *parts: Any) -> str:
        """Join parts onto the resource base path.

        Example:
            ``_path(1, "products")`` on ``/categories`` gives
            ``/categories/1/products``.
        """
        suffix = "".join(f"/{part}" for part in parts)
        return f"{self._BASE_PATH}{suffix}"

    def _get(
        self,
        path: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """Read a resource; the store must answer 200.

        Args:
            path: The URL path.
            params: Query parameters; None values are dropped.
            headers: Extra headers, such as a bearer token.

        Returns:
            The decoded JSON body, or None for an empty body.
        """
        return self._http.get(path, params=params, headers=headers)

    def _post(self, path: str, json: Any = None, expected_status: int = 201) -> Any:
        """Create a resource.

        Args:
            path: The URL path.
            json: Request body.
            expected_status: Success status the endpoint answers with.

        Returns:
            The decoded JSON body.
        """
        return self._http.post(path, json=json, expected_status=expected_status)

    def _put(self, path: str, json: Any = None) -> Any:
        """Replace a resource; the store must answer 200.

        Returns:
            The decoded JSON body.
        """
        return self._http.put(path, json=json)

    def _patch(self, path: str, json: Any = None) -> Any:
        """Partially update a resource; the store must answer 200.

        Returns:
            The decoded JSON body.
        """
        return self._http.patch(path, json=json)

    def _delete(self, path: str) -> Any:
        """Delete a resource; the store must answer 200.

        Returns:
            Whatever the store echoes back: ``true`` for Platzi, the
            deleted product for FakeStoreAPI, or None for an empty body.
        """
        return self._http.delete(path)
