"""Main store client classes.

This module provides the entry points for the two store APIs:
- PlatziClient: client for the Platzi Fake Store API
- FakeStoreClient: client for FakeStoreAPI

Both give namespaced access to the resources through sub-client
properties (e.g., client.products, client.users) and expose the shared
HTTP layer as ``client.http`` for raw exchanges.

Example:
    Typed usage::

        from storeclient import PlatziClient

        with PlatziClient() as client:
            tokens = client.auth.login(email="john@mail.com", password="changeme")
            me = client.auth.profile(tokens.access_token)

    Raw exchange with status assertions::

        from http import HTTPStatus
        from storeclient import FakeStoreClient, expect_status

        with FakeStoreClient() as client:
            response = client.http.send("GET", "/products/999999")
            expect_status(response, HTTPStatus.OK)
"""

import logging
from typing import Any

from storeclient._fakestore import (
    FakeStoreAuthClient,
    FakeStoreCartsClient,
    FakeStoreProductsClient,
    FakeStoreUsersClient,
)
from storeclient._http import HTTPClient
from storeclient._platzi import (
    PlatziAuthClient,
    PlatziCategoriesClient,
    PlatziProductsClient,
    PlatziUsersClient,
)
from storeclient.config import StoreSettings, load_settings

logger = logging.getLogger(__name__)


class _StoreClient:
    """Shared lifecycle of the top-level clients.

    Attributes:
        base_url: The base URL of the store API.
        timeout: Request timeout in seconds.
    """

    def __init__(self, base_url: str, timeout: float, transport: Any = None) -> None:
        self.base_url = base_url
        self.timeout = timeout
        self._http = HTTPClient(base_url=base_url, timeout=timeout, transport=transport)
        logger.debug("%s ready for %s (timeout %ss)", type(self).__name__, base_url, timeout)

    def __enter__(self):
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def close(self) -> None:
        """Close the client and release resources."""
        self._http.close()

    @property
    def http(self) -> HTTPClient:
        """The shared HTTP layer, for exchanges that assert on raw statuses."""
        return self._http


class PlatziClient(_StoreClient):
    """Client for the Platzi Fake Store API.

    Example:
        with PlatziClient(timeout=5.0) as client:
            for category in client.categories.get_all():
                print(category.name)
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: Any = None,
        settings: StoreSettings | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            base_url: API root; defaults to the configured Platzi URL.
            timeout: Request timeout in seconds; defaults to the configured value.
            transport: Custom HTTP transport (e.g., MockTransport for testing).
            settings: Settings to read defaults from; loaded from the
                environment when omitted.
        """
        if base_url is None or timeout is None:
            settings = settings or load_settings()
            base_url = base_url or settings.platzi_base_url
            timeout = timeout or settings.platzi_timeout
        super().__init__(base_url=base_url, timeout=timeout, transport=transport)

        self._products: PlatziProductsClient | None = None
        self._categories: PlatziCategoriesClient | None = None
        self._users: PlatziUsersClient | None = None
        self._auth: PlatziAuthClient | None = None

    def __enter__(self) -> "PlatziClient":
        return self

    @property
    def products(self) -> PlatziProductsClient:
        """Access product endpoints (/products)."""
        if self._products is None:
            self._products = PlatziProductsClient(self._http)
        return self._products

    @property
    def categories(self) -> PlatziCategoriesClient:
        """Access category endpoints (/categories)."""
        if self._categories is None:
            self._categories = PlatziCategoriesClient(self._http)
        return self._categories

    @property
    def users(self) -> PlatziUsersClient:
        """Access user endpoints (/users)."""
        if self._users is None:
            self._users = PlatziUsersClient(self._http)
        return self._users

    @property
    def auth(self) -> PlatziAuthClient:
        """Access authentication endpoints (/auth)."""
        if self._auth is None:
            self._auth = PlatziAuthClient(self._http)
        return self._auth


class FakeStoreClient(_StoreClient):
    """Client for FakeStoreAPI.

    FakeStoreAPI can be slow to answer; the default timeout is generous.

    Example:
        with FakeStoreClient() as client:
            token = client.auth.login(username="mor_2314", password="83r5^_")
            carts = client.carts.for_user(2)
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: Any = None,
        settings: StoreSettings | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            base_url: API root; defaults to the configured FakeStore URL.
            timeout: Request timeout in seconds; defaults to the configured value.
            transport: Custom HTTP transport (e.g., MockTransport for testing).
            settings: Settings to read defaults from; loaded from the
                environment when omitted.
        """
        if base_url is None or timeout is None:
            settings = settings or load_settings()
            base_url = base_url or settings.fakestore_base_url
            timeout = timeout or settings.fakestore_timeout
        super().__init__(base_url=base_url, timeout=timeout, transport=transport)

        self._products: FakeStoreProductsClient | None = None
        self._users: FakeStoreUsersClient | None = None
        self._auth: FakeStoreAuthClient | None = None
        self._carts: FakeStoreCartsClient | None = None

    def __enter__(self) -> "FakeStoreClient":
        return self

    @property
    def products(self) -> FakeStoreProductsClient:
        """Access product and category endpoints (/products)."""
        if self._products is None:
            self._products = FakeStoreProductsClient(self._http)
        return self._products

    @property
    def users(self) -> FakeStoreUsersClient:
        """Access user endpoints (/users)."""
        if self._users is None:
            self._users = FakeStoreUsersClient(self._http)
        return self._users

    @property
    def auth(self) -> FakeStoreAuthClient:
        """Access the login endpoint (/auth/login)."""
        if self._auth is None:
            self._auth = FakeStoreAuthClient(self._http)
        return self._auth

    @property
    def carts(self) -> FakeStoreCartsClient:
        """Access cart endpoints (/carts)."""
        if self._carts is None:
            self._carts = FakeStoreCartsClient(self._http)
        return self._carts
