"""Clients and HTTP assertions for the public demo store APIs.

This package provides typed Python clients for the Platzi Fake Store API
and FakeStoreAPI, plus helpers to assert on raw HTTP exchanges.

Example:
    from storeclient import PlatziClient

    with PlatziClient() as client:
        products = client.products.get_all(limit=5)
        tokens = client.auth.login(email="john@mail.com", password="changeme")

Exports:
    PlatziClient: Client for the Platzi Fake Store API.
    FakeStoreClient: Client for FakeStoreAPI.

    Exceptions:
        StoreClientError: Base exception for all client errors.
        TransportError: No response came back.
        ConnectionError: Failed to connect to the server.
        TimeoutError: Request timed out.
        APIError: Server returned an unexpected status.
        BadRequestError: HTTP 400.
        UnauthorizedError: HTTP 401.
        NotFoundError: HTTP 404.
        ServerError: HTTP 5xx.
        UnexpectedStatusError: Success status other than the contracted one.
        InvalidResponseError: Success body that is not JSON.
"""

from storeclient._fakestore import (
    FakeStoreAddress,
    FakeStoreAuthClient,
    FakeStoreCart,
    FakeStoreCartItem,
    FakeStoreCartsClient,
    FakeStoreGeolocation,
    FakeStoreProduct,
    FakeStoreProductsClient,
    FakeStoreRating,
    FakeStoreToken,
    FakeStoreUser,
    FakeStoreUserName,
    FakeStoreUsersClient,
)
from storeclient._platzi import (
    PlatziAuthClient,
    PlatziCategoriesClient,
    PlatziCategory,
    PlatziProduct,
    PlatziProductsClient,
    PlatziTokens,
    PlatziUser,
    PlatziUsersClient,
)
from storeclient.client import FakeStoreClient, PlatziClient
from storeclient.config import StoreSettings, load_settings
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
from storeclient.expectations import (
    body_of,
    expect_json_like,
    expect_non_empty_list,
    expect_status,
    json_like,
)

__all__ = [
    # Main clients
    "PlatziClient",
    "FakeStoreClient",
    # Sub-clients
    "PlatziProductsClient",
    "PlatziCategoriesClient",
    "PlatziUsersClient",
    "PlatziAuthClient",
    "FakeStoreProductsClient",
    "FakeStoreUsersClient",
    "FakeStoreAuthClient",
    "FakeStoreCartsClient",
    # Configuration
    "StoreSettings",
    "load_settings",
    # Exceptions
    "StoreClientError",
    "TransportError",
    "ConnectionError",
    "TimeoutError",
    "APIError",
    "BadRequestError",
    "UnauthorizedError",
    "NotFoundError",
    "ServerError",
    "UnexpectedStatusError",
    "InvalidResponseError",
    # Assertions
    "body_of",
    "expect_json_like",
    "expect_non_empty_list",
    "expect_status",
    "json_like",
    # Response models - Platzi
    "PlatziCategory",
    "PlatziProduct",
    "PlatziUser",
    "PlatziTokens",
    # Response models - FakeStore
    "FakeStoreRating",
    "FakeStoreProduct",
    "FakeStoreUserName",
    "FakeStoreGeolocation",
    "FakeStoreAddress",
    "FakeStoreUser",
    "FakeStoreToken",
    "FakeStoreCartItem",
    "FakeStoreCart",
]
