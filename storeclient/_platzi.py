"""Platzi Fake Store API sub-clients.

This module provides the resource clients for the Platzi Fake Store API
(``https://api.escuelajs.co/api/v1``): products, categories, users and
authentication.

This is an internal module. Import from `storeclient` instead.
"""

from typing import Any

from pydantic import BaseModel, Field

from storeclient._base import BaseClient


# Response models for Platzi endpoints


class PlatziCategory(BaseModel):
    """A product category.

    Attributes:
        id: Category identifier.
        name: Display name.
        slug: URL slug, when the API provides one.
        image: Category image URL.
    """

    id: int
    name: str
    slug: str | None = None
    image: str | None = None


class PlatziProduct(BaseModel):
    """A catalog product.

    Attributes:
        id: Product identifier assigned by the server.
        title: Product title.
        price: Price in the API's currency units.
        description: Free text description.
        category: The category the product belongs to.
        images: Image URLs.
    """

    id: int
    title: str
    slug: str | None = None
    price: float
    description: str | None = None
    category: PlatziCategory | None = None
    images: list[str] = Field(default_factory=list)


class PlatziUser(BaseModel):
    """A registered customer or admin."""

    id: int
    email: str
    name: str
    password: str | None = None
    role: str | None = None
    avatar: str | None = None


class PlatziTokens(BaseModel):
    """JWT pair returned by the login endpoint."""

    access_token: str
    refresh_token: str | None = None


# Resource clients


class PlatziProductsClient(BaseClient):
    """Client for the product endpoints (/products).

    Example:
        with PlatziClient() as client:
            products = client.products.get_all(limit=10)
            created = client.products.create(
                title="Handmade Steel Chair",
                price=120,
                description="A sturdy chair",
                category_id=1,
                images=["https://placehold.co/600x400"],
            )
            client.products.delete(created.id)
    """

    _BASE_PATH = "/products"

    def get_all(
        self,
        offset: int | None = None,
        limit: int | None = None,
        title: str | None = None,
        price_min: float | None = None,
        price_max: float | None = None,
        category_id: int | None = None,
    ) -> list[PlatziProduct]:
        """List products, optionally paginated and filtered.

        Args:
            offset: Number of products to skip.
            limit: Maximum number of products to return.
            title: Case-insensitive title filter.
            price_min: Lower price bound (used together with price_max).
            price_max: Upper price bound.
            category_id: Only products of this category.

        Returns:
            The matching products.
        """
        params = {
            "offset": offset,
            "limit": limit,
            "title": title,
            "price_min": price_min,
            "price_max": price_max,
            "categoryId": category_id,
        }
        data = self._get(self._BASE_PATH, params=params)
        return [PlatziProduct(**item) for item in data]

    def get(self, product_id: int) -> PlatziProduct:
        """Fetch one product.

        Raises:
            BadRequestError: If no product has this id.
        """
        data = self._get(self._path(product_id))
        return PlatziProduct(**data)

    def create(
        self,
        title: str,
        price: float,
        description: str,
        category_id: int,
        images: list[str],
    ) -> PlatziProduct:
        """Create a product.

        Raises:
            BadRequestError: If a field is missing or invalid.
            UnexpectedStatusError: If the server does not answer 201.
        """
        request_data: dict[str, Any] = {
            "title": title,
            "price": price,
            "description": description,
            "categoryId": category_id,
            "images": images,
        }
        data = self._post(self._BASE_PATH, json=request_data)
        return PlatziProduct(**data)

    def update(
        self,
        product_id: int,
        title: str | None = None,
        price: float | None = None,
        description: str | None = None,
        category_id: int | None = None,
        images: list[str] | None = None,
    ) -> PlatziProduct:
        """Replace fields of a product with PUT.

        Only the fields that are given are sent.
        """
        request_data: dict[str, Any] = {}
        if title is not None:
            request_data["title"] = title
        if price is not None:
            request_data["price"] = price
        if description is not None:
            request_data["description"] = description
        if category_id is not None:
            request_data["categoryId"] = category_id
        if images is not None:
            request_data["images"] = images

        data = self._put(self._path(product_id), json=request_data)
        return PlatziProduct(**data)

    def delete(self, product_id: int) -> bool:
        """Delete a product. The API answers with a bare ``true``."""
        return bool(self._delete(self._path(product_id)))


class PlatziCategoriesClient(BaseClient):
    """Client for the category endpoints (/categories)."""

    _BASE_PATH = "/categories"

    def get_all(self) -> list[PlatziCategory]:
        """List every category.

        Returns:
            The categories, in the order the API lists them.
        """
        data = self._get(self._BASE_PATH)
        return [PlatziCategory(**item) for item in data]

    def get(self, category_id: int) -> PlatziCategory:
        """Fetch one category.

        Raises:
            BadRequestError: If no category has this id.
        """
        data = self._get(self._path(category_id))
        return PlatziCategory(**data)

    def products(self, category_id: int) -> list[PlatziProduct]:
        """List the products of one category."""
        data = self._get(self._path(category_id, "products"))
        return [PlatziProduct(**item) for item in data]


class PlatziUsersClient(BaseClient):
    """Client for the user endpoints (/users)."""

    _BASE_PATH = "/users"

    def get_all(self) -> list[PlatziUser]:
        """List registered users.

        Returns:
            The users, passwords included as the API exposes them.
        """
        data = self._get(self._BASE_PATH)
        return [PlatziUser(**item) for item in data]

    def get(self, user_id: int) -> PlatziUser:
        """Fetch one user.

        Raises:
            BadRequestError: If no user has this id.
        """
        data = self._get(self._path(user_id))
        return PlatziUser(**data)

    def create(self, name: str, email: str, password: str, avatar: str) -> PlatziUser:
        """Register a user.

        Args:
            name: Full name.
            email: Login email; the API echoes it back.
            password: Plain text password (alphanumeric, at least 4 chars).
            avatar: Avatar image URL.

        Returns:
            The created user.
        """
        request_data = {
            "name": name,
            "email": email,
            "password": password,
            "avatar": avatar,
        }
        data = self._post(self._BASE_PATH, json=request_data)
        return PlatziUser(**data)


class PlatziAuthClient(BaseClient):
    """Client for the JWT authentication endpoints (/auth)."""

    _BASE_PATH = "/auth"

    def login(self, email: str, password: str) -> PlatziTokens:
        """Log in and return the token pair.

        Raises:
            UnauthorizedError: If the credentials are rejected.
        """
        data = self._post(self._path("login"), json={"email": email, "password": password})
        return PlatziTokens(**data)

    def profile(self, access_token: str) -> PlatziUser:
        """Return the user the access token belongs to."""
        data = self._get(
            self._path("profile"),
            headers={"Authorization": f"Bearer {access_token}"},
        )
        return PlatziUser(**data)
