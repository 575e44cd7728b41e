"""FakeStoreAPI sub-clients.

This module provides the resource clients for FakeStoreAPI
(``https://fakestoreapi.com``): products, users, authentication and carts.
The service accepts writes but does not persist them; created resources
only live in the response.

This is an internal module. Import from `storeclient` instead.
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from storeclient._base import BaseClient


SortOrder = Literal["asc", "desc"]


# Response models for FakeStore endpoints


class FakeStoreRating(BaseModel):
    """Aggregated customer rating of a product."""

    rate: float
    count: int


class FakeStoreProduct(BaseModel):
    """A catalog product.

    Only ``id`` is guaranteed: the service echoes whatever fields a write
    request carried.

    Attributes:
        id: Product identifier.
        title: Product title.
        price: Price in USD.
        description: Free text description.
        category: Category name (categories are plain strings here).
        image: Image URL.
        rating: Customer rating, present on catalog products only.
    """

    id: int
    title: str | None = None
    price: float | None = None
    description: str | None = None
    category: str | None = None
    image: str | None = None
    rating: FakeStoreRating | None = None


class FakeStoreUserName(BaseModel):
    firstname: str
    lastname: str


class FakeStoreGeolocation(BaseModel):
    lat: str
    long: str


class FakeStoreAddress(BaseModel):
    city: str
    street: str
    number: int
    zipcode: str
    geolocation: FakeStoreGeolocation | None = None


class FakeStoreUser(BaseModel):
    """A registered user. Creation responses may only carry the id."""

    id: int
    email: str | None = None
    username: str | None = None
    password: str | None = None
    name: FakeStoreUserName | None = None
    address: FakeStoreAddress | None = None
    phone: str | None = None


class FakeStoreToken(BaseModel):
    """Token returned by the login endpoint."""

    token: str


class FakeStoreCartItem(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    product_id: int = Field(..., alias="productId")
    quantity: int


class FakeStoreCart(BaseModel):
    """A shopping cart.

    Attributes:
        id: Cart identifier.
        user_id: Owner of the cart.
        date: Cart date as sent by the service.
        products: Product lines in the cart.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: int
    user_id: int | None = Field(None, alias="userId")
    date: str | None = None
    products: list[FakeStoreCartItem] = Field(default_factory=list)


# Resource clients


def _product_fields(
    title: str | None,
    price: float | None,
    description: str | None,
    image: str | None,
    category: str | None,
) -> dict[str, Any]:
    fields = {
        "title": title,
        "price": price,
        "description": description,
        "image": image,
        "category": category,
    }
    return {key: value for key, value in fields.items() if value is not None}


class FakeStoreProductsClient(BaseClient):
    """Client for the product endpoints (/products).

    Example:
        with FakeStoreClient() as client:
            first = client.products.get_all(limit=1)[0]
            client.products.patch(first.id, price=99.9)
            electronics = client.products.in_category("electronics")
    """

    _BASE_PATH = "/products"

    def get_all(
        self,
        limit: int | None = None,
        sort: SortOrder | None = None,
    ) -> list[FakeStoreProduct]:
        """List products.

        Args:
            limit: Maximum number of products to return.
            sort: Order by id, "asc" or "desc".
        """
        data = self._get(self._BASE_PATH, params={"limit": limit, "sort": sort})
        return [FakeStoreProduct(**item) for item in data]

    def get(self, product_id: int) -> FakeStoreProduct | None:
        """Fetch one product.

        Returns:
            The product, or None when the id is unknown. The service
            answers an unknown id with 200 and an empty body.
        """
        data = self._get(self._path(product_id))
        if data is None:
            return None
        return FakeStoreProduct(**data)

    def create(
        self,
        title: str | None = None,
        price: float | None = None,
        description: str | None = None,
        image: str | None = None,
        category: str | None = None,
    ) -> FakeStoreProduct:
        """Create a product. Omitted fields are not sent."""
        data = self._post(
            self._BASE_PATH,
            json=_product_fields(title, price, description, image, category),
        )
        return FakeStoreProduct(**data)

    def update(
        self,
        product_id: int,
        title: str | None = None,
        price: float | None = None,
        description: str | None = None,
        image: str | None = None,
        category: str | None = None,
    ) -> FakeStoreProduct:
        """Replace a product with PUT."""
        data = self._put(
            self._path(product_id),
            json=_product_fields(title, price, description, image, category),
        )
        return FakeStoreProduct(**data)

    def patch(
        self,
        product_id: int,
        title: str | None = None,
        price: float | None = None,
        description: str | None = None,
        image: str | None = None,
        category: str | None = None,
    ) -> FakeStoreProduct:
        """Partially update a product with PATCH."""
        data = self._patch(
            self._path(product_id),
            json=_product_fields(title, price, description, image, category),
        )
        return FakeStoreProduct(**data)

    def delete(self, product_id: int) -> FakeStoreProduct | None:
        """Delete a product and return the deleted record, if echoed."""
        data = self._delete(self._path(product_id))
        if not data:
            return None
        return FakeStoreProduct(**data)

    def categories(self) -> list[str]:
        """List the category names."""
        return self._get(self._path("categories"))

    def in_category(self, category: str) -> list[FakeStoreProduct]:
        """List the products of one category."""
        data = self._get(self._path("category", category))
        return [FakeStoreProduct(**item) for item in data]


class FakeStoreUsersClient(BaseClient):
    """Client for the user endpoints (/users)."""

    _BASE_PATH = "/users"

    def get_all(self) -> list[FakeStoreUser]:
        """List the seeded users."""
        data = self._get(self._BASE_PATH)
        return [FakeStoreUser(**item) for item in data]

    def get(self, user_id: int) -> FakeStoreUser | None:
        """Fetch one user, or None when the service answers with an empty body."""
        data = self._get(self._path(user_id))
        if data is None:
            return None
        return FakeStoreUser(**data)

    def create(
        self,
        email: str,
        username: str,
        password: str,
        name: dict[str, str] | None = None,
        address: dict[str, Any] | None = None,
        phone: str | None = None,
    ) -> FakeStoreUser:
        """Register a user.

        Args:
            email: Contact email.
            username: Login name.
            password: Plain text password.
            name: ``{"firstname": ..., "lastname": ...}``.
            address: City, street, number, zipcode and geolocation.
            phone: Phone number.

        Returns:
            The created user; the service may only return its id.
        """
        request_data: dict[str, Any] = {
            "email": email,
            "username": username,
            "password": password,
        }
        if name is not None:
            request_data["name"] = name
        if address is not None:
            request_data["address"] = address
        if phone is not None:
            request_data["phone"] = phone

        data = self._post(self._BASE_PATH, json=request_data)
        return FakeStoreUser(**data)


class FakeStoreAuthClient(BaseClient):
    """Client for the login endpoint (/auth/login)."""

    _BASE_PATH = "/auth"

    def login(self, username: str, password: str) -> FakeStoreToken:
        """Log in with one of the service's seeded accounts.

        Raises:
            UnauthorizedError: If the credentials are rejected.
        """
        data = self._post(
            self._path("login"),
            json={"username": username, "password": password},
        )
        return FakeStoreToken(**data)


class FakeStoreCartsClient(BaseClient):
    """Client for the cart endpoints (/carts)."""

    _BASE_PATH = "/carts"

    def get_all(self) -> list[FakeStoreCart]:
        """List every cart."""
        data = self._get(self._BASE_PATH)
        return [FakeStoreCart(**item) for item in data]

    def get(self, cart_id: int) -> FakeStoreCart | None:
        """Fetch one cart, or None when the service answers with an empty body."""
        data = self._get(self._path(cart_id))
        if data is None:
            return None
        return FakeStoreCart(**data)

    def for_user(self, user_id: int) -> list[FakeStoreCart]:
        """List the carts of one user."""
        data = self._get(self._path("user", user_id))
        return [FakeStoreCart(**item) for item in data]

    def create(
        self,
        user_id: int,
        date: str,
        products: list[dict[str, int]],
    ) -> FakeStoreCart:
        """Create a cart.

        Args:
            user_id: Owner of the cart.
            date: Cart date, ``YYYY-MM-DD``.
            products: Lines as ``{"productId": ..., "quantity": ...}``.
        """
        request_data = {
            "userId": user_id,
            "date": date,
            "products": products,
        }
        data = self._post(self._BASE_PATH, json=request_data)
        return FakeStoreCart(**data)
