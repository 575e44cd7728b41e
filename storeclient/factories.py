"""Fake request data for the store APIs.

Each builder returns the keyword arguments of the matching sub-client
call, so a fixture can be used as ``client.users.create(**fields)``.
Builders take the ``Faker`` instance to draw from; pass a seeded one for
reproducible data.
"""

from typing import Any

from faker import Faker

DEFAULT_PASSWORD = "123456"


def product_title(faker: Faker) -> str:
    """A short product-like title such as "Modern Steel Lamp"."""
    return " ".join(faker.words(nb=3)).title()


def product_price(faker: Faker) -> float:
    return round(faker.pyfloat(min_value=1, max_value=1000, right_digits=2), 2)


def platzi_product_fields(faker: Faker, category_id: int = 1) -> dict[str, Any]:
    """Arguments for ``PlatziProductsClient.create``."""
    return {
        "title": product_title(faker),
        "price": product_price(faker),
        "description": faker.paragraph(nb_sentences=2),
        "category_id": category_id,
        "images": [faker.image_url()],
    }


def platzi_user_fields(faker: Faker, password: str = DEFAULT_PASSWORD) -> dict[str, Any]:
    """Arguments for ``PlatziUsersClient.create``."""
    return {
        "name": faker.name(),
        "email": faker.email(),
        "password": password,
        "avatar": faker.image_url(),
    }


def fakestore_product_fields(faker: Faker, category: str = "electronics") -> dict[str, Any]:
    """Arguments for ``FakeStoreProductsClient.create``."""
    return {
        "title": product_title(faker),
        "price": 49.9,
        "description": faker.sentence(),
        "image": "https://i.pravatar.cc",
        "category": category,
    }


def fakestore_user_fields(faker: Faker, password: str = DEFAULT_PASSWORD) -> dict[str, Any]:
    """Arguments for ``FakeStoreUsersClient.create``.

    The address uses fixed number, zipcode and geolocation values; only the
    names, city and street vary.
    """
    return {
        "email": faker.email(),
        "username": faker.user_name(),
        "password": password,
        "name": {
            "firstname": faker.first_name(),
            "lastname": faker.last_name(),
        },
        "address": {
            "city": faker.city(),
            "street": faker.street_name(),
            "number": 3,
            "zipcode": "12345-678",
            "geolocation": {"lat": "40.7128", "long": "74.0060"},
        },
        "phone": "123-456-7890",
    }


def fakestore_cart_fields(
    user_id: int = 1,
    date: str = "2020-02-03",
    products: list[dict[str, int]] | None = None,
) -> dict[str, Any]:
    """Arguments for ``FakeStoreCartsClient.create``."""
    if products is None:
        products = [
            {"productId": 1, "quantity": 2},
            {"productId": 2, "quantity": 1},
        ]
    return {"user_id": user_id, "date": date, "products": products}
