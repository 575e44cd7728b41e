"""Fixtures for the suites that talk to the real store APIs.

Clients are module-scoped: every step of a suite shares one connection
pool and the suite's fixed timeout.
"""

import pytest
from faker import Faker

from storeclient import FakeStoreClient, PlatziClient, load_settings


@pytest.fixture(scope="module")
def live_settings():
    return load_settings()


@pytest.fixture(scope="module")
def platzi(live_settings):
    """PlatziClient for the configured Platzi URL (10 s timeout by default)."""
    with PlatziClient(settings=live_settings) as client:
        yield client


@pytest.fixture(scope="module")
def fakestore(live_settings):
    """FakeStoreClient for the configured FakeStore URL (90 s timeout by default)."""
    with FakeStoreClient(settings=live_settings) as client:
        yield client


@pytest.fixture(scope="module")
def live_faker() -> Faker:
    """Unseeded Faker, so emails and names differ between runs."""
    return Faker()
