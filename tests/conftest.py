"""Pytest configuration and shared fixtures."""

import pytest

# Load environment variables from .env file at test startup
# This makes base URLs, timeouts and STORE_LIVE_TESTS available before collection
from dotenv import load_dotenv
load_dotenv()

from storeclient.config import load_settings

pytest_plugins = [
    "tests.fixtures.stores",
    "tests.fixtures.suite",
]


def pytest_collection_modifyitems(config, items):
    """Skip the live suites unless STORE_LIVE_TESTS is set."""
    if load_settings(dotenv=False).run_live:
        return
    skip_live = pytest.mark.skip(reason="set STORE_LIVE_TESTS=1 to run against the real store APIs")
    for item in items:
        if "live" in item.keywords:
            item.add_marker(skip_live)
