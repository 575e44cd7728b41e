"""Settings for the store clients and the live suites.

Values come from environment variables, after a ``.env`` file in the
working directory (if any) has been loaded with python-dotenv:

    PLATZI_BASE_URL     Platzi Fake Store API root
    PLATZI_TIMEOUT      per-request timeout in seconds (default 10)
    FAKESTORE_BASE_URL  FakeStoreAPI root
    FAKESTORE_TIMEOUT   per-request timeout in seconds (default 90)
    STORE_LIVE_TESTS    "1"/"true"/"yes" to run the live suites
"""

import os

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, Field

PLATZI_BASE_URL = "https://api.escuelajs.co/api/v1"
FAKESTORE_BASE_URL = "https://fakestoreapi.com"


class StoreSettings(BaseModel):
    """Resolved configuration.

    Attributes:
        platzi_base_url: Root URL of the Platzi Fake Store API.
        platzi_timeout: Request timeout for Platzi calls, in seconds.
        fakestore_base_url: Root URL of FakeStoreAPI.
        fakestore_timeout: Request timeout for FakeStore calls, in seconds.
        run_live: Whether suites that hit the real services should run.
    """

    platzi_base_url: str = PLATZI_BASE_URL
    platzi_timeout: float = Field(10.0, gt=0)
    fakestore_base_url: str = FAKESTORE_BASE_URL
    fakestore_timeout: float = Field(90.0, gt=0)
    run_live: bool = False


# Environment variable -> settings field
_ENV_FIELDS = {
    "PLATZI_BASE_URL": "platzi_base_url",
    "PLATZI_TIMEOUT": "platzi_timeout",
    "FAKESTORE_BASE_URL": "fakestore_base_url",
    "FAKESTORE_TIMEOUT": "fakestore_timeout",
    "STORE_LIVE_TESTS": "run_live",
}


def load_settings(dotenv: bool = True) -> StoreSettings:
    """Build settings from the environment.

    Args:
        dotenv: Load ``.env`` before reading the environment. Variables
            already set in the environment win over the file.

    Returns:
        The resolved settings.

    Raises:
        pydantic.ValidationError: If a variable holds an invalid value.
    """
    if dotenv:
        load_dotenv(find_dotenv(usecwd=True))

    values = {
        field: os.environ[name]
        for name, field in _ENV_FIELDS.items()
        if os.environ.get(name)
    }
    return StoreSettings(**values)
