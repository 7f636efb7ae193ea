import pytest

from unsplash_client.models.config import InitParams

API_URL = "https://example.test"
ACCESS_KEY = "abc"


@pytest.fixture
def access_key_params() -> InitParams:
    """Client configuration talking to the public API with an access key."""
    return InitParams(access_key=ACCESS_KEY)


@pytest.fixture
def api_url_params() -> InitParams:
    """Client configuration pointing at a custom API URL (e.g. a proxy)."""
    return InitParams(api_url=API_URL)
