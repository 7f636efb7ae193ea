import io

import httpx
import pytest
from loguru import logger

from unsplash_client.client.dispatcher import init_make_sync_request
from unsplash_client.endpoints import photos
from unsplash_client.logging import LOGGER_NAME, configure_logging


@pytest.fixture
def log_buffer():
    buf = io.StringIO()
    handler_id = configure_logging("DEBUG", sink=buf)
    yield buf
    logger.remove(handler_id)
    logger.disable(LOGGER_NAME)


def test_requests_are_logged_without_credentials(log_buffer, respx_mock):
    respx_mock.get("https://api.unsplash.com/photos/p1").mock(
        return_value=httpx.Response(200, json={"id": "p1"})
    )

    init_make_sync_request({"access_key": "secret-key"})(photos.get_photo)({"photo_id": "p1"})

    output = log_buffer.getvalue()
    assert "GET https://api.unsplash.com/photos/p1" in output
    assert "-> 200" in output
    assert "secret-key" not in output


def test_error_responses_are_logged_as_warnings(log_buffer, respx_mock):
    respx_mock.get("https://api.unsplash.com/photos/missing").mock(
        return_value=httpx.Response(404, json={"errors": ["Couldn't find Photo"]})
    )

    init_make_sync_request({"access_key": "k"})(photos.get_photo)({"photo_id": "missing"})

    output = log_buffer.getvalue()
    assert "WARNING" in output
    assert "Couldn't find Photo" in output
