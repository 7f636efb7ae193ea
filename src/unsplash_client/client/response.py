"""Turn raw httpx responses into tagged ``ApiResponse`` values."""

import re
from collections.abc import Callable
from typing import Any, TypeVar

import httpx
from loguru import logger

from unsplash_client.constants import TOTAL_RESPONSE_HEADER
from unsplash_client.exceptions import DecodingError
from unsplash_client.models.response import (
    ApiResponse,
    ErrorResponse,
    ErrorSource,
    Feed,
    SuccessResponse,
)

__all__ = [
    "HandleResponse",
    "cast_response",
    "get_errors_for_bad_status",
    "handle_feed_response",
    "handle_fetch_response",
    "is_json_response",
]

T = TypeVar("T")

HandleResponse = Callable[[httpx.Response], T]

UNRECOGNISED_BODY_ERROR = (
    "Responded with a status code outside the 2xx range, "
    "and the response body is not recognisable."
)

_JSON_CONTENT_TYPE = re.compile(r"^application/(?:[\w.+-]+\+)?json\b", re.IGNORECASE)


def is_json_response(response: httpx.Response) -> bool:
    return bool(_JSON_CONTENT_TYPE.match(response.headers.get("content-type", "")))


def _json_body(response: httpx.Response) -> Any:
    if not is_json_response(response):
        raise DecodingError("expected JSON response from server.")
    try:
        return response.json()
    except ValueError as e:
        raise DecodingError("unable to parse JSON response.") from e


def cast_response(response: httpx.Response) -> Any:
    """Default response handler: the decoded JSON body."""
    return _json_body(response)


def _total_from_feed(response: httpx.Response) -> int:
    raw = response.headers.get(TOTAL_RESPONSE_HEADER)
    if raw is None:
        raise DecodingError(f"expected {TOTAL_RESPONSE_HEADER} header to exist.")
    try:
        return int(raw)
    except ValueError as e:
        raise DecodingError(f"expected {TOTAL_RESPONSE_HEADER} header to be valid integer.") from e


def handle_feed_response(response: httpx.Response) -> Feed[Any]:
    """Response handler for paginated listings returned as a bare JSON array."""
    results = _json_body(response)
    if not isinstance(results, list):
        raise DecodingError("expected feed response to be a JSON array.")
    return Feed(results=results, total=_total_from_feed(response))


def _is_errors(value: Any) -> bool:
    return isinstance(value, list) and all(isinstance(item, str) for item in value)


def get_errors_for_bad_status(response: httpx.Response) -> tuple[list[str], ErrorSource]:
    """
    Extract error messages from a non-2xx response.

    Returns:
        The error messages and where they came from: ``"api"`` when the server
        described the failure, ``"decoding"`` when the body was unusable.
    """
    if not is_json_response(response):
        return [response.text], "api"

    body = _json_body(response)
    if isinstance(body, dict) and _is_errors(body.get("errors")):
        return list(body["errors"]), "api"
    return [UNRECOGNISED_BODY_ERROR], "decoding"


def handle_fetch_response(
    handle_response: HandleResponse[T],
) -> Callable[[httpx.Response], ApiResponse[T]]:
    """
    Wrap an endpoint response handler so that it always yields an ApiResponse.

    Successful responses go through `handle_response`. Others are reported as
    an ErrorResponse. A DecodingError from either path becomes an ErrorResponse
    with source ``"decoding"``; any other exception propagates.
    """

    def handle(response: httpx.Response) -> ApiResponse[T]:
        try:
            if response.is_success:
                return SuccessResponse(
                    response=handle_response(response),
                    status=response.status_code,
                    original_response=response,
                )
            errors, source = get_errors_for_bad_status(response)
        except DecodingError as e:
            errors, source = [e.message], "decoding"

        logger.warning(f"API responded with {response.status_code} ({source}): {errors}")
        return ErrorResponse(
            errors=errors,
            source=source,
            status=response.status_code,
            original_response=response,
        )

    return handle
