"""Send the requests described by endpoint handlers, one HTTP call per invocation."""

from collections.abc import AsyncIterator, Awaitable, Callable, Iterator, Mapping
from contextlib import asynccontextmanager, contextmanager
from typing import Any, TypeVar

import httpx
from loguru import logger

from unsplash_client.client.handler import EndpointHandlers
from unsplash_client.client.response import handle_fetch_response
from unsplash_client.client.url import build_url
from unsplash_client.constants import ACCEPT_VERSION_HEADER, AUTHORIZATION_HEADER
from unsplash_client.models.config import InitParams
from unsplash_client.models.params import (
    GENERIC_FETCH_FIELDS,
    CompleteRequestParams,
    FetchOptions,
    set_fields,
)
from unsplash_client.models.response import ApiResponse

__all__ = [
    "AsyncCall",
    "SyncCall",
    "build_headers",
    "init_make_request",
    "init_make_sync_request",
]

ResponseT = TypeVar("ResponseT")

Overrides = FetchOptions | Mapping[str, Any] | None
AsyncCall = Callable[..., Awaitable[ApiResponse[ResponseT]]]
SyncCall = Callable[..., ApiResponse[ResponseT]]


def build_headers(init: InitParams, params: CompleteRequestParams) -> httpx.Headers:
    """
    Layer the request headers.

    Client-wide headers come first, then the endpoint and per-call headers.
    ``Accept-Version`` and, when an access key is set, ``Authorization`` are
    written last and replace any header of the same name.
    """
    headers = httpx.Headers(init.headers)
    headers.update(params.headers)
    headers[ACCEPT_VERSION_HEADER] = init.api_version
    if init.access_key is not None:
        headers[AUTHORIZATION_HEADER] = f"Client-ID {init.access_key.get_secret_value()}"
    return headers


def _build_request(
    client: httpx.Client | httpx.AsyncClient,
    init: InitParams,
    params: CompleteRequestParams,
) -> tuple[httpx.Request, dict[str, Any]]:
    url = build_url(params.pathname, params.query)(init.effective_api_url)
    options = {
        **set_fields(init, GENERIC_FETCH_FIELDS),
        **set_fields(params, GENERIC_FETCH_FIELDS),
    }

    send_options: dict[str, Any] = {}
    if "follow_redirects" in options:
        send_options["follow_redirects"] = options.pop("follow_redirects")

    request = client.build_request(
        params.method,
        url,
        headers=build_headers(init, params),
        content=params.body,
        **options,
    )
    logger.debug(f"{request.method} {request.url}")
    return request, send_options


@asynccontextmanager
async def _async_client_scope(client: httpx.AsyncClient | None) -> AsyncIterator[httpx.AsyncClient]:
    if client is not None:
        yield client
        return
    async with httpx.AsyncClient() as owned:
        yield owned


@contextmanager
def _sync_client_scope(client: httpx.Client | None) -> Iterator[httpx.Client]:
    if client is not None:
        yield client
        return
    with httpx.Client() as owned:
        yield owned


def init_make_request(
    init_params: InitParams | Mapping[str, Any],
    *,
    client: httpx.AsyncClient | None = None,
) -> Callable[[EndpointHandlers[ResponseT]], AsyncCall[ResponseT]]:
    """
    Bind the client-wide configuration and return an endpoint binder.

    Args:
        init_params: InitParams or a mapping of its fields.
        client: Optional AsyncClient to send through. It is never closed here.
            Without one, a client is opened and closed around each call.

    Raises:
        ConfigError: If the configuration is invalid.
    """
    init = InitParams.coerce(init_params)

    def make_request(handlers: EndpointHandlers[ResponseT]) -> AsyncCall[ResponseT]:
        handle_response = handle_fetch_response(handlers.handle_response)

        async def call(args: Any, overrides: Overrides = None) -> ApiResponse[ResponseT]:
            params = handlers.handle_request(args, overrides)
            async with _async_client_scope(client) as http:
                request, send_options = _build_request(http, init, params)
                response = await http.send(request, **send_options)
            logger.debug(f"{request.method} {request.url} -> {response.status_code}")
            return handle_response(response)

        return call

    return make_request


def init_make_sync_request(
    init_params: InitParams | Mapping[str, Any],
    *,
    client: httpx.Client | None = None,
) -> Callable[[EndpointHandlers[ResponseT]], SyncCall[ResponseT]]:
    """Blocking counterpart of :func:`init_make_request`."""
    init = InitParams.coerce(init_params)

    def make_request(handlers: EndpointHandlers[ResponseT]) -> SyncCall[ResponseT]:
        handle_response = handle_fetch_response(handlers.handle_response)

        def call(args: Any, overrides: Overrides = None) -> ApiResponse[ResponseT]:
            params = handlers.handle_request(args, overrides)
            with _sync_client_scope(client) as http:
                request, send_options = _build_request(http, init, params)
                response = http.send(request, **send_options)
            logger.debug(f"{request.method} {request.url} -> {response.status_code}")
            return handle_response(response)

        return call

    return make_request
