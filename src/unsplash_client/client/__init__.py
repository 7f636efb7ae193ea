from .dispatcher import build_headers, init_make_request, init_make_sync_request
from .handler import EndpointHandlers, create_request_handler
from .response import cast_response, handle_feed_response, handle_fetch_response
from .url import build_url, compact_defined

__all__ = [
    "EndpointHandlers",
    "build_headers",
    "build_url",
    "cast_response",
    "compact_defined",
    "create_request_handler",
    "handle_feed_response",
    "handle_fetch_response",
    "init_make_request",
    "init_make_sync_request",
]
