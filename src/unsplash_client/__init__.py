"""Typed request-building helper for the Unsplash REST API."""

from loguru import logger

from unsplash_client.api import Api, create_api, create_sync_api
from unsplash_client.client import (
    EndpointHandlers,
    build_url,
    create_request_handler,
    init_make_request,
    init_make_sync_request,
)
from unsplash_client.exceptions import ConfigError, DecodingError, UnsplashError
from unsplash_client.models import (
    ApiResponse,
    ErrorResponse,
    Feed,
    FetchOptions,
    InitParams,
    SuccessResponse,
    UnsplashSettings,
)

__version__ = "0.1.0"

__all__ = [
    "Api",
    "ApiResponse",
    "ConfigError",
    "DecodingError",
    "EndpointHandlers",
    "ErrorResponse",
    "Feed",
    "FetchOptions",
    "InitParams",
    "SuccessResponse",
    "UnsplashError",
    "UnsplashSettings",
    "build_url",
    "create_api",
    "create_request_handler",
    "create_sync_api",
    "init_make_request",
    "init_make_sync_request",
]

# Silent until the application opts in via configure_logging
logger.disable("unsplash_client")
