from .config import InitParams, UnsplashSettings
from .params import BaseRequestParams, CompleteRequestParams, FetchDefaults, FetchOptions, Query
from .response import ApiResponse, ErrorResponse, ErrorSource, Feed, SuccessResponse

__all__ = [
    "ApiResponse",
    "BaseRequestParams",
    "CompleteRequestParams",
    "ErrorResponse",
    "ErrorSource",
    "Feed",
    "FetchDefaults",
    "FetchOptions",
    "InitParams",
    "Query",
    "SuccessResponse",
    "UnsplashSettings",
]
