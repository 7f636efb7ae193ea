from dataclasses import dataclass
from typing import Any, Generic, Literal, TypeVar

import httpx

__all__ = ["ApiResponse", "ErrorResponse", "ErrorSource", "Feed", "SuccessResponse"]

T = TypeVar("T")

ErrorSource = Literal["api", "decoding"]


@dataclass(frozen=True)
class SuccessResponse(Generic[T]):
    response: T
    status: int
    original_response: httpx.Response
    type: Literal["success"] = "success"


@dataclass(frozen=True)
class ErrorResponse:
    errors: list[str]
    source: ErrorSource
    status: int
    original_response: httpx.Response
    type: Literal["error"] = "error"


ApiResponse = SuccessResponse[T] | ErrorResponse


@dataclass(frozen=True)
class Feed(Generic[T]):
    """A page of a paginated listing, with the total number of items available."""

    results: list[T]
    total: int

