from collections.abc import Iterable
from typing import Literal, TypedDict
from urllib.parse import quote

__all__ = [
    "ContentFilter",
    "OrderedPaginationArgs",
    "Orientation",
    "PaginationArgs",
    "join_ids",
    "path_segment",
]

Orientation = Literal["landscape", "portrait", "squarish"]
ContentFilter = Literal["low", "high"]


class PaginationArgs(TypedDict, total=False):
    page: int
    per_page: int


class OrderedPaginationArgs(PaginationArgs, total=False):
    order_by: str


def join_ids(ids: Iterable[str] | None) -> str | None:
    """Format a list of ids the way the API expects them in a query string."""
    if ids is None:
        return None
    return ",".join(ids)


def path_segment(value: str) -> str:
    """
    Percent-encode a caller-supplied id so it stays a single path segment.

    ``/``, ``?`` and ``#`` are escaped, and a bare ``.`` or ``..`` is encoded
    so that URL normalisation cannot turn it into a different endpoint.
    """
    segment = quote(value, safe="")
    if segment in (".", ".."):
        return segment.replace(".", "%2E")
    return segment
