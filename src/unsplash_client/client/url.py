from collections.abc import Callable, Mapping
from typing import TypeVar

import httpx

from unsplash_client.models.params import Query, QueryValue

__all__ = ["append_pathname", "build_url", "compact_defined"]

V = TypeVar("V")


def compact_defined(mapping: Mapping[str, V | None]) -> dict[str, V]:
    """Drop every entry whose value is None."""
    return {key: value for key, value in mapping.items() if value is not None}


def append_pathname(url: str, pathname: str) -> str:
    """Append `pathname` to the path of `url` with exactly one slash between them."""
    parsed = httpx.URL(url)
    suffix = pathname.strip("/")
    if not suffix:
        return str(parsed)
    prefix = parsed.path.rstrip("/")
    return str(parsed.copy_with(path=f"{prefix}/{suffix}"))


def add_query(url: str, query: Mapping[str, QueryValue]) -> str:
    """Merge `query` into the query string of `url`, keeping existing parameters."""
    params = compact_defined(query)
    if not params:
        return url
    return str(httpx.URL(url).copy_merge_params(params))


def build_url(pathname: str, query: Query) -> Callable[[str], str]:
    """
    Prepare a URL for an endpoint, to be applied to the API base URL.

    Args:
        pathname: Path of the endpoint, relative to the base URL path.
        query: Query parameters. Entries set to None are left out.

    Returns:
        A function mapping a base URL to the absolute endpoint URL.
    """

    def apply(base_url: str) -> str:
        return add_query(append_pathname(base_url, pathname), query)

    return apply
