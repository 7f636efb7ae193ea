from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from unsplash_client.client.response import HandleResponse
from unsplash_client.client.url import compact_defined
from unsplash_client.models.params import (
    BaseRequestParams,
    CompleteRequestParams,
    FetchOptions,
    set_fields,
)

__all__ = ["EndpointHandlers", "HandleRequest", "create_request_handler", "merge_headers"]

ArgsT = TypeVar("ArgsT")
ResponseT = TypeVar("ResponseT")

HandleRequest = Callable[..., CompleteRequestParams]

# Headers are merged key by key and query can only come from the endpoint
_OVERRIDE_FIELDS = tuple(name for name in FetchOptions.model_fields if name != "headers")


def merge_headers(base: Mapping[str, str], overrides: Mapping[str, str]) -> dict[str, str]:
    """Layer `overrides` on `base`, replacing header names case-insensitively."""
    replaced = {name.lower() for name in overrides}
    merged = {name: value for name, value in base.items() if name.lower() not in replaced}
    merged.update(overrides)
    return merged


def _coerce_overrides(overrides: FetchOptions | Mapping[str, Any] | None) -> FetchOptions:
    if overrides is None:
        return FetchOptions()
    if isinstance(overrides, FetchOptions):
        return overrides
    return FetchOptions.model_validate(dict(overrides))


def create_request_handler(
    fn: Callable[[ArgsT], BaseRequestParams],
) -> HandleRequest:
    """
    Wrap an endpoint function so that its params can be combined with per-call overrides.

    The returned handler takes the endpoint arguments and, optionally, a
    FetchOptions (or a mapping of its fields). Overrides replace the endpoint's
    value for every field they set, except headers, which are merged key by
    key (names compared case-insensitively) with the override winning.
    """

    def handle_request(
        args: ArgsT, overrides: FetchOptions | Mapping[str, Any] | None = None
    ) -> CompleteRequestParams:
        base = fn(args)
        extra = _coerce_overrides(overrides)

        return CompleteRequestParams(
            pathname=base.pathname,
            method=base.method,
            **set_fields(extra, _OVERRIDE_FIELDS),
            query=compact_defined(base.query),
            headers=merge_headers(base.headers, extra.headers),
        )

    return handle_request


@dataclass(frozen=True)
class EndpointHandlers(Generic[ResponseT]):
    """The request/response capability pair that describes one API operation."""

    handle_request: HandleRequest
    handle_response: HandleResponse[ResponseT]
