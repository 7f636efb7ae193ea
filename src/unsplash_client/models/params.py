"""Request descriptors exchanged between endpoints, the merger and the dispatcher."""

from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from unsplash_client.constants import DEFAULT_METHOD

__all__ = [
    "GENERIC_FETCH_FIELDS",
    "BaseRequestParams",
    "CompleteRequestParams",
    "FetchDefaults",
    "FetchOptions",
    "Query",
    "QueryValue",
    "set_fields",
]

QueryValue = str | int | float | bool | None
Query = Mapping[str, QueryValue]

# Options forwarded to httpx untouched, layered client-wide first then per call
GENERIC_FETCH_FIELDS: tuple[str, ...] = ("cookies", "timeout", "follow_redirects", "extensions")


class FetchDefaults(BaseModel):
    """Transport options shared by client-wide defaults and per-call overrides."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    headers: dict[str, str] = Field(default_factory=dict)
    cookies: dict[str, str] | None = None
    timeout: float | None = None
    follow_redirects: bool | None = None
    extensions: dict[str, Any] | None = None


class FetchOptions(FetchDefaults):
    """Per-call overrides. Everything is overridable except the method."""

    body: bytes | str | None = None


class BaseRequestParams(BaseModel):
    """The params an endpoint generates from its arguments."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    pathname: str
    query: dict[str, QueryValue] = Field(default_factory=dict)
    method: str = DEFAULT_METHOD
    headers: dict[str, str] = Field(default_factory=dict)


class CompleteRequestParams(BaseRequestParams, FetchOptions):
    """Endpoint params with the per-call overrides applied."""


def set_fields(model: BaseModel, names: Iterable[str]) -> dict[str, Any]:
    """Return the named fields that were explicitly given when `model` was built."""
    return {name: getattr(model, name) for name in names if name in model.model_fields_set}
