"""Ready-made clients exposing every endpoint, grouped by resource."""

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

import httpx

from unsplash_client.client.dispatcher import init_make_request, init_make_sync_request
from unsplash_client.client.handler import EndpointHandlers
from unsplash_client.endpoints import collections, photos, search, users
from unsplash_client.models.config import InitParams

__all__ = [
    "Api",
    "CollectionsApi",
    "PhotosApi",
    "SearchApi",
    "UsersApi",
    "create_api",
    "create_sync_api",
]

CallT = TypeVar("CallT")


@dataclass(frozen=True)
class PhotosApi(Generic[CallT]):
    list: CallT
    get: CallT
    get_stats: CallT
    get_random: CallT
    track_download: CallT


@dataclass(frozen=True)
class SearchApi(Generic[CallT]):
    get_photos: CallT
    get_users: CallT
    get_collections: CallT


@dataclass(frozen=True)
class UsersApi(Generic[CallT]):
    get: CallT
    get_photos: CallT


@dataclass(frozen=True)
class CollectionsApi(Generic[CallT]):
    list: CallT
    get: CallT
    get_photos: CallT


@dataclass(frozen=True)
class Api(Generic[CallT]):
    photos: PhotosApi[CallT]
    search: SearchApi[CallT]
    users: UsersApi[CallT]
    collections: CollectionsApi[CallT]


def _bind(make_request: Callable[[EndpointHandlers[Any]], CallT]) -> Api[CallT]:
    return Api(
        photos=PhotosApi(
            list=make_request(photos.list_photos),
            get=make_request(photos.get_photo),
            get_stats=make_request(photos.get_photo_stats),
            get_random=make_request(photos.get_random_photo),
            track_download=make_request(photos.track_download),
        ),
        search=SearchApi(
            get_photos=make_request(search.search_photos),
            get_users=make_request(search.search_users),
            get_collections=make_request(search.search_collections),
        ),
        users=UsersApi(
            get=make_request(users.get_user),
            get_photos=make_request(users.get_user_photos),
        ),
        collections=CollectionsApi(
            list=make_request(collections.list_collections),
            get=make_request(collections.get_collection),
            get_photos=make_request(collections.get_collection_photos),
        ),
    )


def _init_params(
    init_params: InitParams | Mapping[str, Any] | None, kwargs: dict[str, Any]
) -> InitParams | Mapping[str, Any]:
    if init_params is None:
        return kwargs
    if kwargs:
        raise TypeError("Pass either `init_params` or keyword options, not both")
    return init_params


def create_api(
    init_params: InitParams | Mapping[str, Any] | None = None,
    *,
    client: httpx.AsyncClient | None = None,
    **kwargs: Any,
) -> Api[Any]:
    """
    Create an async Unsplash API client.

    Args:
        init_params: Client configuration. Keyword options such as
            ``access_key="..."`` may be given instead.
        client: Optional AsyncClient shared by all calls.

    Raises:
        ConfigError: If the configuration is invalid.
    """
    return _bind(init_make_request(_init_params(init_params, kwargs), client=client))


def create_sync_api(
    init_params: InitParams | Mapping[str, Any] | None = None,
    *,
    client: httpx.Client | None = None,
    **kwargs: Any,
) -> Api[Any]:
    """Blocking counterpart of :func:`create_api`."""
    return _bind(init_make_sync_request(_init_params(init_params, kwargs), client=client))
