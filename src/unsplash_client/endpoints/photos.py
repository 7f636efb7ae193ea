from collections.abc import Sequence
from typing import TypedDict

import httpx

from unsplash_client.client.handler import EndpointHandlers, create_request_handler
from unsplash_client.client.response import cast_response, handle_feed_response
from unsplash_client.endpoints.common import (
    ContentFilter,
    OrderedPaginationArgs,
    Orientation,
    join_ids,
    path_segment,
)
from unsplash_client.models.params import BaseRequestParams

__all__ = [
    "get_photo",
    "get_photo_stats",
    "get_random_photo",
    "list_photos",
    "track_download",
]

PHOTOS_PATH_PREFIX = "/photos"


class PhotoIdArgs(TypedDict):
    photo_id: str


class RandomPhotoArgs(TypedDict, total=False):
    collection_ids: Sequence[str]
    topic_ids: Sequence[str]
    featured: bool
    username: str
    query: str
    orientation: Orientation
    content_filter: ContentFilter
    count: int


class TrackDownloadArgs(TypedDict):
    download_location: str


def _list(args: OrderedPaginationArgs) -> BaseRequestParams:
    return BaseRequestParams(
        pathname=PHOTOS_PATH_PREFIX,
        query={
            "page": args.get("page"),
            "per_page": args.get("per_page"),
            "order_by": args.get("order_by"),
        },
    )


def _get(args: PhotoIdArgs) -> BaseRequestParams:
    photo_id = path_segment(args["photo_id"])
    return BaseRequestParams(pathname=f"{PHOTOS_PATH_PREFIX}/{photo_id}")


def _get_stats(args: PhotoIdArgs) -> BaseRequestParams:
    photo_id = path_segment(args["photo_id"])
    return BaseRequestParams(pathname=f"{PHOTOS_PATH_PREFIX}/{photo_id}/statistics")


def _get_random(args: RandomPhotoArgs) -> BaseRequestParams:
    return BaseRequestParams(
        pathname=f"{PHOTOS_PATH_PREFIX}/random",
        query={
            "collections": join_ids(args.get("collection_ids")),
            "topics": join_ids(args.get("topic_ids")),
            "featured": args.get("featured"),
            "username": args.get("username"),
            "query": args.get("query"),
            "orientation": args.get("orientation"),
            "content_filter": args.get("content_filter"),
            "count": args.get("count"),
        },
        # the random photo must not be served from an intermediate cache
        headers={"cache-control": "no-cache"},
    )


def _track_download(args: TrackDownloadArgs) -> BaseRequestParams:
    """Ping the ``download_location`` URL that comes with every photo payload."""
    location = httpx.URL(args["download_location"])
    if not location.path.strip("/"):
        raise ValueError(f"Could not parse pathname from url: {args['download_location']}")
    return BaseRequestParams(pathname=location.path, query=dict(location.params.items()))


list_photos = EndpointHandlers(
    handle_request=create_request_handler(_list),
    handle_response=handle_feed_response,
)
get_photo = EndpointHandlers(
    handle_request=create_request_handler(_get),
    handle_response=cast_response,
)
get_photo_stats = EndpointHandlers(
    handle_request=create_request_handler(_get_stats),
    handle_response=cast_response,
)
get_random_photo = EndpointHandlers(
    handle_request=create_request_handler(_get_random),
    handle_response=cast_response,
)
track_download = EndpointHandlers(
    handle_request=create_request_handler(_track_download),
    handle_response=cast_response,
)
