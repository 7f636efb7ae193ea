from collections.abc import Sequence
from typing import Literal, NotRequired, TypedDict

from unsplash_client.client.handler import EndpointHandlers, create_request_handler
from unsplash_client.client.response import cast_response
from unsplash_client.endpoints.common import ContentFilter, Orientation, join_ids
from unsplash_client.models.params import BaseRequestParams

__all__ = ["search_collections", "search_photos", "search_users"]

SEARCH_PATH_PREFIX = "/search"

ColorId = Literal[
    "white",
    "black",
    "yellow",
    "orange",
    "red",
    "purple",
    "magenta",
    "green",
    "teal",
    "blue",
    "black_and_white",
]


class SearchArgs(TypedDict):
    query: str
    page: NotRequired[int]
    per_page: NotRequired[int]


class SearchPhotosArgs(SearchArgs, total=False):
    order_by: Literal["relevant", "latest"]
    color: ColorId
    orientation: Orientation
    content_filter: ContentFilter
    collection_ids: Sequence[str]
    lang: str


def _search_query(args: SearchArgs) -> dict[str, str | int | None]:
    return {
        "query": args["query"],
        "page": args.get("page"),
        "per_page": args.get("per_page"),
    }


def _photos(args: SearchPhotosArgs) -> BaseRequestParams:
    return BaseRequestParams(
        pathname=f"{SEARCH_PATH_PREFIX}/photos",
        query={
            **_search_query(args),
            "order_by": args.get("order_by"),
            "color": args.get("color"),
            "orientation": args.get("orientation"),
            "content_filter": args.get("content_filter"),
            "collections": join_ids(args.get("collection_ids")),
            "lang": args.get("lang"),
        },
    )


def _users(args: SearchArgs) -> BaseRequestParams:
    return BaseRequestParams(pathname=f"{SEARCH_PATH_PREFIX}/users", query=_search_query(args))


def _collections(args: SearchArgs) -> BaseRequestParams:
    return BaseRequestParams(
        pathname=f"{SEARCH_PATH_PREFIX}/collections",
        query=_search_query(args),
    )


# Search results carry their own totals in the body, so no feed handling here
search_photos = EndpointHandlers(
    handle_request=create_request_handler(_photos),
    handle_response=cast_response,
)
search_users = EndpointHandlers(
    handle_request=create_request_handler(_users),
    handle_response=cast_response,
)
search_collections = EndpointHandlers(
    handle_request=create_request_handler(_collections),
    handle_response=cast_response,
)
