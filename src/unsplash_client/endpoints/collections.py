from typing import TypedDict

from unsplash_client.client.handler import EndpointHandlers, create_request_handler
from unsplash_client.client.response import cast_response, handle_feed_response
from unsplash_client.endpoints.common import Orientation, PaginationArgs, path_segment
from unsplash_client.models.params import BaseRequestParams

__all__ = ["get_collection", "get_collection_photos", "list_collections"]

COLLECTIONS_PATH_PREFIX = "/collections"


class CollectionIdArgs(TypedDict):
    collection_id: str


class CollectionPhotosArgs(CollectionIdArgs, PaginationArgs, total=False):
    orientation: Orientation


def _list(args: PaginationArgs) -> BaseRequestParams:
    return BaseRequestParams(
        pathname=COLLECTIONS_PATH_PREFIX,
        query={"page": args.get("page"), "per_page": args.get("per_page")},
    )


def _get(args: CollectionIdArgs) -> BaseRequestParams:
    collection_id = path_segment(args["collection_id"])
    return BaseRequestParams(pathname=f"{COLLECTIONS_PATH_PREFIX}/{collection_id}")


def _get_photos(args: CollectionPhotosArgs) -> BaseRequestParams:
    return BaseRequestParams(
        pathname=f"{COLLECTIONS_PATH_PREFIX}/{path_segment(args['collection_id'])}/photos",
        query={
            "page": args.get("page"),
            "per_page": args.get("per_page"),
            "orientation": args.get("orientation"),
        },
    )


list_collections = EndpointHandlers(
    handle_request=create_request_handler(_list),
    handle_response=handle_feed_response,
)
get_collection = EndpointHandlers(
    handle_request=create_request_handler(_get),
    handle_response=cast_response,
)
get_collection_photos = EndpointHandlers(
    handle_request=create_request_handler(_get_photos),
    handle_response=handle_feed_response,
)
