from typing import TypedDict

from unsplash_client.client.handler import EndpointHandlers, create_request_handler
from unsplash_client.client.response import cast_response, handle_feed_response
from unsplash_client.endpoints.common import Orientation, path_segment
from unsplash_client.models.params import BaseRequestParams

__all__ = ["get_user", "get_user_photos"]


class UsernameArgs(TypedDict):
    username: str


class UserPhotosArgs(UsernameArgs, total=False):
    page: int
    per_page: int
    order_by: str
    stats: bool
    orientation: Orientation


def _get(args: UsernameArgs) -> BaseRequestParams:
    return BaseRequestParams(pathname=f"/users/{path_segment(args['username'])}")


def _get_photos(args: UserPhotosArgs) -> BaseRequestParams:
    return BaseRequestParams(
        pathname=f"/users/{path_segment(args['username'])}/photos",
        query={
            "page": args.get("page"),
            "per_page": args.get("per_page"),
            "order_by": args.get("order_by"),
            "stats": args.get("stats"),
            "orientation": args.get("orientation"),
        },
    )


get_user = EndpointHandlers(
    handle_request=create_request_handler(_get),
    handle_response=cast_response,
)
get_user_photos = EndpointHandlers(
    handle_request=create_request_handler(_get_photos),
    handle_response=handle_feed_response,
)
