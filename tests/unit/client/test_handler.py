import pytest
from pydantic import ValidationError

from unsplash_client.client.handler import create_request_handler, merge_headers
from unsplash_client.models.params import BaseRequestParams, FetchOptions


def _endpoint(args: dict) -> BaseRequestParams:
    return BaseRequestParams(
        pathname=f"/photos/{args['photo_id']}",
        query={"w": args.get("w"), "lang": "en"},
        headers={"X-Base": "base", "X-Shared": "base"},
    )


@pytest.fixture
def handle_request():
    return create_request_handler(_endpoint)


def test_query_is_compacted(handle_request):
    params = handle_request({"photo_id": "abc"})
    assert params.query == {"lang": "en"}


def test_override_wins_on_shared_header(handle_request):
    params = handle_request({"photo_id": "abc"}, FetchOptions(headers={"X-Shared": "call"}))
    assert params.headers == {"X-Base": "base", "X-Shared": "call"}


def test_headers_unchanged_without_override_headers(handle_request):
    params = handle_request({"photo_id": "abc"}, {"timeout": 3.0})
    assert params.headers == {"X-Base": "base", "X-Shared": "base"}


def test_omitted_overrides_only_compacts(handle_request):
    params = handle_request({"photo_id": "abc", "w": 400})
    assert params.pathname == "/photos/abc"
    assert params.method == "GET"
    assert params.query == {"w": 400, "lang": "en"}
    assert params.body is None
    assert params.model_fields_set == {"pathname", "method", "query", "headers"}


def test_override_fields_replace_base(handle_request):
    params = handle_request({"photo_id": "abc"}, {"body": b"payload", "timeout": None})
    assert params.body == b"payload"
    assert params.timeout is None
    # explicitly given, even as None, so the dispatcher forwards it
    assert "timeout" in params.model_fields_set


def test_overrides_cannot_set_method(handle_request):
    with pytest.raises(ValidationError):
        handle_request({"photo_id": "abc"}, {"method": "DELETE"})


def test_overrides_cannot_replace_query(handle_request):
    with pytest.raises(ValidationError):
        handle_request({"photo_id": "abc"}, {"query": {"w": 1}})


def test_merge_is_idempotent(handle_request):
    overrides = FetchOptions(headers={"X-Call": "1"}, timeout=5.0)
    first = handle_request({"photo_id": "abc", "w": None}, overrides)
    second = handle_request({"photo_id": "abc", "w": None}, overrides)
    assert first == second
    assert first.model_dump_json() == second.model_dump_json()


def test_override_header_wins_regardless_of_case(handle_request):
    params = handle_request({"photo_id": "abc"}, {"headers": {"x-shared": "call"}})
    assert params.headers == {"X-Base": "base", "x-shared": "call"}


def test_merge_headers_keeps_original_names():
    assert merge_headers({"Cache-Control": "no-cache", "X-A": "1"}, {"X-B": "2"}) == {
        "Cache-Control": "no-cache",
        "X-A": "1",
        "X-B": "2",
    }
