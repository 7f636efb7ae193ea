import pytest

from unsplash_client.endpoints import photos
from unsplash_client.models.params import FetchOptions


def test_list_photos_compacts_pagination():
    params = photos.list_photos.handle_request({"page": 3})
    assert params.pathname == "/photos"
    assert params.method == "GET"
    assert params.query == {"page": 3}


def test_get_photo():
    params = photos.get_photo.handle_request({"photo_id": "Dwu85P9SOIk"})
    assert params.pathname == "/photos/Dwu85P9SOIk"
    assert params.query == {}


def test_get_photo_stats():
    params = photos.get_photo_stats.handle_request({"photo_id": "abc"})
    assert params.pathname == "/photos/abc/statistics"


def test_get_random_photo_joins_ids_and_disables_caching():
    params = photos.get_random_photo.handle_request(
        {"collection_ids": ["c1", "c2"], "featured": True, "count": 2}
    )
    assert params.pathname == "/photos/random"
    assert params.query == {"collections": "c1,c2", "featured": True, "count": 2}
    assert params.headers == {"cache-control": "no-cache"}


def test_get_random_photo_caller_headers_layer_on_top():
    params = photos.get_random_photo.handle_request(
        {}, FetchOptions(headers={"cache-control": "max-age=0", "X-Extra": "1"})
    )
    assert params.headers == {"cache-control": "max-age=0", "X-Extra": "1"}


def test_track_download_uses_location_path_and_query():
    params = photos.track_download.handle_request(
        {"download_location": "https://api.unsplash.com/photos/abc/download?ixid=xyz"}
    )
    assert params.pathname == "/photos/abc/download"
    assert params.query == {"ixid": "xyz"}


def test_track_download_requires_a_path():
    with pytest.raises(ValueError, match="Could not parse pathname"):
        photos.track_download.handle_request({"download_location": "https://api.unsplash.com"})


@pytest.mark.parametrize(
    ("photo_id", "pathname"),
    [
        ("a?b", "/photos/a%3Fb/statistics"),
        ("a#b", "/photos/a%23b/statistics"),
        ("..", "/photos/%2E%2E/statistics"),
    ],
)
def test_get_photo_stats_escapes_photo_id(photo_id, pathname):
    params = photos.get_photo_stats.handle_request({"photo_id": photo_id})
    assert params.pathname == pathname


def test_get_random_photo_override_replaces_differently_cased_header():
    params = photos.get_random_photo.handle_request(
        {}, FetchOptions(headers={"Cache-Control": "max-age=0"})
    )
    assert params.headers == {"Cache-Control": "max-age=0"}
