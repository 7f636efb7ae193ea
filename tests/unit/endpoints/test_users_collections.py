from unsplash_client.endpoints import collections, users


def test_get_user():
    params = users.get_user.handle_request({"username": "naoufal"})
    assert params.pathname == "/users/naoufal"


def test_get_user_photos():
    params = users.get_user_photos.handle_request(
        {"username": "naoufal", "stats": False, "orientation": "portrait"}
    )
    assert params.pathname == "/users/naoufal/photos"
    assert params.query == {"stats": False, "orientation": "portrait"}


def test_list_collections():
    params = collections.list_collections.handle_request({"per_page": 10})
    assert params.pathname == "/collections"
    assert params.query == {"per_page": 10}


def test_get_collection_photos():
    params = collections.get_collection_photos.handle_request(
        {"collection_id": "206", "page": 2}
    )
    assert params.pathname == "/collections/206/photos"
    assert params.query == {"page": 2}


def test_get_collection():
    params = collections.get_collection.handle_request({"collection_id": "206"})
    assert params.pathname == "/collections/206"
    assert params.query == {}


def test_get_user_escapes_username():
    params = users.get_user.handle_request({"username": "../photos/x"})
    assert params.pathname == "/users/..%2Fphotos%2Fx"


def test_get_collection_photos_escapes_collection_id():
    params = collections.get_collection_photos.handle_request({"collection_id": "a?b#c"})
    assert params.pathname == "/collections/a%3Fb%23c/photos"
