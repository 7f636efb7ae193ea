from unsplash_client.endpoints import search


def test_search_photos_query():
    params = search.search_photos.handle_request(
        {
            "query": "cat",
            "page": 1,
            "per_page": 30,
            "color": "black_and_white",
            "collection_ids": ["1", "2"],
            "lang": None,
        }
    )
    assert params.pathname == "/search/photos"
    assert params.query == {
        "query": "cat",
        "page": 1,
        "per_page": 30,
        "color": "black_and_white",
        "collections": "1,2",
    }


def test_search_users_only_sends_given_values():
    params = search.search_users.handle_request({"query": "ana"})
    assert params.pathname == "/search/users"
    assert params.query == {"query": "ana"}


def test_search_collections():
    params = search.search_collections.handle_request({"query": "nature", "per_page": 5})
    assert params.pathname == "/search/collections"
    assert params.query == {"query": "nature", "per_page": 5}
