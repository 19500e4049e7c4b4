"""
Unit tests for the TMDB catalog client.

HTTP is faked with httpx.MockTransport; async calls are driven with asyncio.run.
"""

import asyncio
from datetime import date

import httpx
import pytest

from app.core.catalog import (
    CatalogClient,
    CatalogNotFound,
    CatalogUnavailable,
    MediaKind,
    clamp_page,
)

BASE_URL = "https://tmdb.test/3"


def make_client(handler, api_key="test-key"):
    return CatalogClient(api_key=api_key, base_url=BASE_URL, transport=httpx.MockTransport(handler))


class TestMediaKind:
    """Tests for MediaKind parsing."""

    def test_parse_accepts_tmdb_alias(self):
        assert MediaKind.parse("tv") is MediaKind.SERIES
        assert MediaKind.parse("Movie") is MediaKind.MOVIE
        assert MediaKind.parse(MediaKind.SERIES) is MediaKind.SERIES

    def test_parse_rejects_unknown(self):
        assert MediaKind.parse("person") is None
        assert MediaKind.parse(None) is None
        assert MediaKind.parse(3) is None

    def test_catalog_path(self):
        assert MediaKind.MOVIE.catalog_path == "movie"
        assert MediaKind.SERIES.catalog_path == "tv"


class TestClampPage:
    """Page parameters are clamped into [1, 1000]."""

    def test_clamps_range(self):
        assert clamp_page(0) == 1
        assert clamp_page(-4) == 1
        assert clamp_page(1001) == 1000
        assert clamp_page(42) == 42

    def test_coerces_strings_and_garbage(self):
        assert clamp_page("7") == 7
        assert clamp_page("abc") == 1
        assert clamp_page(None) == 1


class TestSearch:
    """Tests for CatalogClient.search."""

    def test_multi_search_maps_items_and_drops_people(self):
        """search/multi results keep movies and series only."""
        seen = []

        def handler(request):
            seen.append(request)
            return httpx.Response(200, json={"results": [
                {"id": 1, "media_type": "movie", "title": "Arrival", "overview": "Linguist meets aliens.",
                 "genre_ids": [878, 18], "vote_average": 7.9, "popularity": 60.5, "poster_path": "/a.jpg",
                 "release_date": "2016-11-10"},
                {"id": 2, "media_type": "person", "name": "Amy Adams"},
                {"id": 3, "media_type": "tv", "name": "Dark", "first_air_date": "2017-12-01"},
            ]})

        items = asyncio.run(make_client(handler).search("arrival"))

        assert [i.id for i in items] == [1, 3]
        movie, series = items
        assert movie.media_kind is MediaKind.MOVIE
        assert movie.genre_names == ("Science Fiction", "Drama")
        assert movie.rating == 7.9
        assert movie.popularity == 60.5
        assert movie.poster_ref == "/a.jpg"
        assert movie.release_date == date(2016, 11, 10)
        assert series.media_kind is MediaKind.SERIES
        assert series.title == "Dark"
        assert series.overview == ""

        request = seen[0]
        assert request.url.path == "/3/search/multi"
        assert request.url.params["query"] == "arrival"
        assert request.url.params["api_key"] == "test-key"
        assert request.url.params["page"] == "1"

    def test_kind_specific_search(self):
        """A media kind selects search/movie or search/tv."""
        paths = []

        def handler(request):
            paths.append(request.url.path)
            return httpx.Response(200, json={"results": [{"id": 9, "name": "Kingdom"}]})

        items = asyncio.run(make_client(handler).search("kingdom", MediaKind.SERIES))

        assert paths == ["/3/search/tv"]
        assert items[0].media_kind is MediaKind.SERIES
        assert items[0].title == "Kingdom"

    def test_page_is_clamped(self):
        pages = []

        def handler(request):
            pages.append(request.url.params["page"])
            return httpx.Response(200, json={"results": []})

        asyncio.run(make_client(handler).search("x", page=5000))
        assert pages == ["1000"]


class TestErrors:
    """Transport and HTTP errors map onto the catalog error taxonomy."""

    def test_404_is_not_found(self):
        client = make_client(lambda request: httpx.Response(404, json={"status_message": "nope"}))
        with pytest.raises(CatalogNotFound):
            asyncio.run(client.get_details(123, MediaKind.MOVIE))

    def test_server_error_is_unavailable(self):
        client = make_client(lambda request: httpx.Response(500))
        with pytest.raises(CatalogUnavailable):
            asyncio.run(client.search("anything"))

    def test_auth_error_is_unavailable(self):
        client = make_client(lambda request: httpx.Response(401, json={"status_message": "bad key"}))
        with pytest.raises(CatalogUnavailable):
            asyncio.run(client.get_trending())

    def test_network_error_is_unavailable(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(CatalogUnavailable):
            asyncio.run(make_client(handler).search("anything"))

    def test_invalid_json_is_unavailable(self):
        client = make_client(lambda request: httpx.Response(200, content=b"<html>oops</html>"))
        with pytest.raises(CatalogUnavailable):
            asyncio.run(client.search("anything"))

    def test_malformed_details_payload_is_unavailable(self):
        """A details record that cannot be mapped is reported as a catalog failure."""
        payload = {"id": 1, "title": "Parasite", "genres": [{"id": "x", "name": "Thriller"}]}
        client = make_client(lambda request: httpx.Response(200, json=payload))
        with pytest.raises(CatalogUnavailable):
            asyncio.run(client.get_details(1, MediaKind.MOVIE))

    def test_malformed_list_record_is_skipped(self):
        results = [
            {"id": 1, "media_type": "movie", "title": "Broken", "genre_ids": ["x"]},
            {"id": 2, "media_type": "movie", "title": "Oldboy", "genre_ids": [53]},
        ]
        client = make_client(lambda request: httpx.Response(200, json={"results": results}))
        items = asyncio.run(client.search("anything"))
        assert [item.title for item in items] == ["Oldboy"]

    def test_missing_api_key_fails_without_request(self):
        calls = []

        def handler(request):
            calls.append(request)
            return httpx.Response(200, json={"results": []})

        client = make_client(handler, api_key="")
        assert client.configured is False
        with pytest.raises(CatalogUnavailable):
            asyncio.run(client.search("anything"))
        assert calls == []


class TestLookups:
    """Tests for details, similar, trending, discover and genres."""

    def test_get_details_uses_genre_objects(self):
        def handler(request):
            assert request.url.path == "/3/movie/10"
            return httpx.Response(200, json={
                "id": 10, "title": "Lagaan", "overview": "Villagers bet on a cricket match.",
                "genres": [{"id": 18, "name": "Drama"}, {"id": 10402, "name": "Music"}],
                "vote_average": 8.1, "poster_path": "/l.jpg",
            })

        item = asyncio.run(make_client(handler).get_details(10, MediaKind.MOVIE))

        assert item.title == "Lagaan"
        assert item.genre_ids == (18, 10402)
        assert item.genre_names == ("Drama", "Music")
        assert item.media_kind is MediaKind.MOVIE

    def test_get_similar_and_recommendations_paths(self):
        paths = []

        def handler(request):
            paths.append(request.url.path)
            return httpx.Response(200, json={"results": [{"id": 5, "name": "Signal"}]})

        client = make_client(handler)
        similar = asyncio.run(client.get_similar(7, MediaKind.SERIES))
        recommended = asyncio.run(client.get_recommendations(7, MediaKind.SERIES))

        assert paths == ["/3/tv/7/similar", "/3/tv/7/recommendations"]
        assert similar[0].media_kind is MediaKind.SERIES
        assert recommended[0].id == 5

    def test_trending_all_and_by_kind(self):
        paths = []

        def handler(request):
            paths.append(request.url.path)
            return httpx.Response(200, json={"results": [
                {"id": 1, "media_type": "movie", "title": "A"},
                {"id": 2, "media_type": "tv", "name": "B"},
            ]})

        client = make_client(handler)
        items = asyncio.run(client.get_trending())
        asyncio.run(client.get_trending(MediaKind.MOVIE))

        assert paths == ["/3/trending/all/week", "/3/trending/movie/week"]
        assert [i.media_kind for i in items] == [MediaKind.MOVIE, MediaKind.SERIES]

    def test_discover_joins_genre_ids(self):
        params = []

        def handler(request):
            params.append(dict(request.url.params))
            return httpx.Response(200, json={"results": []})

        asyncio.run(make_client(handler).discover(MediaKind.MOVIE, genre_ids=[28, 12], page=2))

        assert params[0]["with_genres"] == "28,12"
        assert params[0]["page"] == "2"

    def test_get_genres(self):
        def handler(request):
            assert request.url.path == "/3/genre/tv/list"
            return httpx.Response(200, json={"genres": [{"id": 16, "name": "Animation"}]})

        genres = asyncio.run(make_client(handler).get_genres(MediaKind.SERIES))
        assert genres == [{"id": 16, "name": "Animation"}]
