"""
API tests for favorites endpoints.
"""

from conftest import register_and_login


class TestFavoriteEndpoints:
    """Tests for GET/POST /api/favorites and DELETE /api/favorites/{catalog_id}."""

    def test_requires_authentication(self, client):
        assert client.get("/api/favorites").status_code == 401
        assert client.post("/api/favorites", json={"catalog_id": 1, "media_kind": "movie"}).status_code == 401
        assert client.delete("/api/favorites/1").status_code == 401

    def test_add_and_list(self, client, auth_headers):
        """POST then GET returns the favorite with cached display data."""
        payload = {"catalog_id": 27205, "media_kind": "movie", "title": "Inception", "poster_ref": "/i.jpg"}
        r = client.post("/api/favorites", json=payload, headers=auth_headers)
        assert r.status_code == 201
        assert r.json()["catalog_id"] == 27205

        r = client.get("/api/favorites", headers=auth_headers)
        assert r.status_code == 200
        favorites = r.json()
        assert len(favorites) == 1
        assert favorites[0]["title"] == "Inception"
        assert favorites[0]["media_kind"] == "movie"

    def test_tv_alias_stored_as_series(self, client, auth_headers):
        r = client.post("/api/favorites", json={"catalog_id": 1396, "media_kind": "tv"}, headers=auth_headers)
        assert r.status_code == 201
        assert r.json()["media_kind"] == "series"

    def test_invalid_payload(self, client, auth_headers):
        assert client.post(
            "/api/favorites", json={"catalog_id": 1, "media_kind": "podcast"}, headers=auth_headers
        ).status_code == 422
        assert client.post(
            "/api/favorites", json={"catalog_id": 0, "media_kind": "movie"}, headers=auth_headers
        ).status_code == 422

    def test_duplicate_returns_400(self, client, auth_headers):
        payload = {"catalog_id": 27205, "media_kind": "movie"}
        client.post("/api/favorites", json=payload, headers=auth_headers)
        r = client.post("/api/favorites", json=payload, headers=auth_headers)
        assert r.status_code == 400
        assert r.json()["detail"] == "Already in favorites"

    def test_remove(self, client, auth_headers):
        client.post("/api/favorites", json={"catalog_id": 27205, "media_kind": "movie"}, headers=auth_headers)

        r = client.delete("/api/favorites/27205", headers=auth_headers)
        assert r.status_code == 200
        assert r.json() == {"success": True, "catalog_id": 27205}
        assert client.get("/api/favorites", headers=auth_headers).json() == []

    def test_remove_missing_returns_404(self, client, auth_headers):
        r = client.delete("/api/favorites/27205", headers=auth_headers)
        assert r.status_code == 404

    def test_favorites_are_per_user(self, client, auth_headers):
        client.post("/api/favorites", json={"catalog_id": 27205, "media_kind": "movie"}, headers=auth_headers)
        other = register_and_login(client, username="someone")

        assert client.get("/api/favorites", headers=other).json() == []
        assert client.delete("/api/favorites/27205", headers=other).status_code == 404
