"""
API tests for user and sign-in endpoints.

Uses FastAPI TestClient against the app with an in-memory database.
"""

from app.api.security import create_access_token
from conftest import register_and_login


class TestUserEndpoints:
    """Tests for POST /api/users and GET /api/users/me."""

    def test_create_user(self, client):
        """POST /api/users creates a user and returns 201 without the password."""
        r = client.post("/api/users", json={"username": "moviebuff", "password": "secret123"})
        assert r.status_code == 201
        data = r.json()
        assert data["user_id"] is not None
        assert data["username"] == "moviebuff"
        assert "password" not in data
        assert "password_hash" not in data

    def test_create_user_duplicate(self, client):
        """POST /api/users with a taken username returns 400."""
        payload = {"username": "moviebuff", "password": "secret123"}
        assert client.post("/api/users", json=payload).status_code == 201
        r = client.post("/api/users", json=payload)
        assert r.status_code == 400
        assert "taken" in r.json()["detail"]

    def test_create_user_invalid(self, client):
        """Short usernames and passwords fail validation."""
        assert client.post("/api/users", json={"username": "ab", "password": "secret123"}).status_code == 422
        assert client.post("/api/users", json={"username": "moviebuff", "password": "123"}).status_code == 422

    def test_get_me(self, client):
        """GET /api/users/me returns the authenticated user."""
        headers = register_and_login(client, username="moviebuff")
        r = client.get("/api/users/me", headers=headers)
        assert r.status_code == 200
        assert r.json()["username"] == "moviebuff"

    def test_get_me_requires_token(self, client):
        r = client.get("/api/users/me")
        assert r.status_code == 401
        assert r.headers["WWW-Authenticate"] == "Bearer"

    def test_get_me_rejects_garbage_token(self, client):
        r = client.get("/api/users/me", headers={"Authorization": "Bearer not-a-jwt"})
        assert r.status_code == 401
        assert r.json()["detail"] == "Invalid token"

    def test_get_me_rejects_expired_token(self, client):
        register_and_login(client)
        token = create_access_token(1, expires_minutes=-5)
        r = client.get("/api/users/me", headers={"Authorization": f"Bearer {token}"})
        assert r.status_code == 401
        assert r.json()["detail"] == "Token has expired"

    def test_get_me_unknown_user(self, client):
        token = create_access_token(999)
        r = client.get("/api/users/me", headers={"Authorization": f"Bearer {token}"})
        assert r.status_code == 401


class TestAuthEndpoints:
    """Tests for POST /api/auth/token."""

    def test_login(self, client):
        client.post("/api/users", json={"username": "moviebuff", "password": "secret123"})
        r = client.post("/api/auth/token", json={"username": "moviebuff", "password": "secret123"})
        assert r.status_code == 200
        data = r.json()
        assert data["token_type"] == "bearer"
        assert data["access_token"]

    def test_login_wrong_password(self, client):
        client.post("/api/users", json={"username": "moviebuff", "password": "secret123"})
        r = client.post("/api/auth/token", json={"username": "moviebuff", "password": "wrong-one"})
        assert r.status_code == 401
        assert r.json()["detail"] == "Incorrect username or password"

    def test_login_unknown_user(self, client):
        r = client.post("/api/auth/token", json={"username": "ghost", "password": "secret123"})
        assert r.status_code == 401
