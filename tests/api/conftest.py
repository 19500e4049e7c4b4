"""
Shared fixtures for API tests.

Every test gets a fresh in-memory database; the catalog and the
recommendation orchestrator are overridden per test module where needed.
"""

import pytest
from fastapi.testclient import TestClient

from app.api.dependencies import get_db
from app.api.main import app
from app.database.connection import DatabaseManager


@pytest.fixture
def db_manager():
    """In-memory database with the schema created."""
    manager = DatabaseManager(db_path=":memory:")
    manager.create_tables()
    yield manager
    manager.close()


@pytest.fixture
def client(db_manager):
    """TestClient bound to the in-memory database."""

    def override_get_db():
        with db_manager.session_scope() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


def register_and_login(client, username="cinephile", password="popcorn42"):
    """Register a user and return Authorization headers for them."""
    r = client.post("/api/users", json={"username": username, "password": password})
    assert r.status_code == 201
    r = client.post("/api/auth/token", json={"username": username, "password": password})
    assert r.status_code == 200
    return {"Authorization": f"Bearer {r.json()['access_token']}"}


@pytest.fixture
def auth_headers(client):
    return register_and_login(client)
