"""
FastAPI client wrapper for Streamlit UI.
"""

import os
import requests


def get_api_base_url() -> str:
    """Get API base URL from env or default."""
    return os.getenv("API_BASE_URL", "http://localhost:8000").rstrip("/")


def _auth_headers(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


def register(username: str, password: str) -> dict:
    """Create a new account."""
    r = requests.post(
        f"{get_api_base_url()}/api/users",
        json={"username": username, "password": password},
        timeout=10,
    )
    r.raise_for_status()
    return r.json()


def login(username: str, password: str) -> str:
    """Sign in and return the bearer token."""
    r = requests.post(
        f"{get_api_base_url()}/api/auth/token",
        json={"username": username, "password": password},
        timeout=10,
    )
    r.raise_for_status()
    return r.json()["access_token"]


def get_me(token: str) -> dict:
    """Get the signed-in user's profile."""
    r = requests.get(f"{get_api_base_url()}/api/users/me", headers=_auth_headers(token), timeout=10)
    r.raise_for_status()
    return r.json()


def get_favorites(token: str) -> list:
    r = requests.get(f"{get_api_base_url()}/api/favorites", headers=_auth_headers(token), timeout=10)
    r.raise_for_status()
    return r.json()


def add_favorite(
    token: str,
    catalog_id: int,
    media_kind: str,
    title: str | None = None,
    poster_ref: str | None = None,
) -> dict:
    """Add a title to favorites."""
    r = requests.post(
        f"{get_api_base_url()}/api/favorites",
        json={
            "catalog_id": catalog_id,
            "media_kind": media_kind,
            "title": title,
            "poster_ref": poster_ref,
        },
        headers=_auth_headers(token),
        timeout=10,
    )
    r.raise_for_status()
    return r.json()


def remove_favorite(token: str, catalog_id: int) -> dict:
    r = requests.delete(
        f"{get_api_base_url()}/api/favorites/{catalog_id}",
        headers=_auth_headers(token),
        timeout=10,
    )
    r.raise_for_status()
    return r.json()


def recommend_by_description(token: str, description: str) -> dict:
    """Description-based recommendations (may take a while: up to three stages)."""
    r = requests.post(
        f"{get_api_base_url()}/api/recommendations/by-description",
        json={"description": description},
        headers=_auth_headers(token),
        timeout=120,
    )
    r.raise_for_status()
    return r.json()


def recommend_by_favorites(token: str) -> dict:
    r = requests.get(
        f"{get_api_base_url()}/api/recommendations/by-favorites",
        headers=_auth_headers(token),
        timeout=30,
    )
    r.raise_for_status()
    return r.json()


def get_trending(media_kind: str | None = None) -> dict:
    """Trending titles this week."""
    params = {"media_kind": media_kind} if media_kind else {}
    r = requests.get(f"{get_api_base_url()}/api/catalog/trending", params=params, timeout=15)
    r.raise_for_status()
    return r.json()


def search_catalog(query: str, page: int = 1) -> dict:
    r = requests.get(
        f"{get_api_base_url()}/api/catalog/search",
        params={"query": query, "page": page},
        timeout=15,
    )
    r.raise_for_status()
    return r.json()


def health_check() -> dict:
    """Check API health."""
    r = requests.get(f"{get_api_base_url()}/api/health", timeout=5)
    r.raise_for_status()
    return r.json()


def error_detail(error: requests.RequestException) -> str:
    """Best-effort 'detail' message from a failed API call."""
    response = getattr(error, "response", None)
    if response is not None:
        try:
            return str(response.json().get("detail", response.text))
        except ValueError:
            return response.text
    return str(error)
