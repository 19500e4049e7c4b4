"""
Async client for The Movie Database (TMDB) REST API.

Thin request/response mapping: every call is a single GET bounded by a
timeout, and every payload is mapped into CatalogItem records.
"""

import logging
from typing import Any, Dict, List, Optional, Sequence

import httpx

from app.core.catalog.models import CatalogItem, MediaKind

logger = logging.getLogger(__name__)

TMDB_API_BASE_URL = "https://api.themoviedb.org/3"
MIN_PAGE = 1
MAX_PAGE = 1000


class CatalogError(Exception):
    """Base error for catalog lookups."""
    pass


class CatalogUnavailable(CatalogError):
    """Catalog could not be reached or answered with a server/auth error."""
    pass


class CatalogNotFound(CatalogError):
    """Catalog answered 404 for the requested resource."""
    pass


def clamp_page(page: Any) -> int:
    """Coerce a page parameter into TMDB's accepted range [1, 1000]."""
    try:
        value = int(page)
    except (TypeError, ValueError):
        return MIN_PAGE
    return max(MIN_PAGE, min(MAX_PAGE, value))


class CatalogClient:
    """
    Read-only TMDB client.

    Usage:
        catalog = CatalogClient(api_key="...")
        items = await catalog.search("time travel")
        details = await catalog.get_details(items[0].id, items[0].media_kind)
    """

    def __init__(
        self,
        api_key: Optional[str],
        base_url: str = TMDB_API_BASE_URL,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the client.

        Args:
            api_key: TMDB API key; calls fail with CatalogUnavailable when empty
            base_url: API root
            timeout: Per-call timeout in seconds
            transport: Optional httpx transport (tests pass a MockTransport)
        """
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    @property
    def configured(self) -> bool:
        return bool(self.api_key)

    async def _get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        if not self.api_key:
            raise CatalogUnavailable("TMDB_API_KEY is not configured")

        query = {"api_key": self.api_key, "language": "en-US"}
        if params:
            query.update({k: v for k, v in params.items() if v is not None})

        try:
            async with httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                transport=self._transport,
            ) as client:
                response = await client.get(path, params=query)
        except httpx.RequestError as e:
            raise CatalogUnavailable(f"TMDB request failed for {path}: {type(e).__name__}") from e

        if response.status_code == 404:
            raise CatalogNotFound(f"TMDB resource not found: {path}")
        if response.status_code >= 400:
            raise CatalogUnavailable(f"TMDB error {response.status_code} for {path}")

        try:
            data = response.json()
        except ValueError as e:
            raise CatalogUnavailable(f"Invalid JSON from TMDB for {path}") from e
        if not isinstance(data, dict):
            raise CatalogUnavailable(f"Unexpected TMDB payload for {path}")
        return data

    @staticmethod
    def _items(data: Dict[str, Any], media_kind: Optional[MediaKind] = None) -> List[CatalogItem]:
        items = []
        for record in data.get("results") or []:
            if not isinstance(record, dict) or "id" not in record:
                continue
            # search/multi and trending/all mix in people
            if record.get("media_type") not in (None, "movie", "tv"):
                continue
            try:
                items.append(CatalogItem.from_record(record, media_kind))
            except (KeyError, TypeError, ValueError) as e:
                logger.warning(f"Skipping malformed TMDB record {record.get('id')!r}: {e!r}")
        return items

    async def search(
        self,
        query: str,
        media_kind: Optional[MediaKind] = None,
        page: int = 1,
    ) -> List[CatalogItem]:
        """Search titles; all kinds (search/multi) when media_kind is None."""
        path = f"/search/{media_kind.catalog_path}" if media_kind else "/search/multi"
        data = await self._get(path, {"query": query, "page": clamp_page(page)})
        items = self._items(data, media_kind)
        logger.debug(f"Catalog search '{query}' ({path}) returned {len(items)} items")
        return items

    async def get_details(self, catalog_id: int, media_kind: MediaKind) -> CatalogItem:
        """Full record for one title."""
        path = f"/{media_kind.catalog_path}/{int(catalog_id)}"
        data = await self._get(path)
        try:
            return CatalogItem.from_record(data, media_kind)
        except (KeyError, TypeError, ValueError) as e:
            raise CatalogUnavailable(f"Malformed TMDB payload for {path}: {e!r}") from e

    async def get_similar(
        self, catalog_id: int, media_kind: MediaKind, page: int = 1
    ) -> List[CatalogItem]:
        """Titles TMDB considers similar to the given one."""
        data = await self._get(
            f"/{media_kind.catalog_path}/{int(catalog_id)}/similar",
            {"page": clamp_page(page)},
        )
        return self._items(data, media_kind)

    async def get_recommendations(
        self, catalog_id: int, media_kind: MediaKind, page: int = 1
    ) -> List[CatalogItem]:
        """TMDB's own recommendations for the given title."""
        data = await self._get(
            f"/{media_kind.catalog_path}/{int(catalog_id)}/recommendations",
            {"page": clamp_page(page)},
        )
        return self._items(data, media_kind)

    async def get_trending(
        self, media_kind: Optional[MediaKind] = None, page: int = 1
    ) -> List[CatalogItem]:
        """Trending this week; all kinds when media_kind is None."""
        segment = media_kind.catalog_path if media_kind else "all"
        data = await self._get(f"/trending/{segment}/week", {"page": clamp_page(page)})
        return self._items(data, media_kind)

    async def discover(
        self,
        media_kind: MediaKind,
        genre_ids: Optional[Sequence[int]] = None,
        page: int = 1,
    ) -> List[CatalogItem]:
        """Discover titles, optionally restricted to genre ids."""
        params: Dict[str, Any] = {"page": clamp_page(page)}
        if genre_ids:
            params["with_genres"] = ",".join(str(g) for g in genre_ids)
        data = await self._get(f"/discover/{media_kind.catalog_path}", params)
        return self._items(data, media_kind)

    async def get_genres(self, media_kind: MediaKind) -> List[Dict[str, Any]]:
        """Genre list as [{'id': ..., 'name': ...}]."""
        data = await self._get(f"/genre/{media_kind.catalog_path}/list")
        return [
            {"id": int(g["id"]), "name": g.get("name", "")}
            for g in data.get("genres") or []
            if isinstance(g, dict) and "id" in g
        ]
