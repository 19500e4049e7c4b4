"""
Catalog proxy API endpoints (TMDB lookups mapped to CatalogItem records).
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query

from app.api.dependencies import get_catalog_client
from app.api.models.catalog import CatalogItemResponse, CatalogList, GenreResponse
from app.core.catalog import (
    CatalogClient,
    CatalogItem,
    CatalogNotFound,
    CatalogUnavailable,
    MediaKind,
    clamp_page,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/catalog", tags=["catalog"])


def _parse_kind(value: str) -> MediaKind:
    kind = MediaKind.parse(value)
    if kind is None:
        raise HTTPException(status_code=400, detail="media_kind must be 'movie' or 'series'")
    return kind


def _parse_genre_ids(value: str | None) -> list[int]:
    if not value:
        return []
    try:
        return [int(part) for part in value.split(",") if part.strip()]
    except ValueError:
        raise HTTPException(status_code=400, detail="with_genres must be comma-separated genre ids")


def _item_response(item: CatalogItem) -> CatalogItemResponse:
    return CatalogItemResponse(
        id=item.id,
        title=item.title,
        overview=item.overview,
        media_kind=item.media_kind.value,
        genre_ids=list(item.genre_ids),
        genre_names=list(item.genre_names),
        release_date=item.release_date,
        popularity=item.popularity,
        rating=item.rating,
        poster_ref=item.poster_ref,
    )


def _upstream_error(e: CatalogUnavailable) -> HTTPException:
    logger.warning(f"Catalog proxy call failed: {e}")
    return HTTPException(status_code=502, detail="Catalog service unavailable")


@router.get("/trending", response_model=CatalogList)
async def trending(
    media_kind: str | None = Query(None),
    page: int = Query(1),
    catalog: CatalogClient = Depends(get_catalog_client),
):
    """Trending titles this week (all kinds unless media_kind is given)."""
    kind = _parse_kind(media_kind) if media_kind else None
    page = clamp_page(page)
    try:
        items = await catalog.get_trending(kind, page=page)
    except CatalogUnavailable as e:
        raise _upstream_error(e)
    return CatalogList(results=[_item_response(i) for i in items], page=page)


@router.get("/search", response_model=CatalogList)
async def search(
    query: str = Query(""),
    page: int = Query(1),
    catalog: CatalogClient = Depends(get_catalog_client),
):
    """Search movies and series by free text."""
    if not query.strip():
        raise HTTPException(status_code=400, detail="Query is required")
    page = clamp_page(page)
    try:
        items = await catalog.search(query.strip(), page=page)
    except CatalogUnavailable as e:
        raise _upstream_error(e)
    return CatalogList(results=[_item_response(i) for i in items], page=page)


@router.get("/genres/{media_kind}", response_model=list[GenreResponse])
async def genres(media_kind: str, catalog: CatalogClient = Depends(get_catalog_client)):
    """Genre list for movies or series."""
    kind = _parse_kind(media_kind)
    try:
        return await catalog.get_genres(kind)
    except CatalogUnavailable as e:
        raise _upstream_error(e)


@router.get("/discover/{media_kind}", response_model=CatalogList)
async def discover(
    media_kind: str,
    with_genres: str | None = Query(None),
    page: int = Query(1),
    catalog: CatalogClient = Depends(get_catalog_client),
):
    """Discover titles, optionally filtered by comma-separated genre ids."""
    kind = _parse_kind(media_kind)
    genre_ids = _parse_genre_ids(with_genres)
    page = clamp_page(page)
    try:
        items = await catalog.discover(kind, genre_ids=genre_ids, page=page)
    except CatalogUnavailable as e:
        raise _upstream_error(e)
    return CatalogList(results=[_item_response(i) for i in items], page=page)


@router.get("/{media_kind}/{catalog_id}", response_model=CatalogItemResponse)
async def details(
    media_kind: str,
    catalog_id: int,
    catalog: CatalogClient = Depends(get_catalog_client),
):
    """Full details for one title."""
    kind = _parse_kind(media_kind)
    try:
        item = await catalog.get_details(catalog_id, kind)
    except CatalogNotFound:
        raise HTTPException(status_code=404, detail="Title not found")
    except CatalogUnavailable as e:
        raise _upstream_error(e)
    return _item_response(item)
