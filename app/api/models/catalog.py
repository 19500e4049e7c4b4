"""
Pydantic schemas for Catalog proxy API.
"""

from datetime import date

from pydantic import BaseModel


class CatalogItemResponse(BaseModel):
    """Response model for a single catalog title."""

    id: int
    title: str
    overview: str
    media_kind: str
    genre_ids: list[int] = []
    genre_names: list[str] = []
    release_date: date | None = None
    popularity: float = 0.0
    rating: float = 0.0
    poster_ref: str | None = None

    class Config:
        from_attributes = True


class CatalogList(BaseModel):
    """Response model for a page of catalog titles."""

    results: list[CatalogItemResponse]
    page: int


class GenreResponse(BaseModel):
    id: int
    name: str
