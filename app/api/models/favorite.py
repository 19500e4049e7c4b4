"""
Pydantic schemas for Favorites API.
"""

from datetime import datetime

from pydantic import BaseModel, Field


class FavoriteCreate(BaseModel):
    """Request body for adding a favorite."""

    catalog_id: int = Field(..., gt=0)
    media_kind: str = Field(..., pattern="^(movie|series|tv)$")
    title: str | None = Field(None, max_length=300)
    poster_ref: str | None = Field(None, max_length=255)


class FavoriteResponse(BaseModel):
    """Response model for favorite."""

    favorite_id: int
    catalog_id: int
    media_kind: str
    title: str | None
    poster_ref: str | None
    created_at: datetime | None = None

    class Config:
        from_attributes = True
