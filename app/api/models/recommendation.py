"""
Pydantic schemas for Recommendation API.
"""

from typing import Any

from pydantic import BaseModel, Field


class DescriptionRequest(BaseModel):
    """Request body for description-based recommendations.

    The description is validated by the route so that a missing or
    non-string value gets the same 400 as an empty one.
    """

    description: Any = None


class RecommendationItem(BaseModel):
    """Single recommendation, resolved to a catalog title."""

    catalog_id: int
    title: str
    overview: str
    media_kind: str
    justification: str
    poster_ref: str | None
    provenance: str
    is_fallback: bool


class DescriptionRecommendationResponse(BaseModel):
    """Response model for description-based recommendations."""

    results: list[RecommendationItem]
    fallback: bool
    fallback_source: str | None = Field(None, alias="fallbackSource")

    class Config:
        populate_by_name = True


class FavoritesRecommendationResponse(BaseModel):
    """Response model for favorites-based recommendations."""

    results: list[RecommendationItem]
