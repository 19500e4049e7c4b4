"""
Pydantic schemas for API request/response validation.
"""

from app.api.models.user import UserCreate, UserResponse, TokenRequest, TokenResponse
from app.api.models.favorite import FavoriteCreate, FavoriteResponse
from app.api.models.catalog import CatalogItemResponse, CatalogList, GenreResponse
from app.api.models.recommendation import (
    DescriptionRequest,
    DescriptionRecommendationResponse,
    FavoritesRecommendationResponse,
    RecommendationItem,
)

__all__ = [
    "UserCreate",
    "UserResponse",
    "TokenRequest",
    "TokenResponse",
    "FavoriteCreate",
    "FavoriteResponse",
    "CatalogItemResponse",
    "CatalogList",
    "GenreResponse",
    "DescriptionRequest",
    "DescriptionRecommendationResponse",
    "FavoritesRecommendationResponse",
    "RecommendationItem",
]
