"""
Recommendation API endpoints.
"""

import logging

from fastapi import APIRouter, Body, Depends, HTTPException
from sqlalchemy.orm import Session

from app.api.dependencies import get_current_user, get_db, get_recommendation_orchestrator
from app.api.models.recommendation import (
    DescriptionRecommendationResponse,
    DescriptionRequest,
    FavoritesRecommendationResponse,
    RecommendationItem,
)
from app.core.catalog import CatalogUnavailable
from app.core.recommendation import (
    InvalidRequest,
    RecommendationOrchestrator,
    RecommendationRequest,
    RecommendationResult,
)
from app.database import crud
from app.database.models import User

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/recommendations", tags=["recommendations"])

DESCRIPTION_REQUIRED = "Description is required."


def _to_item(result: RecommendationResult) -> RecommendationItem:
    return RecommendationItem(
        catalog_id=result.catalog_id,
        title=result.title,
        overview=result.overview,
        media_kind=result.media_kind.value,
        justification=result.justification,
        poster_ref=result.poster_ref,
        provenance=result.provenance.value,
        is_fallback=result.is_fallback,
    )


@router.post(
    "/by-description",
    response_model=DescriptionRecommendationResponse,
    response_model_exclude_unset=True,
)
async def recommend_by_description(
    body: DescriptionRequest | None = Body(None),
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
    orchestrator: RecommendationOrchestrator = Depends(get_recommendation_orchestrator),
):
    """Recommendations for a free-text description (with fallback chain)."""
    description = body.description if body and isinstance(body.description, str) else ""
    favorites = tuple(crud.get_favorite_refs(db, current_user.user_id))
    try:
        outcome = await orchestrator.recommend(
            RecommendationRequest(description=description, caller_favorites=favorites)
        )
    except InvalidRequest:
        raise HTTPException(status_code=400, detail=DESCRIPTION_REQUIRED)
    except CatalogUnavailable as e:
        logger.error(f"Recommendations unavailable for user {current_user.user_id}: {e}")
        raise HTTPException(status_code=503, detail="Recommendation services unavailable")

    fields = {
        "results": [_to_item(r) for r in outcome.results],
        "fallback": outcome.used_fallback,
    }
    # fallbackSource is omitted, not null, when the primary stage answered
    if outcome.fallback_stage:
        fields["fallback_source"] = outcome.fallback_stage
    return DescriptionRecommendationResponse(**fields)


@router.get("/by-favorites", response_model=FavoritesRecommendationResponse)
async def recommend_by_favorites(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
    orchestrator: RecommendationOrchestrator = Depends(get_recommendation_orchestrator),
):
    """Recommendations seeded by a random favorite (trending when there are none)."""
    favorites = crud.get_favorite_refs(db, current_user.user_id)
    results = await orchestrator.recommend_from_favorites(favorites)
    return FavoritesRecommendationResponse(results=[_to_item(r) for r in results])
