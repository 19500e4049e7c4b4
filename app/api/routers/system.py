"""
System API endpoints (health).
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.api.dependencies import get_catalog_client, get_db, get_recommendation_orchestrator
from app.core.catalog import CatalogClient
from app.core.recommendation import RecommendationOrchestrator
from app.database import crud

router = APIRouter(prefix="/api", tags=["system"])


@router.get("/health")
def health_check(
    db: Session = Depends(get_db),
    catalog: CatalogClient = Depends(get_catalog_client),
    orchestrator: RecommendationOrchestrator = Depends(get_recommendation_orchestrator),
):
    """Health check: database plus which upstream services are configured."""
    services = {
        "catalog": catalog.configured,
        "primary_inference": getattr(orchestrator.primary, "configured", False),
        "secondary_inference": getattr(orchestrator.secondary, "configured", False),
    }
    try:
        user_count = crud.get_user_count(db)
        favorite_count = crud.get_favorite_count(db)
    except Exception as e:
        return {"status": "unhealthy", "database": str(e), "services": services}
    return {
        "status": "healthy",
        "database": "connected",
        "users": user_count,
        "favorites": favorite_count,
        "services": services,
    }
