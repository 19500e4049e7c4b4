"""
FastAPI dependency injection for database session, catalog client,
recommendation orchestrator and the authenticated caller.
"""

import logging
from typing import Generator

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from app.database.connection import get_db_manager
from app.database.models import User
from app.database import crud
from app.core.catalog import CatalogClient
from app.core.recommendation import (
    HuggingFaceRecommender,
    KeywordRecommender,
    OpenAIRecommender,
    RecommendationOrchestrator,
)
from app.api import config
from app.api.security import CredentialsException, decode_access_token

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


def get_db() -> Generator[Session, None, None]:
    """Yield database session for FastAPI Depends()."""
    db_path = config.get_database_path()
    db_manager = get_db_manager(db_path=db_path) if db_path.strip() else get_db_manager()
    with db_manager.session_scope() as session:
        yield session


# Singletons shared by all requests
_catalog_client: CatalogClient | None = None
_orchestrator: RecommendationOrchestrator | None = None


def get_catalog_client() -> CatalogClient:
    """Get or create singleton CatalogClient."""
    global _catalog_client
    if _catalog_client is None:
        api_key = config.get_tmdb_api_key()
        if not api_key:
            logger.warning("TMDB_API_KEY is not set; catalog calls will fail")
        _catalog_client = CatalogClient(
            api_key=api_key,
            base_url=config.get_tmdb_base_url(),
            timeout=config.get_catalog_timeout(),
        )
    return _catalog_client


def get_recommendation_orchestrator() -> RecommendationOrchestrator:
    """Get or create singleton RecommendationOrchestrator."""
    global _orchestrator
    if _orchestrator is None:
        catalog = get_catalog_client()
        timeout = config.get_inference_timeout()
        primary = OpenAIRecommender(
            catalog,
            api_key=config.get_openai_api_key(),
            model=config.get_openai_model(),
            timeout=timeout,
        )
        secondary = HuggingFaceRecommender(
            catalog,
            api_key=config.get_huggingface_api_key(),
            model=config.get_huggingface_model(),
            api_url=config.get_huggingface_api_url(),
            timeout=timeout,
        )
        _orchestrator = RecommendationOrchestrator(
            primary=primary,
            secondary=secondary,
            keyword=KeywordRecommender(catalog),
            catalog=catalog,
        )
        logger.info(
            f"Recommendation orchestrator ready (openai configured={primary.configured}, "
            f"huggingface configured={secondary.configured})"
        )
    return _orchestrator


def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    db: Session = Depends(get_db),
) -> User:
    """Resolve the caller from the Authorization: Bearer header."""
    if credentials is None or not credentials.credentials:
        raise CredentialsException("Not authenticated")
    user_id = decode_access_token(credentials.credentials)
    user = crud.get_user(db, user_id)
    if user is None:
        raise CredentialsException("User no longer exists")
    return user
