"""
Favorites API endpoints (caller's saved catalog titles).
"""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.api.dependencies import get_current_user, get_db
from app.api.models.favorite import FavoriteCreate, FavoriteResponse
from app.database import crud
from app.database.models import User

router = APIRouter(prefix="/api/favorites", tags=["favorites"])


@router.get("", response_model=list[FavoriteResponse])
def list_favorites(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """List the caller's favorites, newest first."""
    return crud.get_favorites(db, current_user.user_id)


@router.post("", response_model=FavoriteResponse, status_code=status.HTTP_201_CREATED)
def add_favorite(
    favorite_in: FavoriteCreate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Add a catalog title to the caller's favorites."""
    try:
        return crud.add_favorite(
            db,
            user_id=current_user.user_id,
            catalog_id=favorite_in.catalog_id,
            media_kind=favorite_in.media_kind,
            title=favorite_in.title,
            poster_ref=favorite_in.poster_ref,
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.delete("/{catalog_id}")
def remove_favorite(
    catalog_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Remove a title from the caller's favorites."""
    if not crud.remove_favorite(db, current_user.user_id, catalog_id):
        raise HTTPException(status_code=404, detail="Favorite not found")
    return {"success": True, "catalog_id": catalog_id}
