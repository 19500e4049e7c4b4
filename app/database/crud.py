"""
CRUD operations for User and Favorite models.

This module provides Create, Read, Delete operations for user accounts and
their favorite catalog titles.
"""

from typing import List, Optional
from sqlalchemy import func
from sqlalchemy.orm import Session

from app.core.catalog.models import MediaKind
from app.core.recommendation.models import FavoriteRef
from app.database.models import User, Favorite

USERNAME_MIN_LENGTH = 3
USERNAME_MAX_LENGTH = 50


# ==================== USER CRUD OPERATIONS ====================

def create_user(session: Session, username: str, password_hash: str) -> User:
    """
    Create a new user.

    Args:
        session: Database session
        username: Login name (3-50 characters after trimming)
        password_hash: Already hashed password

    Returns:
        Created User object

    Raises:
        ValueError: If the username has the wrong length or is taken
    """
    username = (username or "").strip()
    if not USERNAME_MIN_LENGTH <= len(username) <= USERNAME_MAX_LENGTH:
        raise ValueError(
            f"Username must be between {USERNAME_MIN_LENGTH} and {USERNAME_MAX_LENGTH} characters"
        )
    if get_user_by_username(session, username) is not None:
        raise ValueError("Username already taken")

    user = User(username=username, password_hash=password_hash)
    session.add(user)
    session.commit()
    session.refresh(user)
    return user


def get_user(session: Session, user_id: int) -> Optional[User]:
    """
    Get a user by ID.

    Args:
        session: Database session
        user_id: User ID

    Returns:
        User object or None if not found
    """
    return session.query(User).filter(User.user_id == user_id).first()


def get_user_by_username(session: Session, username: str) -> Optional[User]:
    """Get a user by username, or None."""
    return session.query(User).filter(User.username == username).first()


def get_user_count(session: Session) -> int:
    return session.query(func.count(User.user_id)).scalar()


def delete_user(session: Session, user_id: int) -> bool:
    """
    Delete a user and, through the cascade, their favorites.

    Args:
        session: Database session
        user_id: User ID

    Returns:
        True if user was deleted, False if not found
    """
    user = get_user(session, user_id)
    if user:
        session.delete(user)
        session.commit()
        return True
    return False


# ==================== FAVORITE CRUD OPERATIONS ====================

def add_favorite(
    session: Session,
    user_id: int,
    catalog_id: int,
    media_kind: str,
    title: Optional[str] = None,
    poster_ref: Optional[str] = None,
) -> Favorite:
    """
    Add a catalog title to a user's favorites.

    Args:
        session: Database session
        user_id: User ID
        catalog_id: TMDB identifier
        media_kind: 'movie' or 'series' ('tv' is accepted as 'series')
        title: Display title to cache (optional)
        poster_ref: Poster path to cache (optional)

    Returns:
        Created Favorite object

    Raises:
        ValueError: If the media kind is unknown or the title is already a favorite
    """
    kind = MediaKind.parse(media_kind)
    if kind is None:
        raise ValueError("Media kind must be 'movie' or 'series'")
    if get_favorite(session, user_id, catalog_id) is not None:
        raise ValueError("Already in favorites")

    favorite = Favorite(
        user_id=user_id,
        catalog_id=catalog_id,
        media_kind=kind.value,
        title=title,
        poster_ref=poster_ref,
    )
    session.add(favorite)
    session.commit()
    session.refresh(favorite)
    return favorite


def get_favorite(session: Session, user_id: int, catalog_id: int) -> Optional[Favorite]:
    """
    Get one favorite of a user by catalog ID.

    Args:
        session: Database session
        user_id: User ID
        catalog_id: TMDB identifier

    Returns:
        Favorite object or None if not found
    """
    return session.query(Favorite).filter(
        Favorite.user_id == user_id,
        Favorite.catalog_id == catalog_id,
    ).first()


def get_favorites(session: Session, user_id: int) -> List[Favorite]:
    """All favorites of a user, most recently added first."""
    return (
        session.query(Favorite)
        .filter(Favorite.user_id == user_id)
        .order_by(Favorite.created_at.desc(), Favorite.favorite_id.desc())
        .all()
    )


def remove_favorite(session: Session, user_id: int, catalog_id: int) -> bool:
    """
    Remove a title from a user's favorites.

    Returns:
        True if removed, False if it was not a favorite
    """
    favorite = get_favorite(session, user_id, catalog_id)
    if favorite:
        session.delete(favorite)
        session.commit()
        return True
    return False


def get_favorite_count(session: Session, user_id: Optional[int] = None) -> int:
    """Count favorites, for one user or overall."""
    query = session.query(func.count(Favorite.favorite_id))
    if user_id is not None:
        query = query.filter(Favorite.user_id == user_id)
    return query.scalar()


def get_favorite_refs(session: Session, user_id: int) -> List[FavoriteRef]:
    """
    A user's favorites as lightweight references for the recommendation core.

    Args:
        session: Database session
        user_id: User ID

    Returns:
        List of FavoriteRef
    """
    return [
        FavoriteRef(catalog_id=f.catalog_id, media_kind=MediaKind(f.media_kind))
        for f in get_favorites(session, user_id)
    ]
