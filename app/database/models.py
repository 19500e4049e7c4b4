"""
SQLAlchemy ORM models for the ScreenScout database.

This module defines the User and Favorite tables. Favorites hold weak
references into the external catalog (TMDB id + media kind) plus a
cached title and poster for display.
"""

from datetime import datetime
from typing import List
from sqlalchemy import (
    Integer, String, Text, ForeignKey,
    CheckConstraint, UniqueConstraint, Index, TIMESTAMP
)
from sqlalchemy.orm import DeclarativeBase, relationship, Mapped, mapped_column
from sqlalchemy.sql import func


MEDIA_KINDS = ('movie', 'series')


class Base(DeclarativeBase):
    """Base class for all ORM models."""
    pass


class User(Base):
    """
    User account.

    Attributes:
        user_id: Primary key, auto-incremented
        username: Unique login name (3-50 characters)
        password_hash: Werkzeug password hash
        created_at: Timestamp when record was created
    """
    __tablename__ = 'users'

    user_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    username: Mapped[str] = mapped_column(String(50), nullable=False, unique=True)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        TIMESTAMP,
        nullable=False,
        server_default=func.current_timestamp()
    )

    # Relationships
    favorites: Mapped[List["Favorite"]] = relationship(
        "Favorite",
        back_populates="user",
        cascade="all, delete-orphan"
    )

    __table_args__ = (
        CheckConstraint("length(username) >= 3", name='check_username_length'),
    )

    def __repr__(self) -> str:
        return f"<User(user_id={self.user_id}, username='{self.username}')>"


class Favorite(Base):
    """
    A catalog title saved by a user.

    Attributes:
        favorite_id: Primary key, auto-incremented
        user_id: Foreign key to users table
        catalog_id: TMDB identifier of the title
        media_kind: 'movie' or 'series'
        title: Cached display title (optional)
        poster_ref: Cached TMDB poster path (optional)
        created_at: Timestamp when the favorite was added
    """
    __tablename__ = 'favorites'

    favorite_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey('users.user_id', ondelete='CASCADE'),
        nullable=False
    )
    catalog_id: Mapped[int] = mapped_column(Integer, nullable=False)
    media_kind: Mapped[str] = mapped_column(String(10), nullable=False)
    title: Mapped[str] = mapped_column(Text, nullable=True)
    poster_ref: Mapped[str] = mapped_column(String(255), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        TIMESTAMP,
        nullable=False,
        server_default=func.current_timestamp()
    )

    # Relationships
    user: Mapped["User"] = relationship("User", back_populates="favorites")

    # Constraints and indexes
    __table_args__ = (
        CheckConstraint("media_kind IN ('movie', 'series')", name='check_media_kind'),
        UniqueConstraint('user_id', 'catalog_id', name='unique_user_catalog_item'),
        Index('idx_favorites_user', 'user_id'),
        Index('idx_favorites_created', 'created_at'),
    )

    def __repr__(self) -> str:
        return (
            f"<Favorite(favorite_id={self.favorite_id}, user_id={self.user_id}, "
            f"catalog_id={self.catalog_id}, media_kind='{self.media_kind}')>"
        )
