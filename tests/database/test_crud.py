"""
Unit tests for database CRUD operations.

Tests for User and Favorite CRUD operations using an in-memory
SQLite database for fast, isolated testing.
"""

import pytest
from sqlalchemy import create_engine
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import sessionmaker

from app.core.catalog import MediaKind
from app.core.recommendation import FavoriteRef
from app.database.connection import DatabaseManager
from app.database.init_db import verify_schema
from app.database.models import Base, Favorite
from app.database import crud


@pytest.fixture
def engine():
    """Create an in-memory SQLite engine for testing."""
    engine = create_engine("sqlite:///:memory:")
    Base.metadata.create_all(engine)
    return engine


@pytest.fixture
def session(engine):
    """Create a new database session for testing."""
    Session = sessionmaker(bind=engine)
    session = Session()
    yield session
    session.close()


@pytest.fixture
def user(session):
    return crud.create_user(session, "cinephile", "hashed-secret")


class TestUserCRUD:
    """Tests for User CRUD operations."""

    def test_create_user(self, session):
        """Test creating a new user."""
        user = crud.create_user(session, "moviebuff", "hashed")

        assert user.user_id is not None
        assert user.username == "moviebuff"
        assert user.password_hash == "hashed"
        assert user.created_at is not None

    def test_create_user_trims_username(self, session):
        user = crud.create_user(session, "  spacey  ", "hashed")
        assert user.username == "spacey"

    @pytest.mark.parametrize("username", ["ab", "   ", "", "x" * 51])
    def test_create_user_invalid_length(self, session, username):
        """Test that usernames outside 3-50 characters are rejected."""
        with pytest.raises(ValueError):
            crud.create_user(session, username, "hashed")

    def test_create_user_duplicate(self, session, user):
        """Test that a taken username raises ValueError."""
        with pytest.raises(ValueError, match="already taken"):
            crud.create_user(session, "cinephile", "other")

    def test_get_user(self, session, user):
        """Test retrieving a user by ID and by username."""
        assert crud.get_user(session, user.user_id).username == "cinephile"
        assert crud.get_user_by_username(session, "cinephile").user_id == user.user_id

    def test_get_user_not_found(self, session):
        """Test that getting a non-existent user returns None."""
        assert crud.get_user(session, 999) is None
        assert crud.get_user_by_username(session, "nobody") is None

    def test_get_user_count(self, session):
        assert crud.get_user_count(session) == 0
        crud.create_user(session, "first", "h")
        crud.create_user(session, "second", "h")
        assert crud.get_user_count(session) == 2

    def test_delete_user_removes_favorites(self, session, user):
        """Test that deleting a user cascades to their favorites."""
        crud.add_favorite(session, user.user_id, 27205, "movie", title="Inception")

        assert crud.delete_user(session, user.user_id) is True
        assert crud.get_user(session, user.user_id) is None
        assert session.query(Favorite).count() == 0

    def test_delete_user_not_found(self, session):
        assert crud.delete_user(session, 999) is False


class TestFavoriteCRUD:
    """Tests for Favorite CRUD operations."""

    def test_add_favorite(self, session, user):
        """Test adding a favorite with cached display data."""
        favorite = crud.add_favorite(
            session, user.user_id, 27205, "movie", title="Inception", poster_ref="/inception.jpg"
        )

        assert favorite.favorite_id is not None
        assert favorite.catalog_id == 27205
        assert favorite.media_kind == "movie"
        assert favorite.title == "Inception"
        assert favorite.poster_ref == "/inception.jpg"

    def test_add_favorite_accepts_tv_alias(self, session, user):
        favorite = crud.add_favorite(session, user.user_id, 1396, "tv")
        assert favorite.media_kind == "series"

    def test_add_favorite_invalid_kind(self, session, user):
        with pytest.raises(ValueError):
            crud.add_favorite(session, user.user_id, 1, "podcast")

    def test_add_favorite_duplicate(self, session, user):
        """Test that a title can only be favorited once per user."""
        crud.add_favorite(session, user.user_id, 27205, "movie")
        with pytest.raises(ValueError, match="Already in favorites"):
            crud.add_favorite(session, user.user_id, 27205, "movie")

    def test_same_title_for_different_users(self, session, user):
        other = crud.create_user(session, "someone", "h")
        crud.add_favorite(session, user.user_id, 27205, "movie")
        crud.add_favorite(session, other.user_id, 27205, "movie")
        assert crud.get_favorite_count(session) == 2

    def test_unique_constraint_enforced_by_schema(self, session, user):
        """Test the (user, catalog item) uniqueness at the database level."""
        session.add(Favorite(user_id=user.user_id, catalog_id=5, media_kind="movie"))
        session.add(Favorite(user_id=user.user_id, catalog_id=5, media_kind="movie"))
        with pytest.raises(IntegrityError):
            session.commit()
        session.rollback()

    def test_get_favorites_newest_first(self, session, user):
        """Test that favorites are listed most recently added first."""
        for catalog_id in (1, 2, 3):
            crud.add_favorite(session, user.user_id, catalog_id, "movie")

        favorites = crud.get_favorites(session, user.user_id)
        assert [f.catalog_id for f in favorites] == [3, 2, 1]

    def test_get_favorites_scoped_to_user(self, session, user):
        other = crud.create_user(session, "someone", "h")
        crud.add_favorite(session, other.user_id, 1, "movie")
        assert crud.get_favorites(session, user.user_id) == []

    def test_remove_favorite(self, session, user):
        crud.add_favorite(session, user.user_id, 27205, "movie")

        assert crud.remove_favorite(session, user.user_id, 27205) is True
        assert crud.get_favorite(session, user.user_id, 27205) is None
        assert crud.remove_favorite(session, user.user_id, 27205) is False

    def test_get_favorite_count(self, session, user):
        other = crud.create_user(session, "someone", "h")
        crud.add_favorite(session, user.user_id, 1, "movie")
        crud.add_favorite(session, user.user_id, 2, "series")
        crud.add_favorite(session, other.user_id, 3, "movie")

        assert crud.get_favorite_count(session) == 3
        assert crud.get_favorite_count(session, user.user_id) == 2

    def test_get_favorite_refs(self, session, user):
        """Test the lightweight references handed to the recommendation core."""
        crud.add_favorite(session, user.user_id, 27205, "movie")
        crud.add_favorite(session, user.user_id, 1396, "tv")

        refs = crud.get_favorite_refs(session, user.user_id)
        assert refs == [
            FavoriteRef(1396, MediaKind.SERIES),
            FavoriteRef(27205, MediaKind.MOVIE),
        ]


class TestSchema:
    """Tests for schema creation and verification."""

    def test_verify_schema(self):
        manager = DatabaseManager(db_path=":memory:")
        assert verify_schema(manager) is False
        manager.create_tables()
        assert verify_schema(manager) is True
        manager.close()

    def test_reset_database_clears_rows(self):
        manager = DatabaseManager(db_path=":memory:")
        manager.create_tables()
        with manager.session_scope() as session:
            crud.create_user(session, "cinephile", "h")

        manager.reset_database()

        with manager.session_scope() as session:
            assert crud.get_user_count(session) == 0
        manager.close()
