"""
Database module for ScreenScout.

This module provides database models, connection management, and CRUD operations
for the users and favorites store, using SQLAlchemy ORM on SQLite.
"""

from app.database.models import Base, User, Favorite
from app.database.connection import DatabaseManager, get_db_manager, reset_db_manager
from app.database.init_db import init_database, verify_schema
from app.database import crud

__all__ = [
    # Models
    'Base',
    'User',
    'Favorite',
    # Connection
    'DatabaseManager',
    'get_db_manager',
    'reset_db_manager',
    # Initialization
    'init_database',
    'verify_schema',
    # CRUD module
    'crud',
]
