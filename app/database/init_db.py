"""
Database initialization and schema verification.
"""

import logging

from sqlalchemy import inspect

from app.database.connection import DEFAULT_DB_PATH, DatabaseManager, get_db_manager

logger = logging.getLogger(__name__)

EXPECTED_TABLES = {'users', 'favorites'}


def init_database(db_path: str = DEFAULT_DB_PATH, reset: bool = False) -> DatabaseManager:
    """
    Initialize the database and create all tables.

    Args:
        db_path: Path to SQLite database file
        reset: If True, drop existing tables before creating new ones

    Returns:
        DatabaseManager instance
    """
    db_manager = get_db_manager(db_path=db_path)

    if reset:
        logger.info("Resetting database (dropping all tables)...")
        db_manager.reset_database()
    else:
        logger.info("Creating database tables...")
        db_manager.create_tables()

    logger.info(f"Database ready at {db_manager.database_url}")
    return db_manager


def verify_schema(db_manager: DatabaseManager) -> bool:
    """
    Verify that all tables exist in the database.

    Args:
        db_manager: DatabaseManager instance

    Returns:
        True if all tables exist, False otherwise
    """
    existing_tables = set(inspect(db_manager.engine).get_table_names())
    missing_tables = EXPECTED_TABLES - existing_tables

    if missing_tables:
        logger.error(f"Missing tables: {sorted(missing_tables)}")
        return False

    logger.info(f"All tables exist: {sorted(existing_tables)}")
    return True
