#!/usr/bin/env python
"""
Database initialization script for ScreenScout.

Creates the users and favorites schema and, optionally, a demo account.

Usage:
    # Create tables (keeps existing data)
    python scripts/init_database.py

    # Drop and recreate everything
    python scripts/init_database.py --reset

    # Also create a demo user
    python scripts/init_database.py --demo-user demo --demo-password demo1234
"""

import sys
import argparse
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from app.api.security import hash_password
from app.database import init_database, verify_schema, crud
from app.database.connection import DEFAULT_DB_PATH


def print_section(title):
    """Print a formatted section header."""
    print(f"\n{'='*60}")
    print(f"{title}")
    print('='*60)


def create_demo_user(db_manager, username, password, verbose=True):
    """
    Create a demo account unless it already exists.

    Returns:
        The user's id
    """
    with db_manager.session_scope() as session:
        existing = crud.get_user_by_username(session, username)
        if existing:
            if verbose:
                print(f"Demo user '{username}' already exists (id={existing.user_id})")
            return existing.user_id
        user = crud.create_user(session, username=username, password_hash=hash_password(password))
        if verbose:
            print(f"Created demo user '{username}' (id={user.user_id})")
        return user.user_id


def main():
    """Main entry point for database initialization."""
    parser = argparse.ArgumentParser(description="Initialize the ScreenScout database")
    parser.add_argument(
        '--reset',
        action='store_true',
        help='Drop and recreate database tables (WARNING: deletes all data)'
    )
    parser.add_argument(
        '--db-path',
        type=str,
        default=DEFAULT_DB_PATH,
        help=f'Path to SQLite database file (default: {DEFAULT_DB_PATH})'
    )
    parser.add_argument('--demo-user', type=str, help='Username of a demo account to create')
    parser.add_argument('--demo-password', type=str, default='demo1234', help='Password for the demo account')
    parser.add_argument('--quiet', action='store_true', help='Suppress verbose output')

    args = parser.parse_args()
    verbose = not args.quiet

    if verbose:
        print_section("ScreenScout Database Initialization")
        print(f"Database: {args.db_path}")
        print(f"Mode: {'Reset' if args.reset else 'Keep existing'}")

    try:
        db_manager = init_database(db_path=args.db_path, reset=args.reset)
        if args.demo_user:
            create_demo_user(db_manager, args.demo_user, args.demo_password, verbose=verbose)
        success = verify_schema(db_manager)
    except Exception as e:
        print(f"\n[ERROR] Initialization failed: {e}")
        sys.exit(1)

    if verbose:
        print("\n[SUCCESS] Database ready." if success else "\n[ERROR] Schema verification failed.")
    sys.exit(0 if success else 1)


if __name__ == "__main__":
    main()
