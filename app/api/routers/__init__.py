"""
API route handlers.
"""

from app.api.routers import users, favorites, catalog, recommendations, system

__all__ = ["users", "favorites", "catalog", "recommendations", "system"]
