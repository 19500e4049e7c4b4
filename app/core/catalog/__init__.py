"""
Catalog access package.

Wraps the external movie/TV catalog (TMDB) behind an async client that
returns immutable CatalogItem records.
"""

from app.core.catalog.models import CatalogItem, MediaKind, GENRE_NAMES_BY_ID
from app.core.catalog.client import (
    CatalogClient,
    CatalogError,
    CatalogNotFound,
    CatalogUnavailable,
    clamp_page,
)

__all__ = [
    'CatalogItem',
    'MediaKind',
    'GENRE_NAMES_BY_ID',
    'CatalogClient',
    'CatalogError',
    'CatalogNotFound',
    'CatalogUnavailable',
    'clamp_page',
]
