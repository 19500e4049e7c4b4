"""
Data model and errors for the recommendation pipeline.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from app.core.catalog.models import CatalogItem, MediaKind


class RecommendationError(Exception):
    """Base error for the recommendation pipeline."""
    pass


class InvalidRequest(RecommendationError):
    """Caller input failed validation."""
    pass


class InferenceServiceFailure(RecommendationError):
    """Inference service unreachable, rejected the call, or answered garbage."""
    pass


class Provenance(str, Enum):
    """Which path produced a recommendation."""

    PRIMARY_GENERATIVE = "primary-generative"
    SECONDARY_GENERATIVE = "secondary-generative"
    KEYWORD = "keyword"
    SIMILAR = "similar"
    TRENDING = "trending"

    @property
    def is_fallback(self) -> bool:
        return self in (Provenance.SECONDARY_GENERATIVE, Provenance.KEYWORD)


@dataclass(frozen=True)
class FavoriteRef:
    """Weak reference to a title in the caller's favorites."""

    catalog_id: int
    media_kind: MediaKind


@dataclass(frozen=True)
class RecommendationRequest:
    description: str
    caller_favorites: Tuple[FavoriteRef, ...] = ()


@dataclass(frozen=True)
class RecommendationCandidate:
    """A title suggested by a generative service, before catalog resolution."""

    suggested_title: str
    suggested_media_kind: MediaKind
    short_description: str = ""
    justification: str = ""


@dataclass(frozen=True)
class RecommendationResult:
    """Normalized recommendation, the single shape every path converges to."""

    catalog_id: int
    title: str
    overview: str
    media_kind: MediaKind
    justification: str
    poster_ref: Optional[str]
    provenance: Provenance
    is_fallback: bool

    @classmethod
    def from_item(
        cls,
        item: CatalogItem,
        justification: str,
        provenance: Provenance,
        overview: Optional[str] = None,
    ) -> "RecommendationResult":
        return cls(
            catalog_id=item.id,
            title=item.title,
            overview=item.overview if overview is None else overview,
            media_kind=item.media_kind,
            justification=justification,
            poster_ref=item.poster_ref,
            provenance=provenance,
            is_fallback=provenance.is_fallback,
        )


@dataclass(frozen=True)
class ScoredCandidate:
    item: CatalogItem
    score: int = 0


@dataclass(frozen=True)
class RecommendationOutcome:
    """What the orchestrator hands back for a description request."""

    results: Tuple[RecommendationResult, ...]
    used_fallback: bool
    fallback_stage: Optional[str] = None
