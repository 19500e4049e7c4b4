"""
Recommendation core.

Description pipeline with a three-stage fallback chain (primary
generative, secondary generative, keyword scoring) and a favorites-based
algorithmic mode.
"""

from app.core.recommendation.models import (
    FavoriteRef,
    InferenceServiceFailure,
    InvalidRequest,
    Provenance,
    RecommendationCandidate,
    RecommendationError,
    RecommendationOutcome,
    RecommendationRequest,
    RecommendationResult,
    ScoredCandidate,
)
from app.core.recommendation.generative import (
    GenerativeRecommender,
    HuggingFaceRecommender,
    OpenAIRecommender,
)
from app.core.recommendation.scorer import KeywordRecommender
from app.core.recommendation.engine import RecommendationOrchestrator

__all__ = [
    'FavoriteRef',
    'InferenceServiceFailure',
    'InvalidRequest',
    'Provenance',
    'RecommendationCandidate',
    'RecommendationError',
    'RecommendationOutcome',
    'RecommendationRequest',
    'RecommendationResult',
    'ScoredCandidate',
    'GenerativeRecommender',
    'HuggingFaceRecommender',
    'OpenAIRecommender',
    'KeywordRecommender',
    'RecommendationOrchestrator',
]
