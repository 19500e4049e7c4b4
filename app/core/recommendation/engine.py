"""
Recommendation orchestrator.

Runs the description pipeline (primary generative -> secondary generative
-> keyword) one stage at a time and returns exactly one stage's output.
Also serves the favorites-based algorithmic mode.
"""

import logging
import random
from dataclasses import replace
from typing import List, Optional, Sequence, Tuple, Union

from app.core.catalog import CatalogClient, CatalogError
from app.core.recommendation.generative import GenerativeRecommender
from app.core.recommendation.models import (
    FavoriteRef,
    InvalidRequest,
    Provenance,
    RecommendationOutcome,
    RecommendationRequest,
    RecommendationResult,
)
from app.core.recommendation.pipeline import (
    INITIAL_STAGE,
    STAGE_PROVENANCE,
    Stage,
    StageOutcome,
    fallback_label,
    next_stage,
)
from app.core.recommendation.scorer import KeywordRecommender

logger = logging.getLogger(__name__)

SIMILAR_JUSTIFICATION = "Similar to a title in your favorites"
TRENDING_JUSTIFICATION = "Trending this week"


class RecommendationOrchestrator:
    """
    Single entry point for recommendations.

    Usage:
        orchestrator = RecommendationOrchestrator(primary, secondary, keyword, catalog)
        outcome = await orchestrator.recommend(RecommendationRequest("cozy french comedy"))
    """

    def __init__(
        self,
        primary: GenerativeRecommender,
        secondary: GenerativeRecommender,
        keyword: KeywordRecommender,
        catalog: CatalogClient,
        rng: Optional[random.Random] = None,
    ):
        """
        Initialize the orchestrator.

        Args:
            primary: First generative adapter
            secondary: Drop-in generative replacement tried when primary yields nothing
            keyword: Keyword recommender, the last stage
            catalog: Catalog client for the algorithmic mode
            rng: Random source for picking the seed favorite (tests pin it)
        """
        self.primary = primary
        self.secondary = secondary
        self.keyword = keyword
        self.catalog = catalog
        self.rng = rng or random.Random()

    async def _run_generative(
        self, adapter: GenerativeRecommender, stage: Stage, description: str
    ) -> Tuple[List[RecommendationResult], StageOutcome]:
        try:
            results = await adapter.suggest(description)
        except Exception as e:
            logger.warning(f"Stage {stage.value} raised {type(e).__name__}: {e}")
            return [], StageOutcome.FAILED
        return results, StageOutcome.PRODUCED if results else StageOutcome.EMPTY

    async def _run_stage(
        self, stage: Stage, description: str
    ) -> Tuple[List[RecommendationResult], StageOutcome]:
        if stage is Stage.TRY_PRIMARY:
            return await self._run_generative(self.primary, stage, description)
        if stage is Stage.TRY_SECONDARY:
            return await self._run_generative(self.secondary, stage, description)
        # CatalogUnavailable from the keyword stage means nothing downstream
        # is reachable; it propagates to the caller.
        results = await self.keyword.recommend(description)
        return results, StageOutcome.PRODUCED if results else StageOutcome.EMPTY

    async def recommend(
        self, request: Union[RecommendationRequest, str]
    ) -> RecommendationOutcome:
        """
        Recommendations for a free-text description.

        Args:
            request: RecommendationRequest (or a bare description)

        Returns:
            RecommendationOutcome holding one stage's results; an empty
            result list when every stage came up empty

        Raises:
            InvalidRequest: If the description is empty after trimming
            CatalogUnavailable: If the keyword stage could not reach the catalog at all
        """
        if isinstance(request, str):
            request = RecommendationRequest(description=request)
        description = (request.description or "").strip()
        if not description:
            raise InvalidRequest("Description is required.")

        stage = INITIAL_STAGE
        while stage is not Stage.DONE:
            results, outcome = await self._run_stage(stage, description)
            if outcome is StageOutcome.PRODUCED:
                return self._outcome(stage, results)
            following = next_stage(stage, outcome)
            if following is not Stage.DONE:
                logger.info(
                    f"Stage {stage.value} {outcome.value} for '{description}', "
                    f"falling back to {following.value}"
                )
            stage = following

        logger.info(f"No recommendations from any stage for '{description}'")
        return RecommendationOutcome(
            results=(),
            used_fallback=True,
            fallback_stage=fallback_label(Stage.TRY_KEYWORD),
        )

    @staticmethod
    def _outcome(stage: Stage, results: Sequence[RecommendationResult]) -> RecommendationOutcome:
        provenance = STAGE_PROVENANCE[stage]
        tagged = tuple(
            result if result.provenance is provenance
            else replace(result, provenance=provenance, is_fallback=provenance.is_fallback)
            for result in results
        )
        label = fallback_label(stage)
        logger.info(f"Returning {len(tagged)} results from {provenance.value}")
        return RecommendationOutcome(
            results=tagged,
            used_fallback=label is not None,
            fallback_stage=label,
        )

    async def recommend_from_favorites(
        self, favorites: Sequence[FavoriteRef]
    ) -> List[RecommendationResult]:
        """
        Algorithmic recommendations from the caller's favorites.

        Picks one favorite at random and returns the catalog's similar
        titles, or this week's trending titles when there are no favorites.
        Catalog failures yield an empty list.
        """
        try:
            if not favorites:
                items = await self.catalog.get_trending()
                provenance = Provenance.TRENDING
                justification = TRENDING_JUSTIFICATION
            else:
                seed = self.rng.choice(list(favorites))
                logger.debug(f"Seeding similar titles from {seed.media_kind.value} {seed.catalog_id}")
                items = await self.catalog.get_similar(seed.catalog_id, seed.media_kind)
                provenance = Provenance.SIMILAR
                justification = SIMILAR_JUSTIFICATION
        except CatalogError as e:
            logger.warning(f"Favorites-based recommendations unavailable: {e}")
            return []

        return [
            RecommendationResult.from_item(item, justification, provenance)
            for item in items
        ]
