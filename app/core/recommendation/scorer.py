"""
Keyword-based recommendation, the last stage of the fallback chain.

Reads region, mood and genre signals out of the description, acquires a
candidate pool through catalog searches, and ranks it with a fixed
additive scoring scheme.
"""

import logging
from dataclasses import dataclass
from typing import Iterator, List, Optional, Sequence, Tuple

from app.core.catalog import CatalogClient, CatalogItem, CatalogNotFound, CatalogUnavailable
from app.core.recommendation.lexicon import (
    BOLLYWOOD,
    BOLLYWOOD_PERSONALITIES,
    GENRE_VOCABULARY,
    detect_moods,
    detect_region,
    mood_search_tokens,
)
from app.core.recommendation.models import (
    Provenance,
    RecommendationResult,
    ScoredCandidate,
)

logger = logging.getLogger(__name__)

TOP_N = 5
MIN_TOKEN_LENGTH = 4
QUALITY_MIN_RATING = 7.0
QUALITY_MIN_POPULARITY = 50.0

TITLE_MATCH_POINTS = 3
OVERVIEW_MATCH_POINTS = 2
GENRE_MATCH_POINTS = 2
GENRE_KEYWORD_POINTS = 4
REGION_TITLE_POINTS = 5
REGION_OVERVIEW_POINTS = 3
PERSONALITY_TITLE_POINTS = 4
PERSONALITY_OVERVIEW_POINTS = 3


@dataclass(frozen=True)
class DescriptionSignals:
    """
    What the scorer reads out of one description.

    Attributes:
        text: Lower-cased description
        region: Detected region token, if any
        moods: Detected mood phrases
        keywords: Tokens longer than three characters, region token removed
        genre_keywords: Tokens that belong to the genre vocabulary
    """

    text: str
    region: Optional[str]
    moods: Tuple[str, ...]
    keywords: Tuple[str, ...]
    genre_keywords: Tuple[str, ...]


def analyze_description(description: str) -> DescriptionSignals:
    text = description.lower()
    region = detect_region(text)

    tokens = [word for word in text.split() if len(word) >= MIN_TOKEN_LENGTH]
    genre_keywords = tuple(word for word in tokens if word in GENRE_VOCABULARY)
    if region and region in tokens:
        tokens.remove(region)

    return DescriptionSignals(
        text=text,
        region=region,
        moods=detect_moods(text),
        keywords=tuple(tokens),
        genre_keywords=genre_keywords,
    )


def score_item(item: CatalogItem, signals: DescriptionSignals) -> int:
    """Additive keyword score for a single item."""
    title = item.title.lower()
    overview = item.overview.lower()
    genres = [name.lower() for name in item.genre_names]
    score = 0

    for keyword in signals.keywords:
        if keyword in title:
            score += TITLE_MATCH_POINTS
        if keyword in overview:
            score += OVERVIEW_MATCH_POINTS
        score += GENRE_MATCH_POINTS * sum(1 for genre in genres if keyword in genre)

    for genre in genres:
        for genre_keyword in signals.genre_keywords:
            if genre_keyword in genre:
                score += GENRE_KEYWORD_POINTS

    region = signals.region
    if region:
        if region in title:
            score += REGION_TITLE_POINTS
        if region in overview:
            score += REGION_OVERVIEW_POINTS
        if region == BOLLYWOOD:
            for name in BOLLYWOOD_PERSONALITIES:
                if name in title:
                    score += PERSONALITY_TITLE_POINTS
                if name in overview:
                    score += PERSONALITY_OVERVIEW_POINTS

    return score


def score(description: str, candidates: Sequence[CatalogItem]) -> List[ScoredCandidate]:
    """
    Score and rank candidates against a description.

    Pure function of its inputs. Ties keep input order, and an all-zero
    pool still yields the first five items.

    Args:
        description: Free-text description
        candidates: Candidate pool

    Returns:
        At most five ScoredCandidate, highest score first
    """
    signals = analyze_description(description)
    scored = [ScoredCandidate(item=item, score=score_item(item, signals)) for item in candidates]
    ranked = sorted(scored, key=lambda c: c.score, reverse=True)
    return ranked[:TOP_N]


def apply_quality_filter(candidates: Sequence[CatalogItem]) -> List[CatalogItem]:
    """Keep well-rated or popular items; the whole pool if none qualify."""
    filtered = [
        item for item in candidates
        if item.rating >= QUALITY_MIN_RATING or item.popularity > QUALITY_MIN_POPULARITY
    ]
    if not filtered:
        logger.debug("Quality filter emptied the pool, scoring unfiltered candidates")
        return list(candidates)
    return filtered


def keyword_justification(description: str, region: Optional[str]) -> str:
    reason = f'Based on your search for "{description}"'
    if region:
        reason += f' and region "{region}"'
    return reason


class KeywordRecommender:
    """
    Keyword scorer with its own candidate acquisition.

    Usage:
        recommender = KeywordRecommender(catalog)
        results = await recommender.recommend("korean revenge thriller")
    """

    def __init__(self, catalog: CatalogClient):
        self.catalog = catalog

    @staticmethod
    def candidate_queries(description: str, signals: DescriptionSignals) -> Iterator[str]:
        """
        Search queries in the order they are tried.

        Region-boosted query first, then the Bollywood personality and
        genre queries, then the raw description, then one query per
        genre keyword and mood search token.
        """
        region = signals.region
        if region:
            yield f"{region} {description}"
            if region == BOLLYWOOD:
                for name in BOLLYWOOD_PERSONALITIES:
                    if signals.genre_keywords:
                        for genre in signals.genre_keywords:
                            yield f"{name} {genre}"
                    else:
                        yield name
                if signals.genre_keywords:
                    yield f"{BOLLYWOOD} {signals.genre_keywords[0]}"
                else:
                    yield BOLLYWOOD

        yield description

        seen = {description}
        for term in list(signals.genre_keywords) + mood_search_tokens(signals.moods):
            if term not in seen:
                seen.add(term)
                yield term

    async def acquire(self, description: str, signals: DescriptionSignals) -> List[CatalogItem]:
        """
        Run searches in order until one returns items.

        Raises:
            CatalogUnavailable: If every search attempted failed to reach the catalog
        """
        attempted = 0
        unavailable = 0
        for query in self.candidate_queries(description, signals):
            attempted += 1
            try:
                items = await self.catalog.search(query)
            except CatalogUnavailable as e:
                unavailable += 1
                logger.warning(f"Keyword stage search '{query}' failed: {e}")
                continue
            except CatalogNotFound as e:
                logger.warning(f"Keyword stage search '{query}' not found: {e}")
                continue
            if items:
                logger.info(f"Keyword stage acquired {len(items)} candidates with '{query}'")
                return items

        if attempted and unavailable == attempted:
            raise CatalogUnavailable("Catalog unreachable for every keyword search")
        return []

    async def recommend(self, description: str) -> List[RecommendationResult]:
        """
        Keyword recommendations for a description.

        Args:
            description: Non-empty free-text description

        Returns:
            Up to five results with keyword provenance; empty when the
            catalog returned nothing for every query
        """
        signals = analyze_description(description)
        logger.info(
            f"Keyword recommendation for '{description}'"
            + (f" (region: {signals.region})" if signals.region else "")
        )

        pool = await self.acquire(description, signals)
        if not pool:
            logger.info(f"No keyword candidates for '{description}'")
            return []

        ranked = score(description, apply_quality_filter(pool))
        justification = keyword_justification(description, signals.region)
        return [
            RecommendationResult.from_item(c.item, justification, Provenance.KEYWORD)
            for c in ranked
        ]
