#!/usr/bin/env python
"""
Run the description recommendation pipeline from the command line.

Uses the same environment configuration as the API (TMDB_API_KEY,
OPENAI_API_KEY, HUGGINGFACE_API_KEY, ...).

Usage:
    python scripts/recommend.py "a feel-good bollywood comedy"
    python scripts/recommend.py --favorites 550:movie 1396:series
"""

import sys
import asyncio
import argparse
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from app.api.dependencies import get_recommendation_orchestrator
from app.core.catalog import CatalogUnavailable, MediaKind
from app.core.recommendation import FavoriteRef, InvalidRequest
from app.utils.logging_config import configure_script_logging


def parse_favorite(value: str) -> FavoriteRef:
    """Parse '<catalog_id>:<movie|series>'."""
    catalog_id, _, kind = value.partition(":")
    media_kind = MediaKind.parse(kind or "movie")
    if not catalog_id.isdigit() or media_kind is None:
        raise argparse.ArgumentTypeError(f"expected <id>:<movie|series>, got '{value}'")
    return FavoriteRef(catalog_id=int(catalog_id), media_kind=media_kind)


def print_results(results):
    if not results:
        print("No matches.")
        return
    for i, r in enumerate(results, 1):
        print(f"{i}. {r.title} [{r.media_kind.value}, id={r.catalog_id}] ({r.provenance.value})")
        if r.justification:
            print(f"   why: {r.justification}")


async def run(args) -> int:
    orchestrator = get_recommendation_orchestrator()
    if args.favorites is not None:
        print_results(await orchestrator.recommend_from_favorites(args.favorites))
        return 0

    try:
        outcome = await orchestrator.recommend(" ".join(args.description))
    except InvalidRequest as e:
        print(f"[ERROR] {e}")
        return 2
    except CatalogUnavailable as e:
        print(f"[ERROR] Catalog unavailable: {e}")
        return 1

    if outcome.used_fallback:
        print(f"(fallback: {outcome.fallback_stage})")
    print_results(outcome.results)
    return 0


def main():
    parser = argparse.ArgumentParser(description="Get recommendations for a description")
    parser.add_argument('description', nargs='*', help='Free-text description')
    parser.add_argument(
        '--favorites',
        nargs='*',
        type=parse_favorite,
        help='Use the favorites mode with <id>:<movie|series> seeds (none = trending)'
    )
    parser.add_argument('--debug', action='store_true', help='Enable debug logging')
    args = parser.parse_args()

    configure_script_logging(debug=args.debug)
    sys.exit(asyncio.run(run(args)))


if __name__ == "__main__":
    main()
