#!/usr/bin/env python3
"""
Recommendation Flow Test Script

Runs one recommendation request against the live Gemini provider from the
terminal, printing every state the flow goes through.

Usage:
    python scripts/try_recommendations.py
    python scripts/try_recommendations.py --movies "Parasite, Inception"
    python scripts/try_recommendations.py --movies "Amelie" --json
"""

import argparse
import asyncio
import logging
import sys

from cinesuggest.flow import RecommendationFlow
from cinesuggest.schemas.recommendations import (
    FailedState,
    RequestState,
    SucceededState,
)

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def print_state_change(state: RequestState) -> None:
    print(f"→ {state.status}")


def print_result(state: RequestState) -> None:
    """Print the settled state in a human readable form."""
    print()
    print("=" * 60)
    if isinstance(state, SucceededState):
        print(f"✅ {len(state.recommendations)} recommendations")
        print("=" * 60)
        for i, movie in enumerate(state.recommendations, 1):
            meta = ", ".join(str(v) for v in (movie.year, movie.country, movie.genre) if v)
            print(f"\n{i}. {movie.title}" + (f" ({meta})" if meta else ""))
            if movie.description:
                print(f"   {movie.description}")
            if movie.reason:
                print(f"   Why: {movie.reason}")
    elif isinstance(state, FailedState):
        print(f"❌ {state.error}")
        print("=" * 60)
    else:
        print(f"Flow ended in state {state.status}")


async def run(movies: str, as_json: bool) -> int:
    flow = RecommendationFlow(on_change=None if as_json else print_state_change)
    state = await flow.submit(movies)

    if as_json:
        print(state.model_dump_json(indent=2))
    else:
        print_result(state)

    return 0 if isinstance(state, SucceededState) else 1


def main() -> int:
    parser = argparse.ArgumentParser(
        description="Try the movie recommendation flow locally",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python scripts/try_recommendations.py --movies "Parasite, The Dark Knight, Spirited Away"
  python scripts/try_recommendations.py --movies "Amelie" --json
        """
    )
    parser.add_argument(
        "--movies",
        default="Parasite, The Dark Knight, Spirited Away, RRR",
        help="Movies you like (free text)"
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the final state as JSON"
    )
    args = parser.parse_args()

    return asyncio.run(run(args.movies, args.json))


if __name__ == "__main__":
    sys.exit(main())
