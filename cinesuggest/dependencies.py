"""
FastAPI dependencies shared by the routers.

Usage in routes:
    @router.post("/query")
    async def endpoint(provider: RecommendationProvider = Depends(get_recommendation_provider)):
        flow = RecommendationFlow(provider=provider)

Tests swap the provider with ``app.dependency_overrides``.
"""

from cinesuggest.flow import RecommendationProvider
from cinesuggest.services.recommendation_service import get_movie_recommendations


async def get_recommendation_provider() -> RecommendationProvider:
    """Return the recommendation provider used by request flows (Gemini)."""
    return get_movie_recommendations
