"""
Service layer for the CineSuggest backend.

Services talk to external collaborators (the Gemini recommendation provider)
and map their outputs into Pydantic models.
"""

from .recommendation_service import (
    RecommendationProviderError,
    get_movie_recommendations,
)

__all__ = [
    "RecommendationProviderError",
    "get_movie_recommendations",
]
