"""
Recommendation request flow: input collection, dispatch and Request State.
"""

from .dispatcher import (
    EMPTY_INPUT_MESSAGE,
    FAILURE_PREFIX,
    UNKNOWN_ERROR_MESSAGE,
    RecommendationFlow,
    RecommendationProvider,
    format_failure_message,
)
from .state import transition

__all__ = [
    "EMPTY_INPUT_MESSAGE",
    "FAILURE_PREFIX",
    "UNKNOWN_ERROR_MESSAGE",
    "RecommendationFlow",
    "RecommendationProvider",
    "format_failure_message",
    "transition",
]
