"""
Movie Recommendation - Single-shot LLM Architecture

This module contains the prompt templates for the Gemini-based movie
recommendation call.

The service layer is in:
- cinesuggest/services/recommendation_service.py

Prompt templates are in:
- cinesuggest/agents/recommendation/prompts.py
"""

from cinesuggest.agents.recommendation.prompts import (
    MOVIE_RECOMMENDATION_SYSTEM_PROMPT,
    build_movie_recommendation_prompt,
)

__all__ = [
    "MOVIE_RECOMMENDATION_SYSTEM_PROMPT",
    "build_movie_recommendation_prompt",
]
