"""
Recommendation Service - Gemini movie recommendations

This service is the external recommendation provider of the request flow:
given the free text a user typed, it asks Google's Gemini model for movies
they might enjoy and returns them as MovieRecommendation records.

Architecture:
- Pattern: Single-shot LLM (one API call, no tools)
- Model: settings.GEMINI_MODEL (default Gemini 2.5 Flash)
- API: Google Gen AI Python SDK (google-genai), async client
- Output: JSON (response_mime_type + response_schema), parsed from text

Error contract:
- Misconfiguration and malformed responses raise RecommendationProviderError
  with a human-readable message
- SDK / network errors are NOT caught here; they propagate to the caller
  (the request flow turns every failure into a FAILED state)
"""

import json
import logging
import re
from typing import Any, List, Optional

from google import genai
from google.genai import types
from pydantic import BaseModel, ValidationError

from cinesuggest.agents.recommendation.prompts import (
    MOVIE_RECOMMENDATION_SYSTEM_PROMPT,
    build_movie_recommendation_prompt,
)
from cinesuggest.config import settings
from cinesuggest.schemas.recommendations import MovieRecommendation
from cinesuggest.utils.logging import preview

logger = logging.getLogger(__name__)

# Initialize Gemini client (lazy initialization)
_gemini_client = None


class RecommendationProviderError(Exception):
    """The recommendation provider could not produce a usable answer."""


# =============================================================================
# PYDANTIC MODELS FOR STRUCTURED OUTPUT
# =============================================================================

class MovieSchema(BaseModel):
    """Schema for a single movie in the Gemini response."""
    title: str
    year: Optional[int] = None
    country: Optional[str] = None
    genre: Optional[str] = None
    description: Optional[str] = None
    reason: Optional[str] = None


class MovieRecommendationsSchema(BaseModel):
    """Schema for the complete Gemini response."""
    recommendations: List[MovieSchema]


def _get_gemini_client():
    """
    Lazy initialization of Gemini client.
    Returns None when no API key is configured.
    """
    global _gemini_client

    if _gemini_client is not None:
        return _gemini_client

    if not settings.GOOGLE_API_KEY:
        logger.warning(
            "GOOGLE_API_KEY not configured. Recommendation service will not work. "
            "Please set GOOGLE_API_KEY in your .env file."
        )
        return None

    _gemini_client = genai.Client(
        api_key=settings.GOOGLE_API_KEY,
        http_options=types.HttpOptions(
            timeout=int(settings.PROVIDER_TIMEOUT_SECONDS * 1000)
        ),
    )
    logger.info("Gemini client initialized successfully for recommendations")
    return _gemini_client


def _extract_response_text(response) -> Optional[str]:
    """Get the text of the first candidate, falling back to response.text."""
    if not response.candidates or not response.candidates[0].content:
        return None

    # The response.text property can be None even when parts have text
    candidate = response.candidates[0]
    if candidate.content.parts:
        for part in candidate.content.parts:
            if getattr(part, "text", None):
                return part.text

    return response.text


def _extract_json_text(content: str) -> str:
    """
    Strip markdown fences and surrounding prose from a model answer.

    Also removes trailing commas before } or ], a common LLM mistake.
    """
    json_content = content.strip()

    block_match = re.search(r'```(?:json)?\s*([\s\S]*?)```', json_content, re.IGNORECASE)
    if block_match:
        json_content = block_match.group(1).strip()
    else:
        starts = [i for i in (json_content.find('{'), json_content.find('[')) if i >= 0]
        if starts:
            json_content = json_content[min(starts):]

    return re.sub(r',(\s*[}\]])', r'\1', json_content)


def _parse_recommendations(content: str) -> List[MovieRecommendation]:
    """
    Parse the model answer into MovieRecommendation records.

    Accepts either {"recommendations": [...]} or a bare JSON array. The list
    order is preserved; nothing is filtered or deduplicated.

    Raises:
        RecommendationProviderError: unparsable JSON or unexpected shape
    """
    try:
        data: Any = json.loads(_extract_json_text(content))
    except json.JSONDecodeError as e:
        logger.error(f"Failed to parse JSON response: {e}")
        logger.debug(f"Raw content: {content[:500]}")
        raise RecommendationProviderError(
            "The recommendation service returned a response that could not be read."
        ) from e

    items = data.get("recommendations") if isinstance(data, dict) else data
    if not isinstance(items, list):
        logger.error(f"Unexpected response shape: {type(data).__name__}")
        raise RecommendationProviderError(
            "The recommendation service returned an unexpected response format."
        )

    try:
        return [MovieRecommendation.model_validate(item) for item in items]
    except ValidationError as e:
        logger.error(f"Invalid recommendation record: {e.errors()}")
        raise RecommendationProviderError(
            "The recommendation service returned an unexpected response format."
        ) from e


async def get_movie_recommendations(user_input: str) -> List[MovieRecommendation]:
    """
    Ask Gemini for movies similar to the ones in user_input.

    This function:
    1. Builds the prompt with the user's text (unchanged)
    2. Makes exactly one async Gemini call with JSON output
    3. Parses the answer into MovieRecommendation records

    Args:
        user_input: Free-text list of movies the user likes

    Returns:
        Recommendations in the order the model returned them

    Raises:
        RecommendationProviderError: client not configured, empty or malformed answer
        Exception: any SDK / network error, unchanged
    """
    logger.info(f"get_movie_recommendations called, input='{preview(user_input)}'")

    client = _get_gemini_client()
    if client is None:
        raise RecommendationProviderError(
            "Recommendation service is not configured. Please set GOOGLE_API_KEY."
        )

    config = types.GenerateContentConfig(
        system_instruction=MOVIE_RECOMMENDATION_SYSTEM_PROMPT,
        temperature=settings.GEMINI_TEMPERATURE,
        response_mime_type="application/json",
        response_schema=MovieRecommendationsSchema,
    )

    logger.info(f"Calling Gemini API model={settings.GEMINI_MODEL}...")
    response = await client.aio.models.generate_content(
        model=settings.GEMINI_MODEL,
        contents=build_movie_recommendation_prompt(
            user_input, count=settings.RECOMMENDATION_COUNT
        ),
        config=config,
    )

    content = _extract_response_text(response)
    if not content:
        logger.error("Empty response from Gemini API")
        raise RecommendationProviderError(
            "The recommendation service returned an empty response."
        )

    recommendations = _parse_recommendations(content)
    logger.info(f"Returning {len(recommendations)} movie recommendations")
    return recommendations
