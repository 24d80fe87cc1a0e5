"""
FastAPI routes for the recommendation JSON API.

Endpoints:
- POST /recommendations/query: run one request cycle and return its final state
"""

import logging

from fastapi import APIRouter, Depends

from cinesuggest.dependencies import get_recommendation_provider
from cinesuggest.flow import RecommendationFlow, RecommendationProvider
from cinesuggest.schemas.recommendations import (
    RecommendationQueryRequest,
    RecommendationQueryResponse,
)
from cinesuggest.utils.logging import preview

logger = logging.getLogger(__name__)

# Create router
router = APIRouter(
    prefix="/recommendations",
    tags=["recommendations"]
)


# ============================================================================
# ENDPOINTS
# ============================================================================

@router.post(
    "/query",
    response_model=RecommendationQueryResponse,
    status_code=200,
    summary="Get movie recommendations",
    description="""
    Recommends movies based on a free-text list of movies the user likes.

    **Responses (always HTTP 200):**
    - SUCCEEDED: `recommendations` in the order the provider returned them
    - FAILED: `error` with a single-line user-facing message, e.g.
      "Please enter some movies you like." for blank input, or
      "Failed to get recommendations. <reason>" when the provider fails

    No automatic retry is performed; the client must submit again.
    """
)
async def query_recommendations_endpoint(
    request: RecommendationQueryRequest,
    provider: RecommendationProvider = Depends(get_recommendation_provider)
) -> RecommendationQueryResponse:
    """
    Recommendation query endpoint.

    - Parse/Validate: Pydantic RecommendationQueryRequest (length only)
    - Blank input: handled by the flow, no provider call
    - Call provider: exactly one call via the flow
    - Return the settled Request State
    """
    logger.info(f"POST /recommendations/query called, user_input='{preview(request.user_input)}'")

    flow = RecommendationFlow(provider=provider)
    state = await flow.submit(request.user_input)

    logger.info(f"Returning response with status={state.status}")
    return state
