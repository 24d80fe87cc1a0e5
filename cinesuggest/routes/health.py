"""
Liveness route.

``GET /health`` answers without touching Gemini, so it stays green while
the provider is down or the API key is missing.
"""

import logging

from fastapi import APIRouter

from cinesuggest import __version__
from cinesuggest.schemas.health import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["system"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Liveness check",
    status_code=200,
)
async def health_check() -> HealthResponse:
    logger.debug("Health check")
    return HealthResponse(status="ok", version=__version__)
