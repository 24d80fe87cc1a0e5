"""
FastAPI application entry point for the CineSuggest backend.

This module creates the FastAPI app instance and registers all routers.
"""

import logging
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware

from cinesuggest import __version__
from cinesuggest.config import settings
from cinesuggest.routes.health import router as health_router
from cinesuggest.routes.pages import router as pages_router
from cinesuggest.routes.recommendations import router as recommendations_router

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)

logger = logging.getLogger(__name__)


def _get_cors_origins() -> list[str]:
    """
    Get allowed CORS origins based on environment.

    - ENVIRONMENT=production: Uses CORS_ALLOWED_ORIGINS (none if unset)
    - any other environment: Allows all origins for local dev

    The bundled page is same-origin; CORS only matters for other web
    clients calling the JSON API.
    """
    if settings.is_production():
        origins = settings.CORS_ALLOWED_ORIGINS
        if origins:
            logger.info(f"CORS configured for production with {len(origins)} allowed origins")
        else:
            logger.warning(
                "CORS_ALLOWED_ORIGINS not set in production. "
                "No cross-origin web clients allowed."
            )
        return origins

    logger.info(f"CORS configured for {settings.ENVIRONMENT}: allowing all origins")
    return ["*"]


# Create FastAPI app
app = FastAPI(
    title="CineSuggest API",
    description="Movie recommendations from a list of movies you love",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc"
)


# Custom validation error handler to log detailed errors
@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Log validation errors and return them as a 422 JSON body."""
    details = public_errors(exc)
    logger.error(
        f"Validation error on {request.method} {request.url.path}: {details}"
    )

    return JSONResponse(
        status_code=422,
        content={
            "error": "validation_error",
            "details": details,
        }
    )


def public_errors(exc: RequestValidationError) -> list:
    """
    Errors without the rejected input or non-serializable context.

    The input is the user's own text and may be arbitrarily long.
    """
    return [
        {key: value for key, value in error.items() if key not in ("input", "ctx")}
        for error in exc.errors()
    ]


# Configure CORS with environment-based origins
app.add_middleware(
    CORSMiddleware,
    allow_origins=_get_cors_origins(),
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register routers
app.include_router(pages_router)
app.include_router(recommendations_router)
app.include_router(health_router)

logger.info("FastAPI app initialized successfully")
