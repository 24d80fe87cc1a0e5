"""
HTML page routes.

The single page is rendered on the server from the Request State of a
fresh flow: ``GET /`` shows the idle page, ``POST /`` submits the form and
shows the settled result. Nothing is kept between requests.
"""

import logging

from fastapi import APIRouter, Depends, Form
from fastapi.responses import HTMLResponse

from cinesuggest.config import settings
from cinesuggest.dependencies import get_recommendation_provider
from cinesuggest.flow import RecommendationFlow, RecommendationProvider
from cinesuggest.schemas.recommendations import FailedState, RequestState
from cinesuggest.views import build_page_view, render_page

logger = logging.getLogger(__name__)

router = APIRouter(tags=["pages"])


@router.get("/", response_class=HTMLResponse, summary="Recommendation page")
async def index() -> HTMLResponse:
    """Render the page with an empty form."""
    flow = RecommendationFlow()
    return HTMLResponse(content=_render(flow.state))


@router.post("/", response_class=HTMLResponse, summary="Submit the recommendation form")
async def submit_form(
    movies: str = Form(""),
    provider: RecommendationProvider = Depends(get_recommendation_provider)
) -> HTMLResponse:
    """Run one request cycle and render its outcome; the textarea keeps the text."""
    if len(movies) > settings.MAX_INPUT_LENGTH:
        # Browsers get a page, not the JSON 422 of the API
        logger.info(f"Form input rejected: {len(movies)} characters")
        state = FailedState(error=too_long_message())
        return HTMLResponse(content=_render(state, user_input=""))

    flow = RecommendationFlow(provider=provider)
    state = await flow.submit(movies)

    logger.info(f"Rendering page with status={state.status}")
    return HTMLResponse(content=_render(state, user_input=flow.user_input))


def too_long_message() -> str:
    return f"Please keep your list under {settings.MAX_INPUT_LENGTH} characters."


def _render(state: RequestState, user_input: str = "") -> str:
    return render_page(
        build_page_view(state),
        user_input=user_input,
        max_length=settings.MAX_INPUT_LENGTH,
    )
