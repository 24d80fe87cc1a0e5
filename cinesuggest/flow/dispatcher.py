"""
Recommendation request flow.

RecommendationFlow owns the text the user typed (input collector) and the
current Request State, and turns a submission into exactly one provider call.

Every failure ends here: validation problems and provider errors both become
a FailedState with a user-facing message, and nothing is re-raised. The
attempt always leaves the LOADING state, whichever way it exits.

Overlapping submissions: each submission gets a new request id and the
latest one wins. A response that arrives for an older request is discarded.
"""

import logging
from typing import Awaitable, Callable, Optional, Sequence

from cinesuggest.flow.state import (
    FlowEvent,
    RequestFailed,
    RequestSettled,
    RequestStarted,
    RequestSucceeded,
    SubmitRejected,
    transition,
)
from cinesuggest.schemas.recommendations import (
    IdleState,
    LoadingState,
    MovieRecommendation,
    RequestState,
)
from cinesuggest.services.recommendation_service import get_movie_recommendations
from cinesuggest.utils.logging import preview

logger = logging.getLogger(__name__)

EMPTY_INPUT_MESSAGE = "Please enter some movies you like."
FAILURE_PREFIX = "Failed to get recommendations. "
UNKNOWN_ERROR_MESSAGE = "An unknown error occurred."

RecommendationProvider = Callable[[str], Awaitable[Sequence[MovieRecommendation]]]
StateListener = Callable[[RequestState], None]


def format_failure_message(error: BaseException) -> str:
    """
    Build the FAILED message for a provider error.

    >>> format_failure_message(TimeoutError("timeout"))
    'Failed to get recommendations. timeout'
    """
    detail = str(error)
    if not detail.strip():
        detail = UNKNOWN_ERROR_MESSAGE
    return FAILURE_PREFIX + detail


class RecommendationFlow:
    """
    One user's request/response cycle around the recommendation provider.

    Args:
        provider: async callable mapping the raw text to recommendations
            (defaults to the Gemini service)
        on_change: called with the new snapshot after every state change;
            exceptions it raises are logged and ignored
    """

    def __init__(
        self,
        provider: Optional[RecommendationProvider] = None,
        on_change: Optional[StateListener] = None,
    ):
        self._provider = provider or get_movie_recommendations
        self._on_change = on_change
        self._user_input = ""
        self._state: RequestState = IdleState()
        self._last_request_id = 0

    @property
    def user_input(self) -> str:
        return self._user_input

    @property
    def state(self) -> RequestState:
        return self._state

    @property
    def is_loading(self) -> bool:
        return isinstance(self._state, LoadingState)

    def update_input(self, text: str) -> None:
        """Replace the collected text verbatim."""
        self._user_input = text

    def _apply(self, event: FlowEvent) -> None:
        new_state = transition(self._state, event)
        if new_state is self._state:
            if isinstance(event, (RequestSucceeded, RequestFailed)):
                logger.info(f"Discarding stale response for request {event.request_id}")
            return

        self._state = new_state
        logger.debug(f"Flow state -> {new_state.status}")
        if self._on_change is not None:
            try:
                self._on_change(new_state)
            except Exception as e:
                # A broken listener must not stall the flow in LOADING
                logger.error(f"State listener failed on {new_state.status}: {e}", exc_info=True)

    async def submit(self, raw_text: Optional[str] = None) -> RequestState:
        """
        Submit the collected text (or ``raw_text``, which replaces it).

        Returns:
            The Request State once this attempt has finished. It is the
            outcome of this submission unless a newer one superseded it.
        """
        if raw_text is not None:
            self.update_input(raw_text)
        text = self._user_input

        self._last_request_id += 1
        request_id = self._last_request_id

        if not text.strip():
            logger.info("Submission rejected: empty input")
            self._apply(SubmitRejected(message=EMPTY_INPUT_MESSAGE))
            return self._state

        logger.info(f"Submitting request {request_id}, input='{preview(text)}'")
        self._apply(RequestStarted(request_id=request_id))

        try:
            recommendations = await self._provider(text)
            self._apply(RequestSucceeded(
                request_id=request_id,
                recommendations=tuple(recommendations),
            ))
        except Exception as e:
            logger.error(f"Recommendation request {request_id} failed: {e}", exc_info=True)
            self._apply(RequestFailed(
                request_id=request_id,
                message=format_failure_message(e),
            ))
        finally:
            self._apply(RequestSettled(request_id=request_id))

        return self._state
