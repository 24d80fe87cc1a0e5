"""
Request State transitions.

The Request State (IdleState / LoadingState / SucceededState / FailedState,
see cinesuggest.schemas.recommendations) only ever changes through
``transition(state, event)``, a pure function returning the next immutable
snapshot.

    Idle      --SubmitRejected-->   Failed
    any       --RequestStarted-->   Loading(request_id)
    Loading   --RequestSucceeded--> Succeeded
    Loading   --RequestFailed-->    Failed
    Loading   --RequestSettled-->   Idle   (attempt ended without an outcome)

Completion events carry the id of the request they belong to and are
ignored unless the state is Loading for that same id, so responses of a
superseded request never overwrite a newer one.
"""

from dataclasses import dataclass
from typing import Tuple, Union

from cinesuggest.schemas.recommendations import (
    FailedState,
    IdleState,
    LoadingState,
    MovieRecommendation,
    RequestState,
    SucceededState,
)


@dataclass(frozen=True)
class SubmitRejected:
    """Input failed local validation; no request was made."""
    message: str


@dataclass(frozen=True)
class RequestStarted:
    request_id: int


@dataclass(frozen=True)
class RequestSucceeded:
    request_id: int
    recommendations: Tuple[MovieRecommendation, ...]


@dataclass(frozen=True)
class RequestFailed:
    request_id: int
    message: str


@dataclass(frozen=True)
class RequestSettled:
    """Emitted on every exit path of a request attempt."""
    request_id: int


FlowEvent = Union[
    SubmitRejected,
    RequestStarted,
    RequestSucceeded,
    RequestFailed,
    RequestSettled,
]


def is_current_request(state: RequestState, request_id: int) -> bool:
    """True when ``state`` is Loading for ``request_id``."""
    return isinstance(state, LoadingState) and state.request_id == request_id


def transition(state: RequestState, event: FlowEvent) -> RequestState:
    """
    Compute the next Request State.

    Returns ``state`` itself (same object) when the event does not apply,
    e.g. a late response for a request that is no longer current.
    """
    if isinstance(event, SubmitRejected):
        return FailedState(error=event.message)

    if isinstance(event, RequestStarted):
        # Any previous result or error is dropped here
        return LoadingState(request_id=event.request_id)

    if not isinstance(event, (RequestSucceeded, RequestFailed, RequestSettled)):
        raise TypeError(f"Unknown flow event: {event!r}")

    if not is_current_request(state, event.request_id):
        return state

    if isinstance(event, RequestSucceeded):
        return SucceededState(recommendations=list(event.recommendations))

    if isinstance(event, RequestFailed):
        return FailedState(error=event.message)

    return IdleState()
