"""
Pydantic schemas for the movie recommendation flow.

Contains:
- MovieRecommendation: one record returned by the provider
- RecommendationQueryRequest: body of POST /recommendations/query
- Request State snapshots (IDLE / LOADING / SUCCEEDED / FAILED), which are
  also the response models of the JSON endpoint
"""

from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from cinesuggest.config import settings

# ============================================================================
# RECOMMENDATION RECORD
# ============================================================================

class MovieRecommendation(BaseModel):
    """
    A single recommended movie, ready for card display.

    Only the title is required. The remaining fields are passed through to
    the UI as the provider returned them; unknown keys are kept as well.
    Duplicate titles are allowed.
    """
    model_config = ConfigDict(extra="allow", frozen=True)

    title: str = Field(
        ...,
        description="Movie title",
        min_length=1,
        examples=["Memento", "Oldboy"]
    )
    year: Optional[Union[int, str]] = Field(
        None,
        description="Release year",
        examples=[2000, "2003"]
    )
    country: Optional[str] = Field(
        None,
        description="Country of origin",
        examples=["South Korea"]
    )
    genre: Optional[str] = Field(
        None,
        description="Main genre(s)",
        examples=["Thriller, Mystery"]
    )
    description: Optional[str] = Field(
        None,
        description="Short synopsis",
    )
    reason: Optional[str] = Field(
        None,
        description="Why this movie matches the user's taste",
    )
    poster_url: Optional[str] = Field(
        None,
        description="Poster image reference, if the provider supplied one",
    )


# ============================================================================
# REQUEST MODELS
# ============================================================================

class RecommendationQueryRequest(BaseModel):
    """
    Request body for POST /recommendations/query.

    Emptiness is deliberately not enforced here: an empty or whitespace-only
    value produces a FAILED state with a user-facing message instead of a 422.
    """
    user_input: str = Field(
        ...,
        description="Free-text list of movies the user likes",
        max_length=settings.MAX_INPUT_LENGTH,
        examples=["Parasite, Inception", "Spirited Away, RRR, Amelie"]
    )


# ============================================================================
# REQUEST STATE SNAPSHOTS
# ============================================================================

class IdleState(BaseModel):
    """Nothing submitted yet."""
    model_config = ConfigDict(frozen=True)

    status: Literal["IDLE"] = "IDLE"


class LoadingState(BaseModel):
    """A provider call is in flight for request ``request_id``."""
    model_config = ConfigDict(frozen=True)

    status: Literal["LOADING"] = "LOADING"
    request_id: int = Field(..., ge=1)


class SucceededState(BaseModel):
    """The provider returned a list; order is the provider's order."""
    model_config = ConfigDict(frozen=True)

    status: Literal["SUCCEEDED"] = "SUCCEEDED"
    recommendations: List[MovieRecommendation] = Field(
        default_factory=list,
        description="Recommendations exactly as returned by the provider"
    )


class FailedState(BaseModel):
    """Validation or provider failure, with a single-line message."""
    model_config = ConfigDict(frozen=True)

    status: Literal["FAILED"] = "FAILED"
    error: str = Field(
        ...,
        description="User-facing error message",
        examples=[
            "Please enter some movies you like.",
            "Failed to get recommendations. timeout"
        ]
    )


RequestState = Annotated[
    Union[IdleState, LoadingState, SucceededState, FailedState],
    Field(discriminator="status"),
]

# What POST /recommendations/query can return (the flow has always settled)
RecommendationQueryResponse = Union[SucceededState, FailedState]
