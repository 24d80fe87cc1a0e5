"""Schema for GET /health."""

from pydantic import BaseModel, ConfigDict, Field


class HealthResponse(BaseModel):
    """The service is up; says nothing about the provider."""
    model_config = ConfigDict(
        json_schema_extra={
            "example": {"status": "ok", "version": "0.1.0"}
        }
    )

    status: str = Field(default="ok", examples=["ok"])
    version: str = Field(..., description="CineSuggest package version")
