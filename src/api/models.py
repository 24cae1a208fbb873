"""Request/Response models for API endpoints."""

from typing import Any

from pydantic import BaseModel, Field, field_validator


class GenerateVisualizationRequest(BaseModel):
    """Request model for the visualization endpoint."""

    query: str | None = Field(None, description="Free-text description of the desired chart")

    @field_validator("query", mode="before")
    @classmethod
    def falsy_query_is_missing(cls, v: Any) -> Any:
        # 0, false, [] and {} count as "no query" rather than a type error
        return v if v else None


class ErrorResponse(BaseModel):
    """Client error payload."""

    error: str = Field(..., description="Human-readable error message")


class HealthResponse(BaseModel):
    """Response model for health endpoint."""

    status: str = Field(..., description="Service status")
    version: str = Field(..., description="Application version")
    timestamp: str = Field(..., description="Server time (ISO-8601, UTC)")
