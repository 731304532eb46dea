"""Standardized error response schema."""

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Error body for failed requests (5xx)."""

    error: str = Field(..., description="Error category")
    message: str = Field(..., description="Human-readable error message")
