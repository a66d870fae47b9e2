"""Pydantic models for API schemas."""

from pydantic import BaseModel, Field, StrictStr, field_validator
from typing import Dict, Optional


class QueryRequest(BaseModel):
    """Request model for query endpoint."""
    query: StrictStr = Field(..., description="User query (cannot be empty)")

    @field_validator('query')
    @classmethod
    def validate_query_not_empty(cls, v: str) -> str:
        """Validate that query is not just whitespace.

        The query is returned untouched so the models see what the client sent.
        """
        if not v.strip():
            raise ValueError('Query cannot be empty or whitespace')
        return v


class ApiResponse(BaseModel):
    """Response model for the query endpoint."""
    response: str
    error: Optional[str] = None


class ErrorResponse(BaseModel):
    """Error body for validation failures and unhandled errors."""
    error: str


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    version: str
    timestamp: str
    models: Dict[str, bool]
