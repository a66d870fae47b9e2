"""Pydantic models for request/response validation."""

from .schemas import QueryRequest, ApiResponse, ErrorResponse, HealthResponse

__all__ = ["QueryRequest", "ApiResponse", "ErrorResponse", "HealthResponse"]
