"""
Bloglist Backend — Shared Response Schemas
===========================================
"""

from typing import Optional

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """
    What:  Standardized error response format for all API errors.

    Fields:
        error: Machine-readable error code (e.g., "validation_error", "not_found")
        message: Human-readable description
        details: Optional extra context (e.g., violated constraints)
        request_id: Correlation ID for tracing this error in server logs

    Example:
        {
            "error": "validation_error",
            "message": "title is required",
            "details": {"violations": [{"field": "title", "message": "title is required"}]},
            "request_id": "3f2a9c1e"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Returned by GET /health for monitoring and load balancer probes."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
