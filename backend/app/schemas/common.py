"""
Noteful Backend — Shared Response Schemas
===========================================

What:  Error and health response shapes shared by every router.
Why:   Route decorators reference these so the OpenAPI docs describe the
       failure bodies alongside the success bodies.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


class ErrorDetail(BaseModel):
    message: str = Field(description="Human-readable error description")


class ErrorResponse(BaseModel):
    """
    Standard error body for 400, 404 and 500 responses.

    Example:
        {"error": {"message": "Folder Not Found"}}
    """
    error: ErrorDetail


class UnauthorizedResponse(BaseModel):
    """
    Body of every 401 response.

    Example:
        {"error": "Unauthorized request"}
    """
    error: str = Field(description="Always 'Unauthorized request'")


class VerboseErrorDetail(ErrorDetail):
    type: str = Field(description="Exception class name")
    details: Optional[Dict[str, Any]] = Field(default=None, description="Failure context")


class VerboseErrorResponse(BaseModel):
    """500 body outside production: the failure message plus its structured detail."""
    message: str
    error: VerboseErrorDetail


# Shared by every router: the bearer token check and the terminal error
# handler can answer any route with these.
AUTH_AND_SERVER_ERRORS: Dict[int, Dict[str, Any]] = {
    401: {"description": "Missing or incorrect bearer token", "model": UnauthorizedResponse},
    500: {
        "description": "Store or unexpected failure (outside production; "
                       "production answers {\"error\": {\"message\": \"server error\"}})",
        "model": VerboseErrorResponse,
    },
}


class HealthResponse(BaseModel):
    """
    What:  Health check response showing service and dependency status.
    Who:   Returned by GET /health for monitoring.
    """
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
