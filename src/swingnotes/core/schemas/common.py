"""
Shared response schemas - success envelope, errors, health
"""

from datetime import datetime, timezone
from typing import Any, Dict, Generic, Literal, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    """Success envelope used by every endpoint that returns a body."""

    status: Literal["success"] = "success"
    message: str
    data: Optional[T] = None


class ErrorResponse(BaseModel):
    """Standard error response schema."""

    status: Literal["fail", "error"] = Field(
        description="'fail' for client errors, 'error' for server errors"
    )
    message: str = Field(description="Human-readable error message")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "status": "fail",
                "message": "Username must be at least 3 characters long., Password is required.",
            }
        }
    )


class HealthCheckResponse(BaseModel):
    """Health check response schema."""

    status: str = Field(description="Overall health status")
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    version: str = Field(description="Application version")
    checks: Dict[str, Dict[str, Any]] = Field(description="Individual component health checks")
