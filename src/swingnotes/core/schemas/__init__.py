"""
Pydantic schemas for validating and documenting API requests and responses.
"""

from .auth import AuthResponse, LoginRequest, SignupRequest
from .common import ApiResponse, ErrorResponse, HealthCheckResponse
from .notes import NoteCreate, NoteResponse, NoteUpdate

__all__ = [
    # Auth schemas
    "SignupRequest",
    "LoginRequest",
    "AuthResponse",
    # Note schemas
    "NoteCreate",
    "NoteUpdate",
    "NoteResponse",
    # Common schemas
    "ApiResponse",
    "ErrorResponse",
    "HealthCheckResponse",
]
