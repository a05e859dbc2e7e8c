"""
Authentication schemas.

These schemas define the API contracts for signup, login and the token
returned by both.
"""

import uuid

from pydantic import BaseModel, ConfigDict, Field

USERNAME_MIN_LENGTH = 3
USERNAME_MAX_LENGTH = 50
PASSWORD_MIN_LENGTH = 6


class SignupRequest(BaseModel):
    """User registration request schema."""

    username: str = Field(
        min_length=USERNAME_MIN_LENGTH,
        max_length=USERNAME_MAX_LENGTH,
        description="Unique username",
    )
    password: str = Field(min_length=PASSWORD_MIN_LENGTH, description="User password")

    model_config = ConfigDict(
        extra="forbid",
        json_schema_extra={"example": {"username": "alice", "password": "secret1"}},
    )


class LoginRequest(BaseModel):
    """User login request schema."""

    username: str = Field(min_length=1, description="Username")
    password: str = Field(min_length=1, description="User password")

    model_config = ConfigDict(
        extra="forbid",
        json_schema_extra={"example": {"username": "alice", "password": "secret1"}},
    )


class AuthResponse(BaseModel):
    """Returned by signup and login."""

    id: uuid.UUID = Field(description="User unique identifier")
    username: str = Field(description="Username")
    token: str = Field(description="Bearer token for protected endpoints")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "123e4567-e89b-12d3-a456-426614174000",
                "username": "alice",
                "token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
            }
        }
    )
