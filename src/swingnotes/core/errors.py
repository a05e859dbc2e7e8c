"""
Service-layer errors.

Every failure a service reports carries an ErrorKind. The HTTP boundary maps
kinds to status codes with STATUS_BY_KIND, which covers every member of the
enum, and renders the uniform ``{"status", "message"}`` body.
"""

from enum import Enum
from typing import Any, Dict

from fastapi import status

GENERIC_ERROR_MESSAGE = "Something went wrong!"


class ErrorKind(str, Enum):
    """Stable error categories shared by all services."""

    BAD_REQUEST = "bad_request"
    UNAUTHORIZED = "unauthorized"
    CONFLICT = "conflict"
    NOT_FOUND = "not_found"
    INTERNAL = "internal"


STATUS_BY_KIND: Dict[ErrorKind, int] = {
    ErrorKind.BAD_REQUEST: status.HTTP_400_BAD_REQUEST,
    ErrorKind.UNAUTHORIZED: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.CONFLICT: status.HTTP_409_CONFLICT,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.INTERNAL: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


class AppError(Exception):
    """Operational error raised by services.

    ``message`` is safe to show to API clients for every kind except
    INTERNAL, where the boundary substitutes a generic message.
    """

    def __init__(self, kind: ErrorKind, message: str):
        self.kind = kind
        self.message = message
        super().__init__(message)

    def __repr__(self) -> str:
        return f"<AppError(kind={self.kind.value}, message={self.message!r})>"

    @property
    def http_status(self) -> int:
        return STATUS_BY_KIND[self.kind]

    @property
    def is_client_error(self) -> bool:
        return self.kind is not ErrorKind.INTERNAL

    def to_response(self) -> Dict[str, Any]:
        """Render the client-facing error body."""
        if self.is_client_error:
            return {"status": "fail", "message": self.message}
        return {"status": "error", "message": GENERIC_ERROR_MESSAGE}

    # convenience constructors, mirroring how services talk about failures
    @classmethod
    def bad_request(cls, message: str) -> "AppError":
        return cls(ErrorKind.BAD_REQUEST, message)

    @classmethod
    def unauthorized(cls, message: str) -> "AppError":
        return cls(ErrorKind.UNAUTHORIZED, message)

    @classmethod
    def conflict(cls, message: str) -> "AppError":
        return cls(ErrorKind.CONFLICT, message)

    @classmethod
    def not_found(cls, message: str) -> "AppError":
        return cls(ErrorKind.NOT_FOUND, message)

    @classmethod
    def internal(cls, message: str) -> "AppError":
        return cls(ErrorKind.INTERNAL, message)
