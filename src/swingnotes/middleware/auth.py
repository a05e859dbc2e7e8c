"""Authentication middleware."""

import logging
from typing import Optional
from uuid import UUID

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from ..config import Settings
from ..core.errors import AppError
from ..security import ExpiredTokenError, TokenError, get_user_id_from_token

logger = logging.getLogger(__name__)

NOT_LOGGED_IN = "You are not logged in! Please log in to get access."
INVALID_TOKEN = "Invalid token. Please log in again."
EXPIRED_TOKEN = "Your token has expired! Please log in again."


def authenticate(raw_token: Optional[str], settings: Settings) -> UUID:
    """Turn a bearer token into the caller's user id.

    Raises an UNAUTHORIZED AppError with a message telling apart a missing,
    an invalid and an expired token.
    """
    if not raw_token or not raw_token.strip():
        raise AppError.unauthorized(NOT_LOGGED_IN)

    try:
        return get_user_id_from_token(raw_token.strip(), settings.secret_key, settings.algorithm)
    except ExpiredTokenError:
        raise AppError.unauthorized(EXPIRED_TOKEN) from None
    except TokenError as e:
        logger.debug(f"Rejected token: {e}")
        raise AppError.unauthorized(INVALID_TOKEN) from None


class JWTBearer(HTTPBearer):
    """JWT Bearer token authentication.

    Runs with ``auto_error=False`` so a missing or non-Bearer header reaches
    ``authenticate`` and gets the same error body as every other failure.
    """

    def __init__(self):
        super(JWTBearer, self).__init__(auto_error=False)

    async def __call__(self, request: Request) -> UUID:
        credentials: Optional[HTTPAuthorizationCredentials] = await super().__call__(request)
        settings: Settings = request.app.state.settings
        return authenticate(credentials.credentials if credentials else None, settings)


# Dependency for getting current user ID from JWT
async def get_current_user_id(user_id: UUID = Depends(JWTBearer())) -> UUID:
    """Get current authenticated user ID."""
    return user_id
