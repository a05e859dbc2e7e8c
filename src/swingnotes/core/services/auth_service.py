"""Authentication service implementation."""

import logging
from datetime import timedelta
from typing import Any, Mapping, Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from ...config import Settings
from ...security import (
    create_access_token,
    hash_password,
    verify_dummy_password,
    verify_password,
)
from ..errors import AppError
from ..repositories.interfaces import IUserRepository, UsernameTakenError
from ..repositories.user_repository import UserRepository
from ..schemas.auth import AuthResponse, LoginRequest, SignupRequest
from ..validation import validate
from .interfaces import IAuthService

logger = logging.getLogger(__name__)

USERNAME_TAKEN = "Username already exists."
INVALID_CREDENTIALS = "Invalid credentials."
ACCOUNT_NOT_FOUND = "User not found or could not be deleted."


class AuthService(IAuthService):
    """Authentication service implementation."""

    def __init__(
        self,
        session: Optional[AsyncSession],
        settings: Settings,
        user_repo: Optional[IUserRepository] = None,
    ):
        self.session = session
        self.settings = settings
        self.user_repo = user_repo or UserRepository(session)

    def _issue_token(self, user_id: UUID) -> str:
        return create_access_token(
            user_id,
            self.settings.secret_key,
            timedelta(minutes=self.settings.access_token_expire_minutes),
            self.settings.algorithm,
        )

    async def register(self, payload: Optional[Mapping[str, Any]]) -> AuthResponse:
        """Register new user."""
        request: SignupRequest = validate("signup", payload)

        # Check if username already exists
        if await self.user_repo.get_by_username(request.username):
            raise AppError.conflict(USERNAME_TAKEN)

        hashed_password = hash_password(request.password)

        # the pre-check can race another signup; the unique constraint decides
        try:
            user = await self.user_repo.create_user(request.username, hashed_password)
        except UsernameTakenError:
            raise AppError.conflict(USERNAME_TAKEN) from None

        logger.info(f"Registered user {user.id}")
        return AuthResponse(id=user.id, username=user.username, token=self._issue_token(user.id))

    async def login(self, payload: Optional[Mapping[str, Any]]) -> AuthResponse:
        """Login user and return a JWT."""
        request: LoginRequest = validate("login", payload)

        # same error for unknown user and wrong password
        user = await self.user_repo.get_by_username(request.username)
        if not user:
            # pay the same hash cost as a wrong password
            verify_dummy_password()
            logger.warning("Login failed: unknown username")
            raise AppError.unauthorized(INVALID_CREDENTIALS)

        if not verify_password(request.password, user.password_hash):
            logger.warning(f"Login failed: wrong password for user {user.id}")
            raise AppError.unauthorized(INVALID_CREDENTIALS)

        logger.info(f"User {user.id} logged in")
        return AuthResponse(id=user.id, username=user.username, token=self._issue_token(user.id))

    async def delete_account(self, caller_id: UUID) -> None:
        """Delete the account; notes are removed by the FK cascade."""
        if not await self.user_repo.delete_user(caller_id):
            raise AppError.not_found(ACCOUNT_NOT_FOUND)

        logger.info(f"Deleted user {caller_id} and their notes")
