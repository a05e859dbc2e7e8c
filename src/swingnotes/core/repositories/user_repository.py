"""User repository for database operations."""

import logging
from typing import Optional
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.user import User
from .base import storage_guard
from .interfaces import IUserRepository, UsernameTakenError

logger = logging.getLogger(__name__)


class UserRepository(IUserRepository):
    """Repository for user database operations."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create_user(self, username: str, password_hash: str) -> User:
        """Create new user."""
        async with storage_guard(self.session, "Could not create user."):
            user = User(username=username, password_hash=password_hash)
            self.session.add(user)
            try:
                await self.session.commit()
            except IntegrityError as e:
                # the only unique constraint on users is the username
                await self.session.rollback()
                logger.info(f"Username '{username}' lost an insert race")
                raise UsernameTakenError(username) from e
            await self.session.refresh(user)
            return user

    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        """Get user by ID."""
        async with storage_guard(self.session, "Could not retrieve user."):
            stmt = select(User).where(User.id == user_id)
            result = await self.session.execute(stmt)
            return result.scalar_one_or_none()

    async def get_by_username(self, username: str) -> Optional[User]:
        """Get user by username."""
        async with storage_guard(self.session, "Could not retrieve user."):
            stmt = select(User).where(User.username == username)
            result = await self.session.execute(stmt)
            return result.scalar_one_or_none()

    async def delete_user(self, user_id: UUID) -> bool:
        """Delete user. Owned notes go with it via ON DELETE CASCADE."""
        async with storage_guard(self.session, "Could not delete user."):
            stmt = delete(User).where(User.id == user_id)
            result = await self.session.execute(stmt)
            await self.session.commit()
            return result.rowcount > 0
