"""Helpers shared by the repositories."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ..errors import AppError

logger = logging.getLogger(__name__)


@asynccontextmanager
async def storage_guard(session: AsyncSession, message: str) -> AsyncIterator[None]:
    """Roll back and re-raise driver failures as AppError(INTERNAL).

    The driver error is logged here and never reaches the client.
    """
    try:
        yield
    except SQLAlchemyError as e:
        logger.error(f"{message} ({type(e).__name__}: {e})")
        await session.rollback()
        raise AppError.internal(message) from e
