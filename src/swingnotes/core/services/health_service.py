"""Health service implementation."""

import logging
import time
from typing import Any, Dict

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ..schemas.common import HealthCheckResponse

logger = logging.getLogger(__name__)


class HealthService:
    """Health check service implementation."""

    def __init__(self, session: AsyncSession, version: str):
        self.session = session
        self.version = version

    async def get_health_status(self) -> HealthCheckResponse:
        """Get app health status."""
        db_health = await self.check_database_health()

        return HealthCheckResponse(
            status="healthy" if db_health["connected"] else "unhealthy",
            version=self.version,
            checks={"database": db_health},
        )

    async def check_database_health(self) -> Dict[str, Any]:
        """Check DB connection."""
        start_time = time.perf_counter()
        try:
            result = await self.session.execute(text("SELECT 1"))
            result.scalar()
        except SQLAlchemyError as e:
            logger.error(f"Database health check failed: {e}")
            return {
                "connected": False,
                "status": "unhealthy",
                "error": type(e).__name__,
                "response_time_ms": 0.0,
            }

        return {
            "connected": True,
            "status": "healthy",
            "response_time_ms": round((time.perf_counter() - start_time) * 1000, 2),
        }
