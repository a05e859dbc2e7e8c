# Main application entry point
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from .api import health_router, notes_router, users_router
from .api.error_handlers import register_error_handlers
from .config import Settings, get_settings
from .core.logging import LoggingMiddleware, get_logger, setup_logging
from .database import build_engine, build_session_factory, create_tables

logger = get_logger("main")


def create_app(
    settings: Settings,
    session_factory: Optional[async_sessionmaker[AsyncSession]] = None,
) -> FastAPI:
    """Build the application.

    When no session factory is given one is built from ``settings.database_url``
    and its engine is disposed on shutdown.
    """
    engine = None
    if session_factory is None:
        engine = build_engine(settings)
        session_factory = build_session_factory(engine)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan events."""
        logger.info(
            "Starting Swing Notes API",
            extra={
                "version": settings.app_version,
                "environment": settings.environment,
                "debug": settings.debug,
            },
        )

        if engine is not None and settings.create_tables_on_startup:
            await create_tables(engine)
            logger.info("Database tables created/verified")

        yield

        logger.info("Shutting down Swing Notes API")
        if engine is not None:
            await engine.dispose()

    app = FastAPI(
        title=settings.app_name,
        description="Personal note-taking API",
        version=settings.app_version,
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.session_factory = session_factory

    register_error_handlers(app)

    app.add_middleware(LoggingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(users_router, prefix="/api")
    app.include_router(notes_router, prefix="/api")
    app.include_router(health_router, prefix="/api")

    return app


def app_factory() -> FastAPI:
    """Entry point for ``uvicorn --factory``; reads settings from the environment."""
    settings = get_settings()
    setup_logging(settings)
    return create_app(settings)


def run() -> None:
    """Run the development server."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "swingnotes.main:app_factory",
        factory=True,
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
    )


if __name__ == "__main__":
    run()
