"""Shared pytest fixtures configured to use SQLite in-memory for tests."""

import logging
from datetime import timedelta
from uuid import uuid4

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.pool import StaticPool

from swingnotes.config import Settings
from swingnotes.core.models.base import BaseModel
from swingnotes.core.repositories import NoteRepository, UserRepository
from swingnotes.database import build_engine, build_session_factory
from swingnotes.main import create_app
from swingnotes.security.jwt import create_access_token
from swingnotes.security.password import hash_password

# Silence extremely verbose DEBUG logs from aiosqlite to keep test output readable
logging.getLogger("aiosqlite").setLevel(logging.WARNING)

TEST_SECRET = "test-secret-key"
TEST_PASSWORD = "secret1"


@pytest.fixture
def test_settings():
    """Settings for testing using SQLite in-memory DB (no .env lookup)."""
    return Settings(
        _env_file=None,
        database_url="sqlite+aiosqlite:///:memory:",
        secret_key=TEST_SECRET,
        access_token_expire_minutes=60,
    )


@pytest.fixture
async def test_engine(test_settings):
    """SQLite in-memory engine with a fresh schema per test."""
    engine = build_engine(
        test_settings,
        poolclass=StaticPool,  # keep the same memory DB across connections
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(BaseModel.metadata.create_all)

    try:
        yield engine
    finally:
        await engine.dispose()


@pytest.fixture
def session_factory(test_engine):
    return build_session_factory(test_engine)


@pytest.fixture
async def test_session(session_factory):
    async with session_factory() as session:
        try:
            yield session
        finally:
            await session.rollback()


@pytest.fixture
def test_app(test_settings, session_factory):
    """Create test FastAPI app wired to the in-memory database."""
    return create_app(test_settings, session_factory=session_factory)


@pytest.fixture
async def async_client(test_app):
    """Create async test client."""
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
async def test_user(test_session):
    """Create a test user in the database."""
    repo = UserRepository(test_session)
    return await repo.create_user(f"user_{uuid4().hex[:8]}", hash_password(TEST_PASSWORD))


@pytest.fixture
async def other_user(test_session):
    repo = UserRepository(test_session)
    return await repo.create_user(f"other_{uuid4().hex[:8]}", hash_password(TEST_PASSWORD))


def _make_token(user_id, minutes: int = 60) -> str:
    return create_access_token(user_id, TEST_SECRET, timedelta(minutes=minutes))


@pytest.fixture
def make_token():
    """Issue tokens signed with the test secret; negative minutes give expired ones."""
    return _make_token


@pytest.fixture
def auth_headers(test_user):
    """Create authentication headers with a valid JWT token."""
    return {"Authorization": f"Bearer {_make_token(test_user.id)}"}


@pytest.fixture
async def test_note(test_session, test_user):
    """Create a test note in the database."""
    repo = NoteRepository(test_session)
    return await repo.create_note(test_user.id, "Groceries", "milk, eggs")
