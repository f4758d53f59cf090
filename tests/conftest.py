"""
Shared test fixtures and configuration for entire test suite.

Provides: in-memory SQLite database session, user ids, row factories,
httpx mock transports
Dependencies: pytest, sqlalchemy, aiosqlite, httpx
System role: Test infrastructure and fixture management
"""

import uuid
from datetime import datetime, timedelta, timezone
from typing import Callable

import httpx
import pytest


@pytest.fixture
async def test_async_db():
    """
    Create in-memory SQLite async database for testing.

    Yields:
        AsyncSession: Test database session with cleanup (lazy imported to avoid settings issues)
    """
    from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
    from sqlalchemy.pool import StaticPool

    from tutorbot.boundary.db import models  # noqa: F401
    from tutorbot.boundary.db.base import Base

    # Use SQLite in-memory database for tests
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    # Create all tables
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async_session = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )

    async with async_session() as session:
        yield session
        await session.rollback()

    # Cleanup
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
def user_id() -> uuid.UUID:
    """Provide the calling user's id."""
    return uuid.uuid4()


@pytest.fixture
def admin_id() -> uuid.UUID:
    """Provide an admin user's id (role row created by tests that need it)."""
    return uuid.uuid4()


@pytest.fixture
def timestamps() -> Callable[[int], datetime]:
    """Provide deterministic, strictly increasing timestamps: timestamps(n) = base + n seconds."""
    base = datetime(2025, 1, 1, 12, 0, 0, tzinfo=timezone.utc)
    return lambda offset: base + timedelta(seconds=offset)


class RecordingTransport(httpx.MockTransport):
    """MockTransport that replays queued responses and records every request."""

    def __init__(self, responses: list) -> None:
        self.requests: list[httpx.Request] = []
        self._responses = list(responses)
        super().__init__(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        item = self._responses.pop(0) if len(self._responses) > 1 else self._responses[0]
        if isinstance(item, Exception):
            raise item
        return item

    @property
    def call_count(self) -> int:
        return len(self.requests)


@pytest.fixture
def recording_transport() -> Callable[..., RecordingTransport]:
    """Factory for RecordingTransport; the last queued response repeats."""
    return lambda *responses: RecordingTransport(list(responses))
