"""
Shared test fixtures and configuration for entire test suite.

Provides: In-memory database, stage driver and notification fixtures
Dependencies: pytest, sqlalchemy, aiosqlite
System role: Test infrastructure and fixture management
"""

import uuid

import pytest


@pytest.fixture
async def test_engine():
    """
    Create in-memory SQLite async engine with all tables.

    Yields:
        AsyncEngine: Engine bound to a single shared connection
    """
    from sqlalchemy.ext.asyncio import create_async_engine
    from sqlalchemy.pool import StaticPool

    from video_translator.boundary.db.base import Base

    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
def test_session_factory(test_engine):
    from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

    return async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def test_async_db(test_session_factory):
    """
    Yields:
        AsyncSession: Test database session with rollback on teardown
    """
    async with test_session_factory() as session:
        yield session
        await session.rollback()


@pytest.fixture
def notification_center():
    from video_translator.core.stage_driver import NotificationCenter

    return NotificationCenter()


@pytest.fixture
def instant_driver(notification_center):
    """Stage driver with zero delays that never fails."""
    from video_translator.core.stage_driver import StageDriver, StageTimings, never_fail

    return StageDriver(
        notification_center,
        timings=StageTimings().scaled(0),
        failure_policy=never_fail,
    )


@pytest.fixture
def video_file():
    """Factory for VideoFile metadata, a 50 MB mp4 by default."""
    from video_translator.core.stage_driver import VideoFile

    def _make(name: str = "clip.mp4", content_type: str | None = "video/mp4", size: int = 50 * 1024 * 1024):
        return VideoFile(name=name, content_type=content_type, size=size)

    return _make


@pytest.fixture
def job_id():
    """Generate a test job ID."""
    return uuid.uuid4()
