"""
Engine and session plumbing for the transcriptions database.

The client API uses the configured URL. The processing backend passes its
own DATABASE_URL, which gets a separate cached engine.

Dependencies: sqlalchemy, video_translator.configs
"""

from functools import lru_cache
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from video_translator.configs import get_settings


@lru_cache
def get_async_engine(database_url: str | None = None) -> AsyncEngine:
    """Pooled engine for `database_url`, or for the configured database when None."""
    config = get_settings().database
    return create_async_engine(
        database_url or config.async_database_url,
        echo=config.echo_sql,
        pool_size=config.pool_size,
        max_overflow=config.max_overflow,
        pool_timeout=config.pool_timeout,
        # Managed Postgres drops idle connections
        pool_pre_ping=True,
    )


def get_async_session_factory(database_url: str | None = None) -> async_sessionmaker:
    # Rows stay readable after commit; responses are built from them
    return async_sessionmaker(bind=get_async_engine(database_url), autoflush=False, expire_on_commit=False)


async def get_async_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency: one session per request, closed afterwards."""
    async with get_async_session_factory()() as session:
        yield session
