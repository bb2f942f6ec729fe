"""
Database configuration and connection management.
"""

import time
from functools import lru_cache
from typing import Any, AsyncGenerator, Dict

from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from marketplace.config.logging import get_logger
from marketplace.config.settings import settings

logger = get_logger(__name__)


def get_database_url() -> str:
    """Get database URL from settings."""
    return str(settings.DATABASE_URL)


def create_engine(database_url: str = None) -> AsyncEngine:
    """Create async SQLAlchemy engine."""
    url = database_url or get_database_url()

    # SQLite (tests, local runs) does not take a sized connection pool
    if url.startswith("sqlite"):
        return create_async_engine(url, echo=settings.DATABASE_ECHO, future=True)

    return create_async_engine(
        url,
        echo=settings.DATABASE_ECHO,
        pool_size=settings.DATABASE_POOL_SIZE,
        max_overflow=settings.DATABASE_MAX_OVERFLOW,
        pool_timeout=settings.DATABASE_POOL_TIMEOUT,
        pool_recycle=settings.DATABASE_POOL_RECYCLE,
        pool_pre_ping=True,
        future=True,
    )


@lru_cache(maxsize=1)
def get_engine() -> AsyncEngine:
    """Get the process-wide engine, created on first use."""
    return create_engine()


def get_async_session_factory(
    engine: AsyncEngine = None,
) -> async_sessionmaker[AsyncSession]:
    """Get async session factory."""
    return async_sessionmaker(
        engine or get_engine(),
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Dependency for getting database session."""
    async with get_async_session_factory()() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise


async def get_database_health(session: AsyncSession) -> Dict[str, Any]:
    """Check database health using an open session."""
    try:
        start_time = time.time()
        result = await session.execute(text("SELECT 1"))
        result.scalar_one()
        return {
            "status": "healthy",
            "response_time_ms": (time.time() - start_time) * 1000,
        }
    except Exception as e:
        logger.error("Database health check failed", error=str(e))
        return {"status": "unhealthy", "error": str(e)}


async def close_database_connections() -> None:
    """Dispose the engine and its connection pool."""
    if get_engine.cache_info().currsize:
        await get_engine().dispose()
        get_engine.cache_clear()
    logger.info("Database connections closed")
