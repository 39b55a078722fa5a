"""
Async database session management.
Challenge: Connection pooling, scoped sessions, proper cleanup.
Design: One session per unit of work; the application layer plugs get_db into its own dependency system.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from meetroom.config import get_settings

settings = get_settings()

# Async engine with connection pool (scalability)
engine = create_async_engine(
    settings.database_url,
    echo=settings.debug,
    pool_pre_ping=True,  # Verify connections before use
    pool_size=settings.db_pool_size,
    max_overflow=settings.db_max_overflow,
)

# Session factory: one session per unit of work
async_session_maker = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autocommit=False,
    autoflush=False,
)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Yield a database session. Commits on success, rolls back and re-raises on error."""
    async with async_session_maker() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


# `async with session_scope() as session:` for scripts and workers
session_scope = asynccontextmanager(get_db)
