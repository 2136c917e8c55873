"""Database connection and session management.

Provides async database engine and session factory for PostgreSQL.
"""

import logfire
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from attend.config import Settings
from attend.persistence.tables import metadata


def create_engine(settings: Settings) -> AsyncEngine:
    """Create async database engine.

    Args:
        settings: Application settings with database URL

    Returns:
        Configured async engine
    """
    return create_async_engine(
        settings.database_url,
        echo=settings.debug,  # Log SQL queries in debug mode
        pool_pre_ping=True,  # Verify connections before using
        pool_size=settings.database.pool_size,
        max_overflow=settings.database.max_overflow,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create async session factory.

    Args:
        engine: Database engine

    Returns:
        Session factory for creating database sessions
    """
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,  # Don't expire objects after commit
        autoflush=False,  # Manual flushing for better control
        autocommit=False,  # Explicit transaction management
    )


async def create_schema(engine: AsyncEngine) -> None:
    """Create all tables that do not exist yet.

    Args:
        engine: Database engine
    """
    with logfire.span("database.create_schema", tables=len(metadata.tables)):
        async with engine.begin() as conn:
            await conn.run_sync(metadata.create_all)
        logfire.info("Database schema ready", tables=sorted(metadata.tables))
