"""Database connection and session management.

Provides async database engine and session factory for PostgreSQL.
"""

from typing import Any

from sqlalchemy.sql.expression import Executable
from sqlalchemy.engine import Result
from sqlalchemy.exc import DBAPIError, SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from discuss.config import Settings
from discuss.domain.error import StorageError


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


def describe_error(error: SQLAlchemyError) -> str:
    """Message of the underlying driver error, falling back to SQLAlchemy's."""
    if isinstance(error, DBAPIError) and error.orig is not None:
        return str(error.orig)
    return str(error)


async def execute_write(session: AsyncSession, stmt: Executable) -> Result[Any]:
    """Execute and flush a write statement.

    On failure the whole request transaction is rolled back, so a mutation
    either lands completely or not at all.

    Raises:
        StorageError: If the database rejects the statement
    """
    try:
        result = await session.execute(stmt)
        await session.flush()
        return result
    except SQLAlchemyError as e:
        await session.rollback()
        raise StorageError(describe_error(e)) from e
