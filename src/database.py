"""
Counsel Connect - Database Connection and Session Management

The engine is opened by ``init_db`` from the application lifespan and
disposed by ``close_db`` on shutdown. Nothing connects at import time.
"""

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncGenerator, Optional

from sqlalchemy.engine import make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.orm import DeclarativeBase

logger = logging.getLogger(__name__)


# Base class for models
class Base(DeclarativeBase):
    pass


class DatabaseSessionManager:
    """Owns the async engine and hands out sessions."""

    def __init__(self, database_url: str, echo: bool = False):
        self.engine = create_async_engine(
            database_url,
            echo=echo,  # Log SQL queries in debug mode
            pool_pre_ping=True,
        )
        self._session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    async def create_all(self) -> None:
        """Create all database tables."""
        # Import models to ensure they're registered with Base.metadata
        from src.models import User, LawyerProfile, LawyerReview, LawyerCase  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Provide a session that rolls back when a database error escapes."""
        async with self._session_factory() as session:
            try:
                yield session
            except SQLAlchemyError as e:
                await session.rollback()
                logger.error(f"Database error, session rolled back: {e}")
                raise

    async def close(self) -> None:
        await self.engine.dispose()


# Initialized on startup
db_manager: Optional[DatabaseSessionManager] = None


def _ensure_sqlite_directory(database_url: str) -> None:
    """Create the parent directory of a file-backed SQLite database."""
    url = make_url(database_url)
    if url.get_backend_name() != "sqlite" or not url.database or url.database == ":memory:":
        return
    Path(url.database).parent.mkdir(parents=True, exist_ok=True)


async def init_db(database_url: str, echo: bool = False) -> DatabaseSessionManager:
    """Open the engine and create tables."""
    global db_manager
    _ensure_sqlite_directory(database_url)
    db_manager = DatabaseSessionManager(database_url, echo=echo)
    await db_manager.create_all()
    logger.info(f"Database ready ({make_url(database_url).get_backend_name()})")
    return db_manager


async def close_db() -> None:
    """Close database connections."""
    global db_manager
    if db_manager is not None:
        await db_manager.close()
        db_manager = None


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Dependency that provides a database session."""
    if db_manager is None:
        raise RuntimeError("Database not initialized")
    async with db_manager.session() as session:
        yield session
