# 📄 File: agroscan/shared/infrastructure/database/session.py
#
# 🧭 Purpose (Layman Explanation):
# Gives every incoming request its own private conversation with the database, and
# makes sure half-finished changes are thrown away if something goes wrong.
#
# 🧪 Purpose (Technical Summary):
# Async SQLAlchemy session management with a FastAPI dependency. Sessions are
# request-scoped; repositories stage changes and commit explicitly, so the
# dependency only rolls back on error and always closes the session.
#
# 🔗 Dependencies:
# - sqlalchemy.ext.asyncio (AsyncSession, async_sessionmaker)
# - agroscan/shared/infrastructure/database/connection.py (database engine)
#
# 🔄 Connected Modules / Calls From:
# - All module repository implementations (database sessions)
# - agroscan/main.py (startup)
# - tests/conftest.py (dependency override)

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from agroscan.shared.infrastructure.database.connection import get_database_engine

logger = logging.getLogger(__name__)


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker:
    """Build a session factory that keeps objects readable after commit."""
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,  # Keep objects accessible after commit
        autoflush=False,  # Staged writes reach the store only on commit
    )


class DatabaseSessionManager:
    """
    Manages request-scoped database sessions with rollback on failure
    and automatic cleanup.
    """

    def __init__(self):
        self._session_factory: Optional[async_sessionmaker] = None

    def initialize(self, engine: Optional[AsyncEngine] = None) -> None:
        """Initialize the session factory with database engine."""
        self._session_factory = create_session_factory(engine or get_database_engine())
        logger.info("Database session factory initialized")

    @asynccontextmanager
    async def get_session(self) -> AsyncGenerator[AsyncSession, None]:
        """
        Get an async database session.

        Nothing is committed here; callers commit through their repository.
        Pending changes are rolled back if the block raises.
        """
        if self._session_factory is None:
            raise RuntimeError("Session manager not initialized")

        session: AsyncSession = self._session_factory()

        try:
            yield session
        except Exception:
            await session.rollback()
            logger.debug("Database session rolled back")
            raise
        finally:
            await session.close()

    def is_initialized(self) -> bool:
        """Check if session manager is initialized."""
        return self._session_factory is not None


# Global session manager instance
session_manager = DatabaseSessionManager()


# FastAPI dependency for getting database sessions
async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides database sessions.

    Usage:
        class InspectionRepositoryImpl(...):
            def __init__(self, session: AsyncSession = Depends(get_db_session)):
                ...

    Yields:
        AsyncSession: Database session
    """
    async with session_manager.get_session() as session:
        yield session
