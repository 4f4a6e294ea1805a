# 📄 File: agroscan/shared/infrastructure/database/connection.py
#
# 🧭 Purpose (Layman Explanation):
# Opens and closes the connection to AgroScan's database and checks that it is still
# answering, so the rest of the app always has somewhere safe to store records.
#
# 🧪 Purpose (Technical Summary):
# Async SQLAlchemy engine lifecycle management: engine creation from settings,
# SQLite foreign-key enforcement on every connection, table creation, health checks
# with retry, and disposal on shutdown.
#
# 🔗 Dependencies:
# - sqlalchemy (async engine)
# - agroscan/shared/config/settings.py and database.py
# - aiosqlite / asyncpg drivers
#
# 🔄 Connected Modules / Calls From:
# - agroscan/shared/infrastructure/database/session.py (session management)
# - agroscan/main.py (startup/shutdown)
# - agroscan/api/v1/health.py (database health)

import asyncio
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from sqlalchemy import event, text
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from agroscan.shared.config.database import DatabaseBase, build_engine_kwargs
from agroscan.shared.config.settings import Settings, get_settings

logger = logging.getLogger(__name__)


def load_models() -> None:
    """
    Import every ORM model so tables are registered on the metadata and
    string relationship targets ("UserModel", "InspectionModel") resolve.
    """
    import agroscan.modules.user_management.infrastructure.database.models  # noqa: F401
    import agroscan.modules.inspection_management.infrastructure.database.models  # noqa: F401


def enable_sqlite_foreign_keys(engine: AsyncEngine) -> None:
    """
    Turn on foreign key enforcement for every new SQLite connection.

    SQLite ignores ON DELETE CASCADE unless the pragma is set per connection.
    """
    if engine.dialect.name != "sqlite":
        return

    @event.listens_for(engine.sync_engine, "connect")
    def set_sqlite_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


class DatabaseConnectionManager:
    """
    Manages the async database engine with health monitoring
    and retry logic.
    """

    def __init__(self):
        self._engine: Optional[AsyncEngine] = None
        self._health_check_query = text("SELECT 1")
        self._retry_attempts = 3
        self._retry_delay = 1.0

    async def initialize(self, settings: Optional[Settings] = None) -> None:
        """Create the engine and verify connectivity."""
        if self._engine is not None:
            logger.warning("Database engine already initialized")
            return

        settings = settings or get_settings()

        logger.info("Initializing database engine...")
        self._engine = create_async_engine(settings.database_url, **build_engine_kwargs(settings))
        enable_sqlite_foreign_keys(self._engine)

        health = await self.health_check()
        if health["status"] != "healthy":
            await self.close()
            raise RuntimeError("Database is not reachable")

        if settings.DB_AUTO_CREATE:
            await self.create_tables()

        logger.info(f"Database engine initialized ({self._engine.dialect.name})")

    async def create_tables(self) -> None:
        """Create any missing tables from the ORM metadata."""
        if self._engine is None:
            raise RuntimeError("Database engine not initialized")

        load_models()

        async with self._engine.begin() as conn:
            await conn.run_sync(DatabaseBase.metadata.create_all)
        logger.info("Database tables ensured")

    async def health_check(self) -> Dict[str, Any]:
        """
        Perform database health check and return structured status.
        """
        if self._engine is None:
            logger.error("Database engine not initialized")
            return {
                "status": "unhealthy",
                "error": "Database engine not initialized",
                "timestamp": datetime.now(timezone.utc).isoformat()
            }

        for attempt in range(self._retry_attempts):
            try:
                async with self._engine.connect() as conn:
                    result = await conn.execute(self._health_check_query)
                    result.scalar()

                logger.debug("Database health check passed")
                return {
                    "status": "healthy",
                    "timestamp": datetime.now(timezone.utc).isoformat()
                }

            except Exception as e:
                logger.warning(
                    f"Database health check failed (attempt {attempt + 1}/{self._retry_attempts}): {e}"
                )
                if attempt < self._retry_attempts - 1:
                    await asyncio.sleep(self._retry_delay * (2 ** attempt))

        logger.error("Database health check failed after all retry attempts")
        return {
            "status": "unhealthy",
            "error": "Database health check failed after all retry attempts",
            "timestamp": datetime.now(timezone.utc).isoformat()
        }

    async def close(self) -> None:
        """Close database engine and all connections."""
        if self._engine is None:
            logger.warning("Database engine not initialized, nothing to close")
            return

        logger.info("Closing database engine...")
        await self._engine.dispose()
        self._engine = None
        logger.info("Database engine closed")

    @property
    def engine(self) -> Optional[AsyncEngine]:
        """Get the SQLAlchemy async engine."""
        return self._engine

    @property
    def is_initialized(self) -> bool:
        """Check if database engine is initialized."""
        return self._engine is not None


# Global database connection manager instance
db_manager = DatabaseConnectionManager()


async def init_database(settings: Optional[Settings] = None) -> None:
    """Initialize the global database connection manager."""
    try:
        await db_manager.initialize(settings)
    except Exception as e:
        logger.error(f"Failed to initialize database: {e}", exc_info=True)
        raise


async def close_database() -> None:
    """Close the global database connection manager."""
    await db_manager.close()


def get_database_engine() -> AsyncEngine:
    """
    Get the database engine instance.

    Raises:
        RuntimeError: If database is not initialized
    """
    if not db_manager.is_initialized:
        raise RuntimeError("Database not initialized. Call init_database() first.")
    return db_manager.engine


async def database_health_check() -> Dict[str, Any]:
    """Perform database health check."""
    return await db_manager.health_check()
