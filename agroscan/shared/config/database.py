# 📄 File: agroscan/shared/config/database.py
#
# 🧭 Purpose (Layman Explanation):
# Describes how AgroScan talks to its database: the shared base that every table
# definition builds on, and the connection options for SQLite or PostgreSQL.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy declarative base with a constraint naming convention, plus driver-aware
# async engine keyword arguments (pooling for PostgreSQL, none for SQLite).
#
# 🔗 Dependencies:
# - SQLAlchemy declarative ORM
# - agroscan.shared.config.settings
#
# 🔄 Connected Modules / Calls From:
# - agroscan.shared.infrastructure.database.connection
# - All infrastructure/database/models.py modules
# - migrations/env.py (target metadata)

from typing import Any, Dict

from sqlalchemy import MetaData
from sqlalchemy.pool import StaticPool
from sqlalchemy.orm import DeclarativeBase

from .settings import Settings


# =============================================================================
# DATABASE CONFIGURATION
# =============================================================================

def build_engine_kwargs(settings: Settings) -> Dict[str, Any]:
    """
    Get SQLAlchemy engine configuration for the configured driver.

    SQLite connections skip pool sizing; the async driver runs a
    single connection per engine thread.
    """
    base_config: Dict[str, Any] = {
        "echo": settings.DB_ECHO,
        "pool_pre_ping": True,
    }

    if settings.is_sqlite:
        # An in-memory database lives as long as its one connection
        url = settings.database_url
        if url.split("://", 1)[1] in ("", "/") or ":memory:" in url:
            base_config["poolclass"] = StaticPool
            base_config["connect_args"] = {"check_same_thread": False}
        return base_config

    base_config.update({
        "pool_size": settings.DB_POOL_SIZE,
        "max_overflow": settings.DB_MAX_OVERFLOW,
        "pool_timeout": settings.DB_POOL_TIMEOUT,
        "pool_recycle": settings.DB_POOL_RECYCLE,
    })

    if settings.database_url.startswith("postgresql+asyncpg"):
        base_config["connect_args"] = {
            "server_settings": {
                "application_name": f"{settings.APP_NAME}_{settings.ENVIRONMENT}",
                "jit": "off",
            },
            "command_timeout": 60,
        }

    return base_config


# =============================================================================
# DECLARATIVE BASE
# =============================================================================

# Naming convention for constraints
convention = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s"
}

metadata = MetaData(naming_convention=convention)


class DatabaseBase(DeclarativeBase):
    """
    Base class for all SQLAlchemy models.

    Provides the shared metadata (and constraint names) for every
    table in AgroScan.
    """
    metadata = metadata
