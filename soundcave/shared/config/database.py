# 📄 File: soundcave/shared/config/database.py
#
# 🧭 Purpose (Layman Explanation):
# Configuration for connecting to the SoundCave database, managing connections efficiently,
# and making sure many listeners can use the app at the same time.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy async database configuration with connection pooling, session factory,
# declarative base with constraint naming conventions, and a FastAPI session dependency.
#
# 🔗 Dependencies:
# - SQLAlchemy async engine and session
# - soundcave.shared.config.settings
# - asyncpg (PostgreSQL) or aiosqlite (tests)
#
# 🔄 Connected Modules / Calls From:
# - soundcave.main (created by the application factory, disposed on shutdown)
# - soundcave.shared.core.dependencies (get_db)
# - All SQLAlchemy models (DatabaseBase)
# - migrations/env.py (metadata)

import logging
from typing import Any, AsyncGenerator, Dict, Optional

from fastapi import Request
from sqlalchemy import MetaData, event, text
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from .settings import Settings, get_settings

logger = logging.getLogger(__name__)


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    # SQLite ignores REFERENCES clauses unless asked per connection
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


# =============================================================================
# DATABASE CONFIGURATION
# =============================================================================

class DatabaseConfig:
    """Owns the async engine and session factory for one application instance."""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()
        self._async_engine: Optional[AsyncEngine] = None
        self._async_session_factory: Optional[async_sessionmaker[AsyncSession]] = None

    @property
    def database_url(self) -> str:
        return self.settings.database_url

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")

    @property
    def engine_kwargs(self) -> Dict[str, Any]:
        """Get SQLAlchemy engine configuration based on backend and environment."""
        base_config: Dict[str, Any] = {"echo": self.settings.DB_ECHO}

        if self.is_sqlite:
            # Writers wait on the file lock instead of failing immediately
            base_config["connect_args"] = {"timeout": 30}
            return base_config

        base_config.update({
            "pool_size": self.settings.DB_POOL_SIZE,
            "max_overflow": self.settings.DB_MAX_OVERFLOW,
            "pool_timeout": self.settings.DB_POOL_TIMEOUT,
            "pool_recycle": self.settings.DB_POOL_RECYCLE,
            "pool_pre_ping": True,
            "connect_args": {
                "server_settings": {
                    "application_name": f"{self.settings.APP_NAME}_{self.settings.ENVIRONMENT}",
                    "timezone": "UTC",
                }
            },
        })
        return base_config

    @property
    def engine(self) -> AsyncEngine:
        """Create the async engine on first use."""
        if self._async_engine is None:
            self._async_engine = create_async_engine(self.database_url, **self.engine_kwargs)
            if self.is_sqlite:
                event.listen(self._async_engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
        return self._async_engine

    @property
    def session_factory(self) -> async_sessionmaker[AsyncSession]:
        if self._async_session_factory is None:
            self._async_session_factory = async_sessionmaker(
                self.engine,
                class_=AsyncSession,
                expire_on_commit=False,
                autoflush=False,
            )
        return self._async_session_factory

    async def create_all(self) -> None:
        """Create all tables (tests and local development only)."""
        async with self.engine.begin() as conn:
            await conn.run_sync(DatabaseBase.metadata.create_all)

    async def drop_all(self) -> None:
        async with self.engine.begin() as conn:
            await conn.run_sync(DatabaseBase.metadata.drop_all)

    async def check_health(self) -> Dict[str, Any]:
        """Run a trivial query and report connectivity."""
        try:
            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
            return {"status": "healthy", "database_url": self.engine.url.render_as_string(hide_password=True)}
        except Exception as e:
            logger.error(f"Database health check failed: {e}")
            return {"status": "unhealthy", "type": type(e).__name__}

    async def dispose(self) -> None:
        """Close the async database engine."""
        if self._async_engine is not None:
            await self._async_engine.dispose()
            self._async_engine = None
            self._async_session_factory = None


# =============================================================================
# DATABASE MODELS BASE CLASS
# =============================================================================

# Naming convention for database constraints
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

    Provides shared metadata with constraint naming conventions so that
    Alembic migrations produce stable constraint names.
    """
    metadata = metadata


# =============================================================================
# FASTAPI DEPENDENCY
# =============================================================================

async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    Yield a session bound to the application's database.

    Services commit their own unit of work; anything left open is rolled
    back when the request fails.
    """
    database: DatabaseConfig = request.app.state.database
    async with database.session_factory() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
