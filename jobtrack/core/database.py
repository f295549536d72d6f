"""
Database Configuration and Session Management

Async engine and session factory management for the job store.
"""

from typing import Optional

from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
    AsyncEngine
)
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import StaticPool
from sqlalchemy import event, text
from sqlalchemy.exc import SQLAlchemyError

from jobtrack.core.config import get_settings
from jobtrack.utils.logger import get_logger

# Initialize logger
logger = get_logger(__name__)


class Base(DeclarativeBase):
    """Base class for SQLAlchemy models."""
    pass


def _unicode_lower(value: Optional[str]) -> Optional[str]:
    return value.lower() if value is not None else None


def _register_sqlite_functions(dbapi_connection, connection_record) -> None:
    """Replace SQLite's ASCII-only lower() with a Unicode-aware one."""
    dbapi_connection.create_function("lower", 1, _unicode_lower)


class DatabaseManager:
    """Database connection and session management."""

    def __init__(self, database_url: Optional[str] = None) -> None:
        """
        Initialize database manager.

        Args:
            database_url: Overrides the configured DATABASE_URL
        """
        settings = get_settings()
        self.database_url = database_url or settings.DATABASE_URL
        self._echo = settings.DEBUG
        self._pool_size = settings.DATABASE_POOL_SIZE
        self._max_overflow = settings.DATABASE_MAX_OVERFLOW
        self._engine: Optional[AsyncEngine] = None
        self._session_factory: Optional[async_sessionmaker[AsyncSession]] = None

    @property
    def engine(self) -> AsyncEngine:
        """Get database engine."""
        if self._engine is None:
            raise RuntimeError("Database not initialized. Call init_database() first.")
        return self._engine

    @property
    def session_factory(self) -> async_sessionmaker[AsyncSession]:
        """Get session factory."""
        if self._session_factory is None:
            raise RuntimeError("Database not initialized. Call init_database() first.")
        return self._session_factory

    async def init_database(self) -> None:
        """Initialize database connections."""
        try:
            engine_kwargs = {
                "echo": self._echo,
            }

            # SQLite-specific configuration
            if self.database_url.startswith("sqlite"):
                engine_kwargs["poolclass"] = StaticPool
                engine_kwargs["connect_args"] = {"check_same_thread": False}
            else:
                # PostgreSQL-specific configuration
                engine_kwargs["pool_size"] = self._pool_size
                engine_kwargs["max_overflow"] = self._max_overflow
                engine_kwargs["pool_pre_ping"] = True

            self._engine = create_async_engine(self.database_url, **engine_kwargs)
            if self.database_url.startswith("sqlite"):
                event.listen(self._engine.sync_engine, "connect", _register_sqlite_functions)

            self._session_factory = async_sessionmaker(
                bind=self._engine,
                class_=AsyncSession,
                expire_on_commit=False,
                autoflush=False,
            )

            await self._test_database_connection()
            logger.info("Database connection initialized successfully")

        except Exception as e:
            logger.error(f"Failed to initialize database: {e}")
            raise

    async def _test_database_connection(self) -> None:
        """Test database connection."""
        try:
            async with self._engine.begin() as conn:
                await conn.execute(text("SELECT 1"))
            logger.info("Database connection test successful")
        except Exception as e:
            logger.error(f"Database connection test failed: {e}")
            raise

    async def check_connection(self) -> bool:
        """Run a trivial query, reporting failure instead of raising."""
        try:
            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
            return True
        except (SQLAlchemyError, RuntimeError) as e:
            logger.warning(f"Database health check failed: {e}")
            return False

    async def create_tables(self) -> None:
        """Create database tables."""
        # Register models on Base.metadata
        import jobtrack.models  # noqa: F401

        try:
            async with self.engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
            logger.info("Database tables created successfully")
        except Exception as e:
            logger.error(f"Failed to create database tables: {e}")
            raise

    async def close_connections(self) -> None:
        """Close database connections."""
        if self._engine:
            await self._engine.dispose()
            self._engine = None
            self._session_factory = None
            logger.info("Database engine disposed")
