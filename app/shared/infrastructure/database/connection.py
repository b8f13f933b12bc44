# 📄 File: app/shared/infrastructure/database/connection.py
#
# 🧭 Purpose (Layman Explanation):
# Manages the connection to the Postgres database. At startup it knocks on the database's door
# a few times, waiting between knocks, and only gives up if nobody ever answers.
#
# 🧪 Purpose (Technical Summary):
# Async SQLAlchemy engine lifecycle (create, verify, dispose) with a tenacity-driven startup
# connectivity check, pool statistics and a reusable health probe.
#
# 🔗 Dependencies:
# - sqlalchemy (async engine)
# - tenacity (startup retry with fixed wait)
# - app/shared/config/database.py (URL normalisation, engine kwargs)
#
# 🔄 Connected Modules / Calls From:
# - app/main.py (lifespan startup/shutdown)
# - app/shared/infrastructure/database/session.py (session factory)
# - app/api/v1/health.py (readiness and detailed health)

import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from tenacity import (
    AsyncRetrying,
    RetryError,
    before_sleep_log,
    retry_if_exception_type,
    stop_after_attempt,
    wait_fixed,
)

from app.shared.config.database import DatabaseConfig
from app.shared.config.settings import Settings, get_settings
from app.shared.core.exceptions import DatabaseUnavailableError

logger = logging.getLogger(__name__)

# Failures worth another attempt: refused/reset sockets, timeouts, driver-level errors
RETRYABLE_ERRORS = (OSError, TimeoutError, SQLAlchemyError)


class DatabaseConnectionManager:
    """
    Manages the PostgreSQL engine with connection pooling,
    a retried startup check and health monitoring.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self._settings = settings or get_settings()
        self._config = DatabaseConfig(self._settings)
        self._engine: Optional[AsyncEngine] = None
        self._health_check_query = text("SELECT 1")

    @property
    def config(self) -> DatabaseConfig:
        return self._config

    async def initialize(self) -> None:
        """
        Create the engine and verify connectivity.

        Raises:
            DatabaseUnavailableError: If every connection attempt fails
        """
        if self._engine is not None:
            logger.warning("Database engine already initialized")
            return

        logger.info(
            "Initializing database connection pool",
            extra={"extra_fields": {
                "database_url": self._config.redacted_url,
                "ssl": self._config.use_ssl,
            }},
        )
        self._engine = create_async_engine(
            self._config.database_url,
            **self._config.engine_kwargs
        )

        try:
            await self.wait_until_available()
        except DatabaseUnavailableError:
            await self._engine.dispose()
            self._engine = None
            raise

        logger.info(
            f"Database connection pool initialized. "
            f"Pool size: {self._settings.DB_POOL_SIZE}, "
            f"Max overflow: {self._settings.DB_MAX_OVERFLOW}"
        )

    async def wait_until_available(self) -> None:
        """
        Run ``SELECT 1`` until it succeeds or the attempt budget is spent.

        Attempts and the pause between them come from
        DB_CONNECT_RETRIES and DB_CONNECT_RETRY_DELAY.
        """
        attempts = self._settings.DB_CONNECT_RETRIES
        retrying = AsyncRetrying(
            stop=stop_after_attempt(attempts),
            wait=wait_fixed(self._settings.DB_CONNECT_RETRY_DELAY),
            retry=retry_if_exception_type(RETRYABLE_ERRORS),
            before_sleep=before_sleep_log(logger, logging.WARNING),
            reraise=False,
        )

        try:
            async for attempt in retrying:
                with attempt:
                    number = attempt.retry_state.attempt_number
                    logger.info(f"Connection attempt {number}/{attempts}...")
                    await self._ping()
        except RetryError as e:
            last_error = e.last_attempt.exception()
            logger.error(
                f"Failed to connect to database after {attempts} attempts: {last_error}"
            )
            raise DatabaseUnavailableError(
                attempts=attempts,
                details={"error": str(last_error)},
            ) from last_error

        logger.info("Database connection successful")

    async def _ping(self) -> None:
        if self._engine is None:
            raise RuntimeError("Database engine not initialized")
        async with self._engine.connect() as conn:
            result = await conn.execute(self._health_check_query)
            if result.scalar() != 1:
                raise DatabaseUnavailableError("Database connectivity test returned an unexpected value")

    async def health_check(self) -> Dict[str, Any]:
        """
        Perform a single database health probe and return structured status.
        """
        timestamp = datetime.now(timezone.utc).isoformat()
        if self._engine is None:
            return {
                "status": "unhealthy",
                "error": "Database engine not initialized",
                "timestamp": timestamp,
            }

        started = datetime.now(timezone.utc)
        try:
            await self._ping()
        except RETRYABLE_ERRORS as e:
            logger.warning(f"Database health check failed: {e}")
            return {
                "status": "unhealthy",
                "error": str(e),
                "type": type(e).__name__,
                "timestamp": timestamp,
            }

        latency = (datetime.now(timezone.utc) - started).total_seconds() * 1000
        return {
            "status": "healthy",
            "latency_ms": round(latency, 2),
            "timestamp": timestamp,
        }

    def get_connection_info(self) -> Dict[str, Any]:
        """
        Get current connection pool information for monitoring.

        Returns:
            Dict containing pool statistics
        """
        if self._engine is None:
            return {"status": "not_initialized"}

        pool = self._engine.pool
        info: Dict[str, Any] = {
            "status": "initialized",
            "database_url": self._config.redacted_url,
            "ssl": self._config.use_ssl,
        }
        # NullPool (tests) has no size accounting
        for name in ("size", "checkedin", "checkedout", "overflow"):
            method = getattr(pool, name, None)
            if callable(method):
                info[name] = method()
        return info

    async def close(self) -> None:
        """Close database engine and all connections."""
        if self._engine is None:
            logger.warning("Database engine not initialized, nothing to close")
            return

        logger.info("Closing database connection pool...")
        await self._engine.dispose()
        self._engine = None
        logger.info("Database connection pool closed successfully")

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


async def init_database() -> None:
    """Initialize the global database connection manager."""
    logger.info("Starting database initialization...")
    await db_manager.initialize()
    logger.info("Database initialization completed successfully.")


async def close_database() -> None:
    """Close the global database connection manager."""
    await db_manager.close()


def get_database_engine() -> AsyncEngine:
    """
    Get the database engine instance.

    Raises:
        RuntimeError: If database is not initialized
    """
    if db_manager.engine is None:
        raise RuntimeError("Database not initialized. Call init_database() first.")

    return db_manager.engine


async def database_health_check() -> Dict[str, Any]:
    """Perform database health check."""
    return await db_manager.health_check()


def get_connection_info() -> Dict[str, Any]:
    """Get database connection pool information."""
    return db_manager.get_connection_info()
