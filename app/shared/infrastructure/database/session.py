# 📄 File: app/shared/infrastructure/database/session.py
#
# 🧭 Purpose (Layman Explanation):
# Manages database sessions (conversations with the database) so each request gets its own
# clean session, changes are saved when everything worked, and undone when something failed.
#
# 🧪 Purpose (Technical Summary):
# Async SQLAlchemy session management with FastAPI dependency injection, commit-on-success /
# rollback-on-error transaction handling, and translation of connectivity failures into 503s.
#
# 🔗 Dependencies:
# - sqlalchemy.ext.asyncio (AsyncSession, async_sessionmaker)
# - app/shared/infrastructure/database/connection.py (database engine)
#
# 🔄 Connected Modules / Calls From:
# - app/modules/case_packs/presentation/dependencies.py (repository wiring)
# - app/main.py (lifespan initialisation)

import logging
import socket
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from sqlalchemy import exc
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.shared.core.exceptions import DatabaseError, DatabaseUnavailableError, FreshShareException
from app.shared.infrastructure.database.connection import get_database_engine

logger = logging.getLogger(__name__)


def is_connectivity_error(error: BaseException) -> bool:
    """True for failures that mean the database could not be reached."""
    if isinstance(error, (exc.OperationalError, exc.InterfaceError)):
        return True
    if isinstance(error, exc.DBAPIError) and error.connection_invalidated:
        return True
    return isinstance(error, (ConnectionError, TimeoutError, socket.gaierror))


class DatabaseSessionManager:
    """
    Manages database sessions with transaction handling and automatic cleanup.
    """

    def __init__(self):
        self._session_factory: Optional[async_sessionmaker[AsyncSession]] = None

    def initialize(self) -> None:
        """Initialize the session factory with database engine."""
        engine = get_database_engine()
        self._session_factory = async_sessionmaker(
            engine,
            class_=AsyncSession,
            expire_on_commit=False,  # Keep objects accessible after commit
            autoflush=False,
        )
        logger.info("Database session factory initialized successfully")

    def reset(self) -> None:
        self._session_factory = None

    @asynccontextmanager
    async def get_session(self) -> AsyncGenerator[AsyncSession, None]:
        """
        Get an async database session with automatic transaction management.

        Yields:
            AsyncSession: Database session

        Raises:
            DatabaseUnavailableError: If the database cannot be reached
            DatabaseError: If the session is not ready or a statement fails
        """
        if self._session_factory is None:
            raise DatabaseError("Session manager not initialized")

        session: AsyncSession = self._session_factory()

        try:
            yield session
            await session.commit()
            logger.debug("Database transaction committed successfully")

        except FreshShareException:
            await session.rollback()
            raise

        except exc.SQLAlchemyError as e:
            await session.rollback()
            if is_connectivity_error(e):
                logger.error(f"Database unreachable, transaction rolled back: {e}")
                raise DatabaseUnavailableError(details={"error": str(e)}) from e
            logger.error(f"Database error occurred, transaction rolled back: {e}")
            raise DatabaseError(f"Database operation failed: {e}") from e

        except Exception:
            await session.rollback()
            raise

        finally:
            await session.close()

    @property
    def is_initialized(self) -> bool:
        """Check if session manager is initialized."""
        return self._session_factory is not None


# Global session manager instance
session_manager = DatabaseSessionManager()


def initialize_sessions() -> None:
    """Initialize the global database session manager."""
    session_manager.initialize()


# FastAPI dependency for getting database sessions
async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides database sessions.

    Usage:
        @router.post("/case-pack")
        async def upsert(db: AsyncSession = Depends(get_db_session)):
            ...

    Yields:
        AsyncSession: Database session
    """
    async with session_manager.get_session() as session:
        yield session

