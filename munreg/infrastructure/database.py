"""Database Access — async engine, request-scoped sessions, connectivity ping.

Invariants:
    - A session that raises a SQLAlchemy error is rolled back before the error
      leaves the context, and surfaces as DatabaseError (503)
    - Errors the caller handles itself (e.g. IntegrityError caught in a service)
      never reach the mapping, the session is just closed
    - ping() never raises: readiness is a yes/no answer

Design Decisions:
    - One manager per process, created by the FastAPI lifespan via init_db();
      get_db() and ping() read the module-level db_manager at call time so
      tests can swap it
    - SQLite URLs (local runs, tests) get no pool sizing: their pools take none
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy import text
from sqlalchemy.exc import (
    DBAPIError, IntegrityError, OperationalError, SQLAlchemyError,
)
from sqlalchemy.ext.asyncio import (
    AsyncSession, async_sessionmaker, create_async_engine,
)

from munreg.core.errors import DatabaseError

logger = logging.getLogger(__name__)

# Most specific first: OperationalError and IntegrityError are DBAPIErrors.
_ERROR_MAP: tuple[tuple[type[SQLAlchemyError], str, str], ...] = (
    (IntegrityError, "Integrity constraint violated", "commit"),
    (OperationalError, "Connection or operational error", "execute"),
    (DBAPIError, "Database driver error", "query"),
)


def to_database_error(exc: SQLAlchemyError) -> DatabaseError:
    for exc_type, message, operation in _ERROR_MAP:
        if isinstance(exc, exc_type):
            return DatabaseError(message, operation)
    return DatabaseError("Database operation failed", "unknown")


def engine_options(database_url: str, pool_size: int, max_overflow: int) -> dict:
    options: dict = {"pool_pre_ping": True}
    if not database_url.startswith("sqlite"):
        options.update(
            pool_size=pool_size, max_overflow=max_overflow, pool_recycle=3600,
        )
    return options


class DatabaseSessionManager:
    """Owns the engine and hands out sessions that roll back on failure."""

    def __init__(
        self, database_url: str, pool_size: int = 20, max_overflow: int = 10,
    ):
        self.engine = create_async_engine(
            database_url, **engine_options(database_url, pool_size, max_overflow),
        )
        self._session_factory = async_sessionmaker(
            self.engine, class_=AsyncSession, expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        session = self._session_factory()
        try:
            yield session
        except SQLAlchemyError as exc:
            await session.rollback()
            error = to_database_error(exc)
            logger.error(
                f"Session rolled back: {exc}",
                extra={"error_code": error.code},
            )
            raise error from exc
        finally:
            await session.close()

    async def ping(self) -> bool:
        try:
            async with self.session() as db:
                await db.execute(text("SELECT 1"))
        except Exception as exc:
            logger.error(f"Database ping failed: {exc}")
            return False
        return True

    async def dispose(self) -> None:
        await self.engine.dispose()


db_manager: DatabaseSessionManager | None = None


def init_db(database_url: str, **kwargs) -> DatabaseSessionManager:
    global db_manager
    db_manager = DatabaseSessionManager(database_url, **kwargs)
    return db_manager


async def ping() -> bool:
    """True when a manager exists and its database answers."""
    return db_manager is not None and await db_manager.ping()


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency: one session per request."""
    if db_manager is None:
        raise RuntimeError("Database not initialized")
    async with db_manager.session() as session:
        yield session
