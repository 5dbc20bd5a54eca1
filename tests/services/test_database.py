"""Database session manager — error mapping and connectivity ping."""

import pytest
from sqlalchemy import text
from sqlalchemy.exc import IntegrityError, OperationalError, SQLAlchemyError

from munreg.core.errors import DatabaseError
from munreg.infrastructure.database import (
    DatabaseSessionManager, engine_options, to_database_error,
)


@pytest.mark.parametrize("exc,operation", [
    (IntegrityError("INSERT", {}, Exception("unique")), "commit"),
    (OperationalError("SELECT", {}, Exception("gone")), "execute"),
    (SQLAlchemyError("boom"), "unknown"),
])
def test_errors_map_to_database_error(exc, operation):
    error = to_database_error(exc)
    assert error.operation == operation
    assert error.http_status == 503


def test_sqlite_gets_no_pool_sizing():
    assert engine_options("sqlite+aiosqlite:///:memory:", 5, 5) == {"pool_pre_ping": True}
    options = engine_options("postgresql+asyncpg://u:p@db/x", 5, 2)
    assert options["pool_size"] == 5
    assert options["max_overflow"] == 2


async def test_failing_statement_surfaces_as_database_error():
    manager = DatabaseSessionManager("sqlite+aiosqlite:///:memory:")
    try:
        with pytest.raises(DatabaseError):
            async with manager.session() as db:
                await db.execute(text("SELECT * FROM no_such_table"))
        assert await manager.ping()
    finally:
        await manager.dispose()
