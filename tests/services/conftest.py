"""Service test fixtures — async DB + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use test DB session
    - db_manager patched so the readiness probe sees the test engine
    - SQLite foreign keys are enforced, as on PostgreSQL
    - seed_reference inserts the same committees/countries as reference_snapshot

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
"""

import pytest
from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

from munreg.db.base import Base
from munreg.infrastructure.database import get_db, DatabaseSessionManager
import munreg.infrastructure.database as db_module
import munreg.models  # noqa: F401
from munreg.main import app
from munreg.models.committee import Committee, CommitteeCountry
from munreg.models.staff_member import StaffMember


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )

    @event.listens_for(engine.sync_engine, "connect")
    def _enable_foreign_keys(dbapi_connection, _record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
async def seed_reference(test_db, reference_snapshot):
    """Committees and countries matching reference_snapshot, in id order."""
    committees = []
    for ref in reference_snapshot.committees:
        committee = Committee(
            id=ref.id, name=ref.name,
            displayname=ref.displayname, difficulty=ref.difficulty,
        )
        test_db.add(committee)
        committees.append(committee)
    await test_db.flush()
    for ref in reference_snapshot.committee_countries:
        test_db.add(CommitteeCountry(committee_id=ref.committee_id, country=ref.country))
    await test_db.commit()
    return committees


@pytest.fixture
async def seed_staff(test_db):
    member = StaffMember(
        name="Grace Hopper", position="Secretary-General",
        image="https://example.org/grace.png",
    )
    test_db.add(member)
    await test_db.commit()
    await test_db.refresh(member)
    return member


@pytest.fixture
async def auth_headers(client, signup_payload):
    """Sign up the default user and return its bearer header."""
    res = await client.post("/api/v1/auth/signup", json=signup_payload)
    assert res.status_code == 201, res.text
    token = res.json()["data"]["token"]
    return {"Authorization": f"Bearer {token}"}
