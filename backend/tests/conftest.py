"""Root conftest: shared configuration and database fixtures.

Invariants:
    - Every test gets a fresh in-memory SQLite database with the full schema
    - pooled_database is file-backed with a sized pool, for checkout/checkin tests
    - Foreign keys are enforced, so referential failures are real store errors
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("LOG_FORMAT", "text")

import pytest  # noqa: E402
from sqlalchemy import event  # noqa: E402
from sqlalchemy.ext.asyncio import create_async_engine  # noqa: E402

import taskboard.models  # noqa: E402,F401
from taskboard.db.base import Base  # noqa: E402
from taskboard.infrastructure.database import Database  # noqa: E402


def _enable_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


@pytest.fixture
async def test_engine():
    engine = create_async_engine("sqlite+aiosqlite:///:memory:", echo=False)
    event.listen(engine.sync_engine, "connect", _enable_foreign_keys)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
async def database(test_engine):
    return Database(test_engine, statement_timeout=5.0)


@pytest.fixture
def count_rows(database):
    """Row count of a table, read through the handle under test."""
    async def _count(table: str) -> int:
        rows = await database.execute(f"SELECT count(*) AS n FROM {table}")
        return rows[0]["n"]
    return _count


@pytest.fixture
async def pooled_database(tmp_path):
    """File-backed store behind a real sized pool: each checkout is its own connection."""
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'taskboard.db'}",
        pool_size=10, max_overflow=0, pool_timeout=5,
    )
    event.listen(engine.sync_engine, "connect", _enable_foreign_keys)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield Database(engine, acquire_timeout=5, statement_timeout=5.0)
    await engine.dispose()
