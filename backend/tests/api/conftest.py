"""API test fixtures: FastAPI app over the test database.

Invariants:
    - get_db dependency overridden to return the test Database handle
    - The module-level handle is patched too, for the readiness probe
"""

from contextlib import asynccontextmanager

import pytest
from httpx import ASGITransport, AsyncClient

import taskboard.infrastructure.database as db_module
from taskboard.infrastructure.database import Database, get_db
from taskboard.main import app


@asynccontextmanager
async def _serve(database: Database):
    app.dependency_overrides[get_db] = lambda: database
    original = db_module.database
    db_module.database = database
    try:
        async with AsyncClient(
            transport=ASGITransport(app=app), base_url="http://test",
        ) as c:
            yield c
    finally:
        app.dependency_overrides.clear()
        db_module.database = original


@pytest.fixture
async def client(database):
    async with _serve(database) as c:
        yield c


@pytest.fixture
async def pooled_client(pooled_database):
    async with _serve(pooled_database) as c:
        yield c


async def _create_user(client, name: str, email: str) -> str:
    res = await client.post("/users", json={"name": name, "email": email})
    assert res.status_code == 201, res.text
    return res.json()["id"]


@pytest.fixture
async def user_id(client) -> str:
    return await _create_user(client, "Ana", "ana@example.com")


@pytest.fixture
async def other_user_id(client) -> str:
    return await _create_user(client, "Bruno", "bruno@example.com")


@pytest.fixture
async def board_id(client, user_id) -> str:
    res = await client.post(
        "/boards", json={"name": "Roadmap", "adminUserId": user_id},
    )
    assert res.status_code == 201, res.text
    return res.json()["id"]


@pytest.fixture
async def list_id(client, board_id) -> str:
    res = await client.post(f"/boards/{board_id}/lists", json={"name": "Backlog"})
    assert res.status_code == 201, res.text
    return res.json()["id"]
