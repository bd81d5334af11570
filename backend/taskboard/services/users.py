"""User Service: list and create users (single-statement paths)."""

import logging
from typing import Any

from taskboard.core.domain_types import Entity
from taskboard.core.store_protocols import QueryExecutor, Row
from taskboard.services import queries
from taskboard.services.pipeline import accept, as_write, insert_one

logger = logging.getLogger(__name__)


async def list_users(db: QueryExecutor) -> list[Row]:
    return await db.execute(queries.USERS_SELECT)


async def create_user(db: QueryExecutor, body: Any) -> Row:
    record = accept(Entity.USER, body)
    with as_write(Entity.USER):
        row = await insert_one(
            db, queries.USER_INSERT, (record["name"], record["email"]),
        )
    logger.info(
        f"User {row['id']} created",
        extra={"entity": Entity.USER.value, "operation": "create"},
    )
    return row
