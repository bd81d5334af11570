"""List Service: lists belong to the board named in the request path."""

import logging
from typing import Any
from uuid import UUID

from taskboard.core.domain_types import Entity
from taskboard.core.store_protocols import QueryExecutor, Row
from taskboard.services import queries
from taskboard.services.pipeline import accept, as_write, insert_one

logger = logging.getLogger(__name__)


async def list_lists(db: QueryExecutor, board_id: UUID) -> list[Row]:
    return await db.execute(queries.LISTS_SELECT, (board_id,))


async def create_list(db: QueryExecutor, board_id: str, body: Any) -> Row:
    """Create a list under `board_id`; a board_id in the body is ignored."""
    record = accept(Entity.LIST, body, {"board_id": board_id})
    with as_write(Entity.LIST):
        row = await insert_one(
            db, queries.LIST_INSERT, (record["name"], record["board_id"]),
        )
    logger.info(
        f"List {row['id']} created on board {record['board_id']}",
        extra={"entity": Entity.LIST.value, "operation": "create"},
    )
    return row
