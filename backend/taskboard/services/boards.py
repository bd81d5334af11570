"""Board Service: board creation is the one write that must touch two tables atomically.

Invariants:
    - A board row is committed only together with its admin board_users row
    - The payload is fully validated before the transaction opens
    - Any failure after begin() rolls back both inserts and releases the connection
"""

import logging
from typing import Any

from taskboard.core.domain_types import Entity
from taskboard.core.store_protocols import QueryExecutor, Row
from taskboard.infrastructure.database import Database
from taskboard.services import queries
from taskboard.services.associations import write_board_admin
from taskboard.services.pipeline import accept, as_write, insert_one

logger = logging.getLogger(__name__)


async def list_boards(db: QueryExecutor) -> list[Row]:
    """Boards joined with their admins; a board with two admins appears twice."""
    return await db.execute(queries.BOARDS_SELECT, (True,))


async def create_board(db: Database, body: Any) -> Row:
    record = accept(Entity.BOARD, body)
    with as_write(Entity.BOARD):
        async with db.transaction("create_board") as tx:
            board = await insert_one(tx, queries.BOARD_INSERT, (record["name"],))
            await write_board_admin(tx, board["id"], record["admin_user_id"])
    logger.info(
        f"Board {board['id']} created with admin {record['admin_user_id']}",
        extra={"entity": Entity.BOARD.value, "operation": "create"},
    )
    return board
