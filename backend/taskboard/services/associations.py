"""Association Writer: membership rows, including the ones a new parent must be born with.

Invariants:
    - write_board_admin / write_card_owner run on the parent's open Transaction;
      a failure propagates and rolls back the parent insert
    - add_board_user / add_card_user are single-statement writes on a pooled connection
"""

import logging
from typing import Any
from uuid import UUID

from taskboard.core.domain_types import Entity
from taskboard.core.store_protocols import QueryExecutor, Row
from taskboard.infrastructure.database import Database, Transaction
from taskboard.services import queries
from taskboard.services.pipeline import accept, as_uuid, as_write, insert_one

logger = logging.getLogger(__name__)


# ─── Dependent inserts (inside the parent's transaction) ────────

async def write_board_admin(tx: Transaction, board_id: Any, user_id: UUID) -> Row:
    """Pair a freshly inserted board with its admin membership row."""
    return await insert_one(
        tx, queries.BOARD_USER_INSERT, (as_uuid(board_id), user_id, True),
    )


async def write_card_owner(tx: Transaction, card_id: Any, user_id: UUID) -> Row:
    """Pair a freshly inserted card with its owner membership row."""
    return await insert_one(
        tx, queries.CARD_USER_INSERT, (as_uuid(card_id), user_id, True),
    )


# ─── Membership reads and standalone inserts ────────────────────

async def list_board_users(db: QueryExecutor, board_id: UUID) -> list[Row]:
    return await db.execute(queries.BOARD_USERS_SELECT, (board_id,))


async def add_board_user(db: Database, board_id: str, body: Any) -> Row:
    """POST /boards/{boardId}/users: the path's board id wins over the body's."""
    record = accept(Entity.BOARD_USER, body, {"board_id": board_id})
    with as_write(Entity.BOARD_USER):
        row = await insert_one(
            db, queries.BOARD_USER_INSERT,
            (record["board_id"], record["user_id"], record["is_admin"]),
        )
    logger.info(
        f"User {record['user_id']} added to board {record['board_id']}",
        extra={"entity": Entity.BOARD_USER.value, "operation": "create"},
    )
    return row


async def list_card_users(db: QueryExecutor, card_id: UUID) -> list[Row]:
    return await db.execute(queries.CARD_USERS_SELECT, (card_id,))


async def add_card_user(db: Database, card_id: str, body: Any) -> Row:
    """POST /cards/{cardId}/users: the path's card id wins over the body's."""
    record = accept(Entity.CARD_USER, body, {"card_id": card_id})
    with as_write(Entity.CARD_USER):
        row = await insert_one(
            db, queries.CARD_USER_INSERT,
            (record["card_id"], record["user_id"], record["is_owner"]),
        )
    logger.info(
        f"User {record['user_id']} added to card {record['card_id']}",
        extra={"entity": Entity.CARD_USER.value, "operation": "create"},
    )
    return row
