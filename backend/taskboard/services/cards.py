"""Card Service: cards belong to the list named in the request path.

Invariants:
    - Without ownerUserId, creation is a single statement
    - With ownerUserId, the card and its owner card_users row commit together or not at all
"""

import logging
from typing import Any
from uuid import UUID

from taskboard.core.domain_types import Entity
from taskboard.core.store_protocols import QueryExecutor, Row
from taskboard.infrastructure.database import Database
from taskboard.services import queries
from taskboard.services.associations import write_card_owner
from taskboard.services.pipeline import accept, as_write, insert_one

logger = logging.getLogger(__name__)


async def list_cards(db: QueryExecutor, list_id: UUID) -> list[Row]:
    return await db.execute(queries.CARDS_SELECT, (list_id,))


async def create_card(db: Database, list_id: str, body: Any) -> Row:
    record = accept(Entity.CARD, body, {"list_id": list_id})
    params = (
        record["title"], record["description"], record["due_date"], record["list_id"],
    )
    owner = record["owner_user_id"]
    with as_write(Entity.CARD):
        if owner is None:
            card = await insert_one(db, queries.CARD_INSERT, params)
        else:
            async with db.transaction("create_card") as tx:
                card = await insert_one(tx, queries.CARD_INSERT, params)
                await write_card_owner(tx, card["id"], owner)
    logger.info(
        f"Card {card['id']} created on list {record['list_id']}",
        extra={"entity": Entity.CARD.value, "operation": "create"},
    )
    return {**card, "owner_user_id": owner}
