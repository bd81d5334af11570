"""List Routes: cards within a list."""

from typing import Any
from uuid import UUID

from fastapi import APIRouter, Depends, status

from taskboard.api.deps import json_body
from taskboard.infrastructure.database import Database, get_db
from taskboard.schemas.cards import CardCreated, CardResponse
from taskboard.services import cards as card_service

router = APIRouter(prefix="/lists", tags=["lists"])


@router.get("/{listId}/cards", response_model=list[CardResponse])
async def list_cards(listId: UUID, db: Database = Depends(get_db)):
    rows = await card_service.list_cards(db, listId)
    return [CardResponse.model_validate(r) for r in rows]


@router.post(
    "/{listId}/cards", response_model=CardCreated,
    status_code=status.HTTP_201_CREATED,
)
async def create_card(
    listId: str,
    body: Any = Depends(json_body),
    db: Database = Depends(get_db),
):
    """Create a card; with ownerUserId the owner membership is written atomically."""
    row = await card_service.create_card(db, listId, body)
    return CardCreated.model_validate(row)
