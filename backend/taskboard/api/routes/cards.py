"""Card Routes: card membership."""

from typing import Any
from uuid import UUID

from fastapi import APIRouter, Depends, status

from taskboard.api.deps import json_body
from taskboard.infrastructure.database import Database, get_db
from taskboard.schemas.cards import CardUserCreated, CardUserResponse
from taskboard.services import associations

router = APIRouter(prefix="/cards", tags=["cards"])


@router.get("/{cardId}/users", response_model=list[CardUserResponse])
async def list_card_users(cardId: UUID, db: Database = Depends(get_db)):
    rows = await associations.list_card_users(db, cardId)
    return [CardUserResponse.model_validate(r) for r in rows]


@router.post(
    "/{cardId}/users", response_model=CardUserCreated,
    status_code=status.HTTP_201_CREATED,
)
async def add_card_user(
    cardId: str,
    body: Any = Depends(json_body),
    db: Database = Depends(get_db),
):
    row = await associations.add_card_user(db, cardId, body)
    return CardUserCreated.model_validate(row)
