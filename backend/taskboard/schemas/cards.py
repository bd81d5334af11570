"""Card Schemas: cards and card membership rows.

Invariants:
    - CardCreated.owner_user_id is set only when the card was created with an owner row
"""

from datetime import date
from uuid import UUID

from pydantic import BaseModel


class CardResponse(BaseModel):
    id: UUID
    title: str
    description: str | None = None
    due_date: date | None = None


class CardCreated(CardResponse):
    list_id: UUID
    owner_user_id: UUID | None = None


class CardUserResponse(BaseModel):
    user_id: UUID
    is_owner: bool


class CardUserCreated(CardUserResponse):
    id: UUID
    card_id: UUID
