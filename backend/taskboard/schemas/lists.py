"""List Schemas."""

from uuid import UUID

from pydantic import BaseModel


class ListResponse(BaseModel):
    id: UUID
    name: str


class ListCreated(ListResponse):
    board_id: UUID
