"""Board Schemas: boards and board membership rows."""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class BoardResponse(BaseModel):
    """Board as created by POST /boards."""
    id: UUID
    name: str


class BoardSummary(BaseModel):
    """Board joined with one of its admins (GET /boards)."""
    model_config = ConfigDict(populate_by_name=True)

    id: UUID
    name: str
    admin_user_id: UUID = Field(alias="adminUserId")


class BoardUserResponse(BaseModel):
    """Board membership row."""
    model_config = ConfigDict(populate_by_name=True)

    id: UUID
    board_id: UUID = Field(alias="boardId")
    user_id: UUID = Field(alias="userId")
    is_admin: bool = Field(alias="isAdmin")
