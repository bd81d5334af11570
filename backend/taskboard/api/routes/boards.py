"""Board Routes: boards, their members and their lists.

Invariants:
    - POST /boards commits the board and its admin membership atomically
    - Path boardId overrides any boardId/board_id sent in a POST body
"""

from typing import Any
from uuid import UUID

from fastapi import APIRouter, Depends, status

from taskboard.api.deps import json_body
from taskboard.infrastructure.database import Database, get_db
from taskboard.schemas.boards import BoardResponse, BoardSummary, BoardUserResponse
from taskboard.schemas.lists import ListCreated, ListResponse
from taskboard.services import associations
from taskboard.services import boards as board_service
from taskboard.services import lists as list_service

router = APIRouter(prefix="/boards", tags=["boards"])


@router.get("", response_model=list[BoardSummary])
async def list_boards(db: Database = Depends(get_db)):
    rows = await board_service.list_boards(db)
    return [BoardSummary.model_validate(r) for r in rows]


@router.post(
    "", response_model=BoardResponse, status_code=status.HTTP_201_CREATED,
)
async def create_board(
    body: Any = Depends(json_body), db: Database = Depends(get_db),
):
    row = await board_service.create_board(db, body)
    return BoardResponse.model_validate(row)


@router.get("/{boardId}/users", response_model=list[BoardUserResponse])
async def list_board_users(boardId: UUID, db: Database = Depends(get_db)):
    rows = await associations.list_board_users(db, boardId)
    return [BoardUserResponse.model_validate(r) for r in rows]


@router.post(
    "/{boardId}/users", response_model=BoardUserResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_board_user(
    boardId: str,
    body: Any = Depends(json_body),
    db: Database = Depends(get_db),
):
    row = await associations.add_board_user(db, boardId, body)
    return BoardUserResponse.model_validate(row)


@router.get("/{boardId}/lists", response_model=list[ListResponse])
async def list_lists(boardId: UUID, db: Database = Depends(get_db)):
    rows = await list_service.list_lists(db, boardId)
    return [ListResponse.model_validate(r) for r in rows]


@router.post(
    "/{boardId}/lists", response_model=ListCreated,
    status_code=status.HTTP_201_CREATED,
)
async def create_list(
    boardId: str,
    body: Any = Depends(json_body),
    db: Database = Depends(get_db),
):
    row = await list_service.create_list(db, boardId, body)
    return ListCreated.model_validate(row)
