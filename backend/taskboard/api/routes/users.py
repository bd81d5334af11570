"""User Routes: GET/POST /users."""

from typing import Any

from fastapi import APIRouter, Depends, status

from taskboard.api.deps import json_body
from taskboard.infrastructure.database import Database, get_db
from taskboard.schemas.users import UserResponse
from taskboard.services import users as user_service

router = APIRouter(prefix="/users", tags=["users"])


@router.get("", response_model=list[UserResponse])
async def list_users(db: Database = Depends(get_db)):
    rows = await user_service.list_users(db)
    return [UserResponse.model_validate(r) for r in rows]


@router.post(
    "", response_model=UserResponse, status_code=status.HTTP_201_CREATED,
)
async def create_user(
    body: Any = Depends(json_body), db: Database = Depends(get_db),
):
    row = await user_service.create_user(db, body)
    return UserResponse.model_validate(row)
