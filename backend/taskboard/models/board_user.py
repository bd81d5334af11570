"""BoardUser ORM: board membership with an admin flag.

Invariants:
    - References an existing board and user (foreign keys)
    - One row per (board_id, user_id)
    - Every board has at least one row with is_admin = true
"""

import uuid

from sqlalchemy import Boolean, ForeignKey, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from taskboard.db.base import Base, new_uuid


class BoardUser(Base):
    __tablename__ = "board_users"
    __table_args__ = (UniqueConstraint("board_id", "user_id"),)

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid, primary_key=True, server_default=new_uuid(),
    )
    board_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("boards.id", ondelete="CASCADE"), nullable=False,
    )
    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False,
    )
    is_admin: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
