"""BoardList ORM: a named column of cards, stored in the `lists` table.

Invariants:
    - Belongs to exactly one board
"""

import uuid

from sqlalchemy import ForeignKey, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from taskboard.db.base import Base, new_uuid


class BoardList(Base):
    __tablename__ = "lists"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid, primary_key=True, server_default=new_uuid(),
    )
    name: Mapped[str] = mapped_column(String(30), nullable=False)
    board_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("boards.id", ondelete="CASCADE"), nullable=False,
    )
