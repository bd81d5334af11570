"""Board ORM: top of the board -> list -> card hierarchy.

Invariants:
    - A board is only ever inserted in the same transaction as its admin BoardUser row
"""

import uuid

from sqlalchemy import String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from taskboard.db.base import Base, new_uuid


class Board(Base):
    __tablename__ = "boards"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid, primary_key=True, server_default=new_uuid(),
    )
    name: Mapped[str] = mapped_column(String(100), nullable=False)
