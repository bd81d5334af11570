"""CardUser ORM: card membership with an ownership flag.

Invariants:
    - References an existing card and user (foreign keys)
    - One row per (card_id, user_id)
    - At least one owner per card is a convention, not a constraint
"""

import uuid

from sqlalchemy import Boolean, ForeignKey, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from taskboard.db.base import Base, new_uuid


class CardUser(Base):
    __tablename__ = "card_users"
    __table_args__ = (UniqueConstraint("card_id", "user_id"),)

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid, primary_key=True, server_default=new_uuid(),
    )
    card_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("cards.id", ondelete="CASCADE"), nullable=False,
    )
    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False,
    )
    is_owner: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
