"""ORM Models: table shape for every entity the pipeline writes.

Invariants:
    - All models inherit from Base (db/base.py)
    - Services never query through these classes; they document and create the schema

Design Decisions:
    - One file per entity
    - All models imported here so Base.metadata is complete before create_all
"""

from taskboard.models.user import User  # noqa: F401
from taskboard.models.board import Board  # noqa: F401
from taskboard.models.board_user import BoardUser  # noqa: F401
from taskboard.models.board_list import BoardList  # noqa: F401
from taskboard.models.card import Card  # noqa: F401
from taskboard.models.card_user import CardUser  # noqa: F401
