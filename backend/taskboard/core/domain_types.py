"""Domain Types: entity names and transaction states as enums instead of raw strings.

Invariants:
    - Every entity the pipeline writes has exactly one Entity member
    - TransactionState is terminal at COMMITTED and ROLLED_BACK
"""

from enum import Enum


class Entity(str, Enum):
    """Entities accepted by the validation pipeline."""
    USER = "user"
    BOARD = "board"
    BOARD_USER = "board_user"
    LIST = "list"
    CARD = "card"
    CARD_USER = "card_user"


class TransactionState(str, Enum):
    """Transaction Coordinator states: IDLE -> OPEN -> COMMITTED | ROLLED_BACK."""
    IDLE = "idle"
    OPEN = "open"
    COMMITTED = "committed"
    ROLLED_BACK = "rolled_back"

    @property
    def is_terminal(self) -> bool:
        return self in (TransactionState.COMMITTED, TransactionState.ROLLED_BACK)
