"""Entity Rule Tables: the canonical validation rules for every writable entity.

Invariants:
    - Exactly one rule set per Entity
    - Keys are canonical field names (the Normalizer's output, the columns' names)
    - Parent-linkage fields (board_id, list_id, card_id) are validated for UUID shape only;
      existence is enforced by the store's foreign keys

Design Decisions:
    - List.name keeps the alphabetic-only, 5-30 characters constraint
    - Card.owner_user_id is optional; when present the card is created with an owner row
"""

from taskboard.core.domain_types import Entity
from taskboard.core.validation import (
    RuleSet,
    alphabetic,
    email_format,
    is_boolean,
    is_date,
    is_string,
    is_uuid,
    length,
    optional,
    required,
)

USER_RULES: RuleSet = {
    "name": required(is_string(), length(1, 100)),
    "email": required(is_string(), length(3, 255), email_format()),
}

BOARD_RULES: RuleSet = {
    "name": required(is_string(), length(1, 100)),
    "admin_user_id": required(is_uuid()),
}

BOARD_USER_RULES: RuleSet = {
    "board_id": required(is_uuid()),
    "user_id": required(is_uuid()),
    "is_admin": required(is_boolean()),
}

LIST_RULES: RuleSet = {
    "name": required(is_string(), alphabetic(), length(5, 30)),
    "board_id": required(is_uuid()),
}

CARD_RULES: RuleSet = {
    "title": required(is_string(), length(5, 50)),
    "description": optional(is_string(), length(0, 255)),
    "due_date": optional(is_date()),
    "list_id": required(is_uuid()),
    "owner_user_id": optional(is_uuid()),
}

CARD_USER_RULES: RuleSet = {
    "card_id": required(is_uuid()),
    "user_id": required(is_uuid()),
    "is_owner": required(is_boolean()),
}

RULES: dict[Entity, RuleSet] = {
    Entity.USER: USER_RULES,
    Entity.BOARD: BOARD_RULES,
    Entity.BOARD_USER: BOARD_USER_RULES,
    Entity.LIST: LIST_RULES,
    Entity.CARD: CARD_RULES,
    Entity.CARD_USER: CARD_USER_RULES,
}
