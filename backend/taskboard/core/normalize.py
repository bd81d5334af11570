"""Entity Normalizer: maps raw request fields onto each entity's canonical field names.

Invariants:
    - PURE: no IO, input mappings are never mutated
    - Body fields not declared for the entity are dropped
    - Path-derived values always override same-named body fields
    - When a body carries several accepted spellings, the first listed non-null one wins
"""

from typing import Any, Mapping

from taskboard.core.domain_types import Entity

# canonical field -> accepted raw body names, in priority order
FIELD_ALIASES: dict[Entity, dict[str, tuple[str, ...]]] = {
    Entity.USER: {
        "name": ("name",),
        "email": ("email",),
    },
    Entity.BOARD: {
        "name": ("name",),
        "admin_user_id": ("adminUserId", "admin_user_id"),
    },
    Entity.BOARD_USER: {
        "board_id": ("boardId", "board_id"),
        "user_id": ("userId", "user_id"),
        "is_admin": ("isAdmin", "is_admin"),
    },
    Entity.LIST: {
        "name": ("name",),
        "board_id": ("boardId", "board_id"),
    },
    Entity.CARD: {
        "title": ("title",),
        "description": ("description",),
        "due_date": ("due_date", "dueDate"),
        "list_id": ("listId", "list_id"),
        "owner_user_id": ("ownerUserId", "owner_user_id"),
    },
    Entity.CARD_USER: {
        "card_id": ("cardId", "card_id"),
        "user_id": ("userId", "user_id"),
        "is_owner": ("is_owner", "isOwner"),
    },
}


def normalize(
    entity: Entity,
    body: Mapping[str, Any],
    path: Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    """Build the candidate record for `entity` from a request body and path values."""
    candidate: dict[str, Any] = {}
    for canonical, raw_names in FIELD_ALIASES[entity].items():
        for raw in raw_names:
            if body.get(raw) is not None:
                candidate[canonical] = body[raw]
                break
    for canonical, value in (path or {}).items():
        if canonical not in FIELD_ALIASES[entity]:
            raise KeyError(f"{canonical!r} is not a field of {entity.value}")
        candidate[canonical] = value
    return candidate
