"""Entity Normalizer: canonical field mapping and path precedence."""

import pytest

from taskboard.core.domain_types import Entity
from taskboard.core.normalize import normalize

PATH_BOARD = "11111111-1111-4111-8111-111111111111"
BODY_BOARD = "22222222-2222-4222-8222-222222222222"


def test_camel_case_fields_map_to_canonical_names():
    candidate = normalize(
        Entity.BOARD_USER, {"userId": "u", "isAdmin": True}, {"board_id": "b"},
    )
    assert candidate == {"user_id": "u", "is_admin": True, "board_id": "b"}


def test_path_value_overrides_body_value():
    candidate = normalize(
        Entity.LIST, {"name": "Backlog", "board_id": BODY_BOARD},
        {"board_id": PATH_BOARD},
    )
    assert candidate["board_id"] == PATH_BOARD


def test_path_value_overrides_camel_case_body_value():
    candidate = normalize(
        Entity.LIST, {"name": "Backlog", "boardId": BODY_BOARD},
        {"board_id": PATH_BOARD},
    )
    assert candidate["board_id"] == PATH_BOARD


def test_unknown_body_fields_dropped():
    candidate = normalize(Entity.USER, {"name": "Ana", "isRoot": True})
    assert candidate == {"name": "Ana"}


def test_first_listed_spelling_wins():
    candidate = normalize(
        Entity.BOARD, {"adminUserId": "first", "admin_user_id": "second"},
    )
    assert candidate["admin_user_id"] == "first"


def test_body_is_not_mutated():
    body = {"title": "Write docs"}
    normalize(Entity.CARD, body, {"list_id": "l"})
    assert body == {"title": "Write docs"}


def test_missing_fields_stay_missing():
    assert normalize(Entity.CARD, {}, {"list_id": "l"}) == {"list_id": "l"}


def test_unknown_path_field_raises():
    with pytest.raises(KeyError):
        normalize(Entity.USER, {}, {"board_id": PATH_BOARD})


def test_null_spelling_does_not_shadow_a_later_one():
    candidate = normalize(
        Entity.BOARD, {"adminUserId": None, "admin_user_id": BODY_BOARD},
    )
    assert candidate["admin_user_id"] == BODY_BOARD
