"""Card endpoints: cards, owner-on-create, and card membership."""

from uuid import uuid4


async def test_create_card_minimal(client, list_id):
    res = await client.post(f"/lists/{list_id}/cards", json={"title": "Write docs"})
    assert res.status_code == 201
    card = res.json()
    assert card["list_id"] == list_id
    assert card["description"] is None
    assert card["due_date"] is None
    assert card["owner_user_id"] is None


async def test_create_card_with_details_then_list(client, list_id):
    res = await client.post(
        f"/lists/{list_id}/cards",
        json={"title": "Write docs", "description": "API guide", "due_date": "2025-01-31"},
    )
    assert res.status_code == 201
    card_id = res.json()["id"]

    res = await client.get(f"/lists/{list_id}/cards")
    assert res.status_code == 200
    assert res.json() == [{
        "id": card_id,
        "title": "Write docs",
        "description": "API guide",
        "due_date": "2025-01-31",
    }]


async def test_path_list_overrides_body_list(client, list_id):
    res = await client.post(
        f"/lists/{list_id}/cards", json={"title": "Write docs", "list_id": str(uuid4())},
    )
    assert res.status_code == 201
    assert res.json()["list_id"] == list_id


async def test_invalid_card_fields_reported_together(client, list_id):
    res = await client.post(
        f"/lists/{list_id}/cards", json={"title": "abc", "due_date": "31/01/2025"},
    )
    assert res.status_code == 422
    fields = {d["field"] for d in res.json()["error"]["details"]}
    assert fields == {"title", "due_date"}


async def test_card_with_owner_writes_owner_row(client, list_id, user_id):
    res = await client.post(
        f"/lists/{list_id}/cards", json={"title": "Write docs", "ownerUserId": user_id},
    )
    assert res.status_code == 201
    card = res.json()
    assert card["owner_user_id"] == user_id

    res = await client.get(f"/cards/{card['id']}/users")
    assert res.json() == [{"user_id": user_id, "is_owner": True}]


async def test_card_with_unknown_owner_rolls_back(client, list_id, count_rows, database):
    res = await client.post(
        f"/lists/{list_id}/cards", json={"title": "Write docs", "ownerUserId": str(uuid4())},
    )
    assert res.status_code == 422
    assert res.json()["error"]["code"] == "TRANSACTION_FAILED"
    assert await count_rows("cards") == 0
    assert database.leased_connections == 0


# ─── Membership ──────────────────────────────────────────────────

async def test_add_card_member(client, list_id, user_id):
    card_id = (await client.post(
        f"/lists/{list_id}/cards", json={"title": "Write docs"},
    )).json()["id"]

    res = await client.post(
        f"/cards/{card_id}/users", json={"userId": user_id, "is_owner": True},
    )
    assert res.status_code == 201
    assert res.json()["card_id"] == card_id

    res = await client.get(f"/cards/{card_id}/users")
    assert res.status_code == 200
    assert res.json() == [{"user_id": user_id, "is_owner": True}]


async def test_card_member_requires_is_owner(client, list_id, user_id):
    card_id = (await client.post(
        f"/lists/{list_id}/cards", json={"title": "Write docs"},
    )).json()["id"]

    res = await client.post(f"/cards/{card_id}/users", json={"userId": user_id})
    assert res.status_code == 422
    assert res.json()["error"]["details"][0]["field"] == "is_owner"


async def test_card_users_path_must_be_uuid(client):
    res = await client.get("/cards/not-a-uuid/users")
    assert res.status_code == 400
