"""User endpoints: creation through the validation pipeline and idempotent reads."""


async def test_list_users_empty(client):
    res = await client.get("/users")
    assert res.status_code == 200
    assert res.json() == []


async def test_create_user_returns_created_row(client):
    res = await client.post("/users", json={"name": "Ana", "email": "ana@example.com"})
    assert res.status_code == 201
    body = res.json()
    assert set(body) == {"id", "name", "email"}
    assert body["name"] == "Ana"
    assert len(body["id"]) == 36


async def test_missing_email_returns_422_naming_email(client):
    res = await client.post("/users", json={"name": "Ana"})
    assert res.status_code == 422
    error = res.json()["error"]
    assert error["code"] == "VALIDATION_ERROR"
    assert [d["field"] for d in error["details"]] == ["email"]


async def test_every_bad_field_reported(client):
    res = await client.post("/users", json={"name": 7, "email": "nope"})
    assert res.status_code == 422
    fields = {d["field"] for d in res.json()["error"]["details"]}
    assert fields == {"name", "email"}


async def test_malformed_json_returns_422(client):
    res = await client.post(
        "/users", content=b"{not json", headers={"content-type": "application/json"},
    )
    assert res.status_code == 422
    assert res.json()["error"]["details"][0]["field"] == "body"


async def test_non_object_body_returns_422(client):
    res = await client.post("/users", json=["Ana", "ana@example.com"])
    assert res.status_code == 422
    assert res.json()["error"]["details"][0]["rule"] == "object"


async def test_repeated_reads_are_identical(client, user_id, other_user_id):
    first = await client.get("/users")
    second = await client.get("/users")
    assert first.status_code == second.status_code == 200
    assert first.json() == second.json()
    assert len(first.json()) == 2
