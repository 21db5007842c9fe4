"""Admin Setup — the one-shot bootstrap of the first ADMIN account."""


async def test_setup_creates_first_admin(client):
    res = await client.post(
        "/api/admin/setup",
        json={"email": "boss@shpizza.test", "password": "supersecret"},
    )
    assert res.status_code == 201
    body = res.json()
    assert body["message"] == "Admin user created successfully"
    assert body["user"]["role"] == "ADMIN"


async def test_setup_refused_once_an_admin_exists(client, admin):
    res = await client.post(
        "/api/admin/setup",
        json={"email": "second@shpizza.test", "password": "supersecret"},
    )
    assert res.status_code == 400
    assert res.json()["error"]["message"] == "Admin user already exists"


async def test_setup_requires_both_fields(client):
    res = await client.post("/api/admin/setup", json={"email": "  "})
    assert res.status_code == 400
    assert res.json()["error"]["message"] == "Email and password are required"


async def test_setup_rejects_short_password(client):
    res = await client.post(
        "/api/admin/setup", json={"email": "boss@shpizza.test", "password": "1234567"},
    )
    assert res.status_code == 400
