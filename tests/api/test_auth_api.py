"""Auth Routes — sign-in, sign-up, session lookup and password reset.

Tests:
    - Login succeeds with correct credentials; unknown email and bad password both 401
    - Register creates a CUSTOMER; duplicate email and short password are 400
    - /me requires a valid bearer token for an existing user
    - Forgot/reset password round trip; tokens are single-use
"""

from datetime import timedelta

from sqlalchemy import select

from sh_pizza.core.clock import utcnow
from sh_pizza.infrastructure.security import create_access_token, verify_password
from sh_pizza.models import User
from sh_pizza.services.auth import RESET_REQUESTED_MESSAGE



async def test_login_returns_token_and_user(client, customer, password):
    res = await client.post(
        "/api/auth/login",
        json={"email": customer.email, "password": password},
    )
    assert res.status_code == 200
    body = res.json()
    assert body["tokenType"] == "bearer"
    assert body["user"]["email"] == customer.email
    assert body["user"]["role"] == "CUSTOMER"
    assert "passwordHash" not in body["user"]


async def test_login_wrong_password_and_unknown_email_look_identical(
    client, customer, password,
):
    wrong = await client.post(
        "/api/auth/login", json={"email": customer.email, "password": "nope-nope"},
    )
    unknown = await client.post(
        "/api/auth/login", json={"email": "ghost@shpizza.test", "password": password},
    )
    assert wrong.status_code == unknown.status_code == 401
    assert wrong.json()["error"]["message"] == unknown.json()["error"]["message"]


async def test_login_missing_fields_is_400(client):
    res = await client.post("/api/auth/login", json={"email": "a@b.c"})
    assert res.status_code == 400
    assert res.json()["error"]["message"] == "Email and password are required"


async def test_register_creates_customer(client):
    res = await client.post(
        "/api/auth/register",
        json={"email": "new@shpizza.test", "password": "longenough"},
    )
    assert res.status_code == 201
    assert res.json()["user"]["role"] == "CUSTOMER"


async def test_register_duplicate_email_is_400(client, customer):
    res = await client.post(
        "/api/auth/register",
        json={"email": customer.email, "password": "longenough"},
    )
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "DUPLICATE_RESOURCE"


async def test_register_short_password_is_400(client):
    res = await client.post(
        "/api/auth/register", json={"email": "x@shpizza.test", "password": "short"},
    )
    assert res.status_code == 400
    assert "at least 8 characters" in res.json()["error"]["message"]


async def test_me_returns_session_user(client, customer, customer_headers):
    res = await client.get("/api/auth/me", headers=customer_headers)
    assert res.status_code == 200
    assert res.json()["id"] == str(customer.id)


async def test_me_without_token_is_401(client):
    res = await client.get("/api/auth/me")
    assert res.status_code == 401
    assert res.json()["error"]["code"] == "UNAUTHORIZED"


async def test_me_with_garbage_token_is_401(client):
    res = await client.get(
        "/api/auth/me", headers={"Authorization": "Bearer not-a-jwt"},
    )
    assert res.status_code == 401


async def test_me_with_expired_token_is_401(client, customer):
    token = create_access_token(
        str(customer.id), customer.role, expires_delta=timedelta(minutes=-1),
    )
    res = await client.get(
        "/api/auth/me", headers={"Authorization": f"Bearer {token}"},
    )
    assert res.status_code == 401


async def test_me_for_deleted_user_is_401(client, manager, customer, customer_headers):
    async with manager.session() as db:
        await db.delete(await db.get(User, customer.id))
        await db.commit()
    res = await client.get("/api/auth/me", headers=customer_headers)
    assert res.status_code == 401


async def test_forgot_password_answers_the_same_for_unknown_email(client):
    res = await client.post(
        "/api/auth/forgot-password", json={"email": "ghost@shpizza.test"},
    )
    assert res.status_code == 200
    assert res.json()["message"] == RESET_REQUESTED_MESSAGE


async def test_password_reset_round_trip(client, manager, customer):
    res = await client.post(
        "/api/auth/forgot-password", json={"email": customer.email},
    )
    assert res.status_code == 200
    async with manager.session() as db:
        token = (await db.get(User, customer.id)).reset_token
    assert token

    res = await client.post(
        "/api/auth/reset-password",
        json={"token": token, "password": "brand-new-pass"},
    )
    assert res.status_code == 200

    login = await client.post(
        "/api/auth/login",
        json={"email": customer.email, "password": "brand-new-pass"},
    )
    assert login.status_code == 200

    reuse = await client.post(
        "/api/auth/reset-password",
        json={"token": token, "password": "another-pass"},
    )
    assert reuse.status_code == 400
    assert reuse.json()["error"]["code"] == "INVALID_RESET_TOKEN"


async def test_reset_with_expired_token_is_400(client, manager, customer, password):
    async with manager.session() as db:
        user = await db.get(User, customer.id)
        user.reset_token = "expired-token"
        user.reset_token_expires_at = utcnow() - timedelta(minutes=1)
        await db.commit()

    res = await client.post(
        "/api/auth/reset-password",
        json={"token": "expired-token", "password": "brand-new-pass"},
    )
    assert res.status_code == 400
    assert res.json()["error"]["message"] == "Invalid or expired reset token"

    async with manager.session() as db:
        user = (await db.execute(select(User).where(User.id == customer.id))).scalar_one()
        assert verify_password(password, user.password_hash)


async def test_reset_missing_fields_is_400(client):
    res = await client.post("/api/auth/reset-password", json={"token": "abc"})
    assert res.status_code == 400
    assert res.json()["error"]["message"] == "Token and password are required"
