"""Integration tests for login and token-authenticated profile lookup.

These run against the FastAPI app with the SQLite test DB configured by
`.env.test`.
"""
import time

from jose import jwt

from app.core.config import settings
from app.tokens import TokenIssuer


async def test_login_then_profile_with_bearer_token(async_client, make_user):
    user = make_user(password="StrongPassw0rd!")

    r = await async_client.post("/login", json={"email": user.email, "password": "StrongPassw0rd!"})
    assert r.status_code == 200
    body = r.json()
    assert body["user"]["id"] == user.id
    assert body["user"]["email"] == user.email
    assert "password_hash" not in body["user"]
    assert body["token_type"] == "bearer"
    token = body["token"]
    assert jwt.get_unverified_claims(token) == {"user_id": user.id}

    r = await async_client.get("/profile", headers={"Authorization": f"Bearer {token}"})
    assert r.status_code == 200
    assert r.json()["id"] == user.id
    assert r.json()["email"] == user.email


async def test_profile_accepts_token_header(async_client, make_user):
    user = make_user(password="StrongPassw0rd!")
    r = await async_client.post("/login", json={"email": user.email, "password": "StrongPassw0rd!"})
    token = r.json()["token"]

    r = await async_client.get("/profile", headers={"token": token})
    assert r.status_code == 200
    assert r.json()["id"] == user.id


async def test_login_invalid_password_is_rejected_not_200(async_client, make_user):
    user = make_user(password="RightPassword123!")

    r = await async_client.post("/login", json={"email": user.email, "password": "WrongPass"})
    assert r.status_code == 401
    assert r.json() == {"detail": "Invalid email or password"}
    assert r.headers["www-authenticate"] == "Bearer"
    assert "token" not in r.json()


async def test_login_unknown_email_looks_like_bad_password(async_client, make_user):
    user = make_user(password="RightPassword123!")
    bad_password = await async_client.post("/login", json={"email": user.email, "password": "nope"})
    unknown = await async_client.post("/login", json={"email": "nobody@example.com", "password": "nope"})
    assert unknown.status_code == bad_password.status_code == 401
    assert unknown.json() == bad_password.json()


async def test_login_validation_error(async_client):
    r = await async_client.post("/login", json={"email": "not-an-email", "password": "x"})
    assert r.status_code == 422


async def test_login_rejects_overlong_password_before_hashing(async_client, make_user):
    user = make_user()
    r = await async_client.post("/login", json={"email": user.email, "password": "x" * 129})
    assert r.status_code == 422


async def test_profile_rejections_are_uniform(async_client, make_user):
    user = make_user()
    forged = TokenIssuer("wrong").issue(user.id)
    no_claim = jwt.encode({"sub": str(user.id)}, settings.SECRET_KEY, algorithm="HS256")
    not_yet_valid = jwt.encode(
        {"user_id": user.id, "nbf": int(time.time()) + 3600}, settings.SECRET_KEY, algorithm="HS256"
    )
    bad_iat = jwt.encode({"user_id": user.id, "iat": "yesterday"}, settings.SECRET_KEY, algorithm="HS256")

    cases = [
        {},
        {"Authorization": "Bearer "},
        {"Authorization": "Basic dXNlcjpwYXNz"},
        {"token": "not-a-token"},
        {"token": ""},
        {"Authorization": f"Bearer {forged}"},
        {"Authorization": f"Bearer {no_claim}"},
        {"Authorization": f"Bearer {not_yet_valid}"},
        {"Authorization": f"Bearer {bad_iat}"},
    ]
    bodies = []
    for headers in cases:
        r = await async_client.get("/profile", headers=headers)
        assert r.status_code == 401, headers
        assert r.headers["www-authenticate"] == "Bearer"
        bodies.append(r.json())

    assert all(body == {"detail": "Not authenticated"} for body in bodies)


async def test_profile_for_deleted_user_is_404(async_client, make_user):
    user = make_user(password="StrongPassw0rd!")
    r = await async_client.post("/login", json={"email": user.email, "password": "StrongPassw0rd!"})
    token = r.json()["token"]

    r = await async_client.delete(f"/users/{user.id}")
    assert r.status_code == 204

    r = await async_client.get("/profile", headers={"Authorization": f"Bearer {token}"})
    assert r.status_code == 404
    assert r.json() == {"detail": "User not found"}


async def test_profile_with_non_numeric_user_id_is_404(async_client):
    token = TokenIssuer(settings.SECRET_KEY).issue("not-a-number")
    r = await async_client.get("/profile", headers={"Authorization": f"Bearer {token}"})
    assert r.status_code == 404


async def test_profile_with_out_of_range_user_id_is_404(async_client):
    for user_id in (10**30, 2**63, 0, -1):
        token = TokenIssuer(settings.SECRET_KEY).issue(user_id)
        r = await async_client.get("/profile", headers={"Authorization": f"Bearer {token}"})
        assert r.status_code == 404, user_id
        assert r.json() == {"detail": "User not found"}


async def test_profile_rejects_expired_token(async_client, make_user):
    from datetime import timedelta

    user = make_user()
    token = TokenIssuer(settings.SECRET_KEY, expires_delta=timedelta(minutes=-5)).issue(user.id)
    r = await async_client.get("/profile", headers={"Authorization": f"Bearer {token}"})
    assert r.status_code == 401


async def test_login_is_rate_limited(async_client, make_user, monkeypatch):
    monkeypatch.setattr(settings, "RATE_LIMIT_REQUESTS", 2)
    user = make_user()
    payload = {"email": user.email, "password": "wrong-password"}

    for _ in range(2):
        r = await async_client.post("/login", json=payload)
        assert r.status_code == 401

    r = await async_client.post("/login", json=payload)
    assert r.status_code == 429


async def test_login_rate_limit_forgets_idle_clients(async_client, make_user):
    from collections import deque

    from app.dependencies import rate_limit

    stale = time.monotonic() - settings.RATE_LIMIT_PERIOD_SECONDS - 1
    rate_limit._buckets["203.0.113.9:/login"] = deque([stale])
    rate_limit._buckets["203.0.113.10:/login"] = deque()
    user = make_user()

    r = await async_client.post("/login", json={"email": user.email, "password": "wrong-password"})
    assert r.status_code == 401
    assert "203.0.113.9:/login" not in rate_limit._buckets
    assert "203.0.113.10:/login" not in rate_limit._buckets
    assert [len(bucket) for bucket in rate_limit._buckets.values()] == [1]
