import asyncio
from datetime import datetime, timedelta, timezone

from jose import jwt

from conftest import h
from app.core.config import settings
from app.core.security import create_access_token, decode_access_token, verify_password
from app.services import auth_service


def test_login_issues_usable_token(client, admin):
    r = client.post("/api/auth/login", json={"email": admin.email, "password": "admin123"})
    assert r.status_code == 200
    data = r.json()["data"]
    assert data["admin"] == {"id": admin.id, "email": admin.email, "name": admin.name}

    r = client.get("/api/auth/me", headers=h(data["accessToken"]))
    assert r.status_code == 200
    assert r.json()["data"]["email"] == admin.email


def test_login_rejects_bad_credentials(client, admin):
    r = client.post("/api/auth/login", json={"email": admin.email, "password": "wrong"})
    assert r.status_code == 401
    assert r.json()["detail"]["code"] == "AUTH_001"

    r = client.post("/api/auth/login", json={"email": "nobody@example.com", "password": "admin123"})
    assert r.status_code == 401


def test_expired_token_is_rejected(client, admin):
    payload = {
        "sub": admin.id,
        "email": admin.email,
        "exp": datetime.now(timezone.utc) - timedelta(minutes=1),
        "type": "access",
    }
    token = jwt.encode(payload, settings.JWT_SECRET_KEY, algorithm=settings.JWT_ALGORITHM)
    r = client.get("/api/auth/me", headers=h(token))
    assert r.status_code == 401
    assert r.json()["detail"]["code"] == "AUTH_003"


def test_token_for_unknown_admin_is_rejected(client, fake_db, token):
    fake_db.admin.rows.clear()
    r = client.get("/api/auth/me", headers=h(token))
    assert r.status_code == 401
    assert r.json()["detail"]["code"] == "AUTH_001"


def test_upsert_admin_creates_then_updates(fake_db):
    created = asyncio.run(auth_service.upsert_admin(fake_db, "owner@example.com", "first-pass", "Owner"))
    assert verify_password("first-pass", created.passwordHash)

    updated = asyncio.run(auth_service.upsert_admin(fake_db, "owner@example.com", "second-pass", "Owner"))
    assert updated.id == created.id
    assert len(fake_db.admin.rows) == 1
    assert verify_password("second-pass", updated.passwordHash)


def test_decode_access_token_returns_admin_id():
    token = create_access_token(subject="admin-42", email="owner@example.com")
    assert decode_access_token(token) == "admin-42"
    assert decode_access_token(token + "x") is None


def test_non_access_token_is_rejected(client, admin):
    payload = {
        "sub": admin.id,
        "email": admin.email,
        "exp": datetime.now(timezone.utc) + timedelta(minutes=5),
        "type": "refresh",
    }
    token = jwt.encode(payload, settings.JWT_SECRET_KEY, algorithm=settings.JWT_ALGORITHM)
    assert decode_access_token(token) is None

    r = client.get("/api/auth/me", headers=h(token))
    assert r.status_code == 401
    assert r.json()["detail"]["code"] == "AUTH_003"
