"""Tests for session resolution and the sign-in proxy."""

import httpx
import pytest
from fastapi import HTTPException
from firebase_admin import auth as fb_auth
from httpx import AsyncClient

from santagemita.config import settings
from santagemita.core import auth as core_auth
from santagemita.core.security import ensure_role
from santagemita.routers import auth as auth_router
from santagemita.schemas.principal import Principal, SessionOut


class TestPrincipalFromToken:
    def test_role_from_profile(self, fake_db):
        fake_db.seed("users", "u1", {"email": "e@santagemita.cl", "role": "editor"})
        principal = core_auth.principal_from_token({"uid": "u1", "email": "e@santagemita.cl"}, fake_db)
        assert principal.role == "editor"
        assert principal.email == "e@santagemita.cl"

    def test_missing_profile_is_viewer(self, fake_db):
        assert core_auth.principal_from_token({"uid": "ghost"}, fake_db).role == "viewer"

    def test_unknown_role_is_viewer(self, fake_db):
        fake_db.seed("users", "u1", {"role": "superuser"})
        assert core_auth.principal_from_token({"uid": "u1"}, fake_db).role == "viewer"

    def test_missing_uid(self, fake_db):
        with pytest.raises(HTTPException) as exc:
            core_auth.principal_from_token({}, fake_db)
        assert exc.value.status_code == 401


class TestRoles:
    @pytest.mark.parametrize("role, required, allowed", [
        ("admin", "admin", True),
        ("admin", "editor", True),
        ("admin", "viewer", True),
        ("editor", "admin", False),
        ("editor", "editor", True),
        ("editor", "viewer", True),
        ("viewer", "editor", False),
        ("viewer", "viewer", True),
    ])
    def test_hierarchy(self, role, required, allowed):
        assert Principal(uid="u", role=role).has_permission(required) is allowed

    def test_ensure_role_raises_403(self):
        with pytest.raises(HTTPException) as exc:
            ensure_role(Principal(uid="u", role="viewer"), "editor")
        assert exc.value.status_code == 403

    def test_session_permissions(self):
        assert "manage_users" in SessionOut.from_principal(Principal(uid="u", role="admin")).permissions
        assert "delete_content" not in SessionOut.from_principal(Principal(uid="u", role="editor")).permissions


@pytest.mark.asyncio
async def test_bearer_token_is_verified(client: AsyncClient, fake_db, monkeypatch):
    fake_db.seed("users", "u9", {"role": "admin"})

    def verify(token, app=None, check_revoked=False):
        assert check_revoked is True
        if token != "good":
            raise fb_auth.InvalidIdTokenError("bad token")
        return {"uid": "u9", "email": "a@santagemita.cl"}

    monkeypatch.setattr(core_auth, "get_firebase_app", lambda: None)
    monkeypatch.setattr(fb_auth, "verify_id_token", verify)

    resp = await client.get("/auth/me", headers={"Authorization": "Bearer good"})
    assert resp.status_code == 200
    assert resp.json()["role"] == "admin"

    resp = await client.get("/auth/me", headers={"Authorization": "Bearer nope"})
    assert resp.status_code == 401

    resp = await client.get("/auth/me", headers={"Authorization": "Basic good"})
    assert resp.status_code == 401


# --- Login proxy ---

def _mock_identity(monkeypatch, handler):
    monkeypatch.setattr(settings, "firebase_web_api_key", "AIza-test")
    monkeypatch.setattr(
        auth_router,
        "_identity_client",
        lambda: httpx.AsyncClient(transport=httpx.MockTransport(handler)),
    )


@pytest.mark.asyncio
async def test_login_success(client: AsyncClient, monkeypatch):
    def handler(request: httpx.Request):
        assert request.url.params["key"] == "AIza-test"
        return httpx.Response(200, json={
            "idToken": "id-tok", "refreshToken": "ref-tok", "expiresIn": "3600", "localId": "u1",
        })

    _mock_identity(monkeypatch, handler)
    resp = await client.post("/auth/login", data={"email": "e@santagemita.cl", "password": "secreto1"})
    assert resp.status_code == 200
    assert resp.json() == {
        "id_token": "id-tok", "refresh_token": "ref-tok", "expires_in": 3600, "user_id": "u1",
    }


@pytest.mark.asyncio
async def test_login_bad_password(client: AsyncClient, monkeypatch):
    def handler(request: httpx.Request):
        return httpx.Response(400, json={"error": {"message": "INVALID_LOGIN_CREDENTIALS"}})

    _mock_identity(monkeypatch, handler)
    resp = await client.post("/auth/login", data={"email": "e@santagemita.cl", "password": "secreto1"})
    assert resp.status_code == 401
    assert resp.json()["detail"] == "INVALID_LOGIN_CREDENTIALS"


@pytest.mark.asyncio
async def test_login_without_api_key(client: AsyncClient, monkeypatch):
    monkeypatch.setattr(settings, "firebase_web_api_key", "")
    resp = await client.post("/auth/login", data={"email": "e@santagemita.cl", "password": "secreto1"})
    assert resp.status_code == 500
