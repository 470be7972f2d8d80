"""
# santagemita/routers/auth.py — Panel sign-in

## Endpoints

### POST /auth/login
Purpose: e-mail + password sign-in for panel users.

Parameters (Form-Data):
- email
- password (min. 6 characters)

Flow:
1. Proxies the credentials to Firebase Identity Toolkit (`signInWithPassword`).
2. On success returns id_token, refresh_token, expires_in, user_id.
3. Otherwise `401 Unauthorized` with Firebase's error message.

---

### POST /auth/logout
Revokes every refresh token of the signed-in user. The client must also call
`signOut()` in the Firebase SDK.

---

### GET /auth/me
Session context of the caller: uid, e-mail, role, role description and
permissions. Any signed-in role may call it.
"""
import logging

import httpx
from fastapi import APIRouter, Depends, Form, HTTPException, status
from firebase_admin import auth as firebase_auth
from pydantic import EmailStr

from santagemita.config import get_firebase_app, settings
from santagemita.core.security import require_viewer
from santagemita.schemas.principal import Principal, SessionOut
from santagemita.schemas.user import LoginResponse

logger = logging.getLogger("santagemita.auth")

router = APIRouter(prefix="/auth", tags=["Auth"])

FIREBASE_SIGNIN_URL = "https://identitytoolkit.googleapis.com/v1/accounts:signInWithPassword"


def _identity_client() -> httpx.AsyncClient:
    return httpx.AsyncClient(timeout=10)


@router.post("/login", response_model=LoginResponse, summary="E-mail + password sign-in")
async def login(
    email: EmailStr = Form(..., description="E-mail"),
    password: str = Form(..., min_length=6, description="Password (min 6 chars)"),
):
    """Proxies the form to Firebase and returns id_token + refresh_token."""
    if not settings.firebase_web_api_key:
        raise HTTPException(status_code=500, detail="Server misconfigured: missing FIREBASE_WEB_API_KEY")

    payload = {"email": email, "password": password, "returnSecureToken": True}
    try:
        async with _identity_client() as client:
            resp = await client.post(
                FIREBASE_SIGNIN_URL,
                params={"key": settings.firebase_web_api_key},
                json=payload,
            )
    except httpx.HTTPError as exc:
        logger.exception("signInWithPassword request failed")
        raise HTTPException(status_code=502, detail=f"Sign-in service error: {exc}")

    data = resp.json()
    if resp.status_code != 200:
        message = data.get("error", {}).get("message", "Invalid credentials")
        logger.warning("Firebase login failed for %s: %s", email, message)
        raise HTTPException(status.HTTP_401_UNAUTHORIZED, detail=message)

    return LoginResponse(
        id_token=data["idToken"],
        refresh_token=data["refreshToken"],
        expires_in=int(data["expiresIn"]),
        user_id=data["localId"],
    )


@router.post("/logout", summary="Revoke refresh tokens")
def logout(principal: Principal = Depends(require_viewer)):
    try:
        firebase_auth.revoke_refresh_tokens(principal.uid, app=get_firebase_app())
    except firebase_auth.UserNotFoundError:
        logger.info("Logout for %s: account no longer exists", principal.uid)
    return {"detail": "Logged out"}


@router.get("/me", response_model=SessionOut, summary="Current session")
def me(principal: Principal = Depends(require_viewer)):
    return SessionOut.from_principal(principal)
