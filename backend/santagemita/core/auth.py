# santagemita/core/auth.py
import logging
from typing import Optional

from fastapi import Depends, HTTPException, Request, status
from firebase_admin import auth as fb_auth

from santagemita.config import get_db, get_firebase_app
from santagemita.schemas.principal import ROLE_PERMISSIONS, Principal

logger = logging.getLogger("santagemita.auth")


def _extract_bearer_token(request: Request) -> Optional[str]:
    """
    Reads the token from `Authorization: Bearer <id_token>`.
    Returns None when the header is missing or malformed.
    """
    auth_header = request.headers.get("Authorization")
    if not auth_header:
        return None
    parts = auth_header.split()
    if len(parts) == 2 and parts[0].lower() == "bearer":
        return parts[1]
    return None


def _decode_id_token(id_token: str) -> dict:
    """
    Verifies a Firebase ID token (revocation included).
    Invalid, revoked or expired tokens become 401.
    """
    try:
        return fb_auth.verify_id_token(id_token, app=get_firebase_app(), check_revoked=True)
    except fb_auth.ExpiredIdTokenError:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Token expired")
    except fb_auth.RevokedIdTokenError:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Session revoked")
    except (fb_auth.InvalidIdTokenError, fb_auth.UserDisabledError, ValueError) as exc:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"Invalid Firebase ID token: {exc}",
        )


def principal_from_token(decoded: dict, db) -> Principal:
    """
    Builds the session Principal.
    The role comes from `users/{uid}`; users without a profile document are viewers.
    """
    uid = decoded.get("uid") or decoded.get("user_id")
    if not uid:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Token missing uid.")

    snap = db.collection("users").document(uid).get()
    profile = (snap.to_dict() or {}) if snap.exists else {}
    role = profile.get("role")
    if role not in ROLE_PERMISSIONS:
        if snap.exists:
            logger.warning("User %s has unknown role %r, treating as viewer", uid, role)
        else:
            logger.info("User %s has no profile document, treating as viewer", uid)
        role = "viewer"

    return Principal(uid=uid, role=role, email=decoded.get("email") or profile.get("email"))


# --------- FastAPI Dependencies --------- #

async def get_principal(request: Request, db=Depends(get_db)) -> Principal:
    """
    Token required: verifies it and returns the Principal.
    """
    token = _extract_bearer_token(request)
    if not token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Missing Authorization header.")
    return principal_from_token(_decode_id_token(token), db)
