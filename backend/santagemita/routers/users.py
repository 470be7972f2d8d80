"""
# `santagemita/routers/users.py` — Panel user management (admin only)

## Endpoints

### `GET /admin/users`
Lists `users` profile documents.

### `POST /admin/users`
1. Rejects e-mails already present in `users` (`400`).
2. Creates the Firebase Auth account (Admin SDK).
3. Writes `users/{uid}` with the role and audit fields.

### `PUT /admin/users/{uid}/role`
Changes the role; stamps `updatedAt`.

### `DELETE /admin/users/{uid}`
Deletes the profile document and the Firebase Auth account. Cannot be undone.
An admin cannot delete their own account.
"""
import logging
from datetime import datetime, timezone
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from firebase_admin import auth as firebase_auth
from google.cloud.firestore_v1 import FieldFilter

from santagemita.config import get_db, get_firebase_app
from santagemita.core.security import require_admin
from santagemita.schemas.principal import Principal
from santagemita.schemas.user import RoleUpdate, UserCreate, UserOut

logger = logging.getLogger("santagemita.users")

admin_router = APIRouter(prefix="/users", tags=["Admin: Users"])


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def _user_out(uid: str, data: dict) -> UserOut:
    return UserOut(
        id=uid,
        email=data.get("email"),
        role=data.get("role") if data.get("role") in ("admin", "editor", "viewer") else "viewer",
        status=data.get("status", "active"),
        createdAt=data.get("createdAt"),
        createdBy=data.get("createdBy"),
        updatedAt=data.get("updatedAt"),
    )


@admin_router.get("", response_model=List[UserOut], summary="List Users")
def list_users(principal: Principal = Depends(require_admin), db=Depends(get_db)):
    return [_user_out(d.id, d.to_dict() or {}) for d in db.collection("users").stream()]


@admin_router.post("", response_model=UserOut, status_code=status.HTTP_201_CREATED, summary="Create User")
def create_user(
    user_in: UserCreate,
    principal: Principal = Depends(require_admin),
    db=Depends(get_db),
):
    existing = db.collection("users").where(filter=FieldFilter("email", "==", user_in.email)).limit(1).stream()
    if next(iter(existing), None) is not None:
        raise HTTPException(status_code=400, detail="Email already registered")

    try:
        record = firebase_auth.create_user(
            email=user_in.email,
            password=user_in.password,
            app=get_firebase_app(),
        )
    except firebase_auth.EmailAlreadyExistsError:
        raise HTTPException(status_code=400, detail="Email already registered in Firebase")
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=f"Invalid user data: {exc}")

    profile = {
        "email": user_in.email,
        "uid": record.uid,
        "role": user_in.role,
        "createdAt": _now_iso(),
        "createdBy": principal.email or "system",
        "status": "active",
    }
    db.collection("users").document(record.uid).set(profile)
    logger.info("User %s (%s) created by %s", record.uid, user_in.role, principal.uid)
    return _user_out(record.uid, profile)


@admin_router.put("/{uid}/role", response_model=UserOut, summary="Update User Role")
def update_user_role(
    uid: str,
    body: RoleUpdate,
    principal: Principal = Depends(require_admin),
    db=Depends(get_db),
):
    ref = db.collection("users").document(uid)
    snap = ref.get()
    if not snap.exists:
        raise HTTPException(status_code=404, detail="User not found")
    ref.update({"role": body.role, "updatedAt": _now_iso()})
    logger.info("Role of %s set to %s by %s", uid, body.role, principal.uid)
    return _user_out(uid, ref.get().to_dict() or {})


@admin_router.delete("/{uid}", summary="Delete User")
def delete_user(uid: str, principal: Principal = Depends(require_admin), db=Depends(get_db)):
    if uid == principal.uid:
        raise HTTPException(status_code=400, detail="You cannot delete your own account")
    ref = db.collection("users").document(uid)
    if not ref.get().exists:
        raise HTTPException(status_code=404, detail="User not found")
    ref.delete()
    try:
        firebase_auth.delete_user(uid, app=get_firebase_app())
    except firebase_auth.UserNotFoundError:
        logger.info("User %s had no Firebase Auth account", uid)
    logger.info("User %s deleted by %s", uid, principal.uid)
    return {"detail": "User deleted"}
