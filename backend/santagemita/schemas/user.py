"""
# `santagemita/schemas/user.py` — Panel user schemas

## General
Panel users live in Firebase Auth (credentials) and in `users/{uid}`
(role and audit fields). Customers never sign in; only staff have accounts.

---

### `UserCreate`
| Field           | Type       | Required | Notes |
|-----------------|------------|----------|-------|
| email           | `EmailStr` | ✔        | |
| password        | `str`      | ✔        | min 6 characters (Firebase rule) |
| confirmPassword | `str`      | ✔        | must equal `password` |
| role            | `Role`     | ✖        | defaults to `editor` |

### `UserOut`
`id`, `email`, `role`, `status`, `createdAt`, `createdBy`.

### `LoginResponse`
Tokens returned by the Identity Toolkit sign-in proxy.
"""
from typing import Optional

from pydantic import BaseModel, EmailStr, Field, model_validator

from santagemita.schemas.principal import Role


class UserCreate(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=6)
    confirmPassword: str
    role: Role = "editor"

    @model_validator(mode="after")
    def _passwords_match(self):
        if self.password != self.confirmPassword:
            raise ValueError("passwords do not match")
        return self


class RoleUpdate(BaseModel):
    role: Role


class UserOut(BaseModel):
    id: str
    email: Optional[str] = None
    role: Role = "viewer"
    status: str = "active"
    createdAt: Optional[str] = None
    createdBy: Optional[str] = None
    updatedAt: Optional[str] = None


class LoginResponse(BaseModel):
    id_token: str
    refresh_token: str
    expires_in: int
    user_id: str
