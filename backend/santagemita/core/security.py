"""
# `santagemita/core/security.py` — Role gates

FastAPI dependencies that gate the admin panel on the session `Principal`
resolved by `core.auth.get_principal`. Nothing here reads global state: the
principal is passed explicitly to every check.

| Dependency       | Allows            |
|------------------|-------------------|
| `require_viewer` | viewer, editor, admin |
| `require_editor` | editor, admin     |
| `require_admin`  | admin             |

Missing/invalid token → `401`; signed in with a lower role → `403`.
"""
from fastapi import Depends, HTTPException, status

from santagemita.core.auth import get_principal
from santagemita.schemas.principal import Principal, Role


def ensure_role(principal: Principal, required: Role) -> Principal:
    if not principal.has_permission(required):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=f"{required.capitalize()} privilege required.",
        )
    return principal


def require_viewer(principal: Principal = Depends(get_principal)) -> Principal:
    return ensure_role(principal, "viewer")


def require_editor(principal: Principal = Depends(get_principal)) -> Principal:
    """
    Content editing (catalog, categories, promotions, pages).
    """
    return ensure_role(principal, "editor")


def require_admin(principal: Principal = Depends(get_principal)) -> Principal:
    """
    User management only.
    """
    return ensure_role(principal, "admin")
