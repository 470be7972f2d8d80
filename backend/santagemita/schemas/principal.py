"""
santagemita/schemas/principal.py
Roles, permissions and the Principal (session) model.
"""
from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, Field

Role = Literal["admin", "editor", "viewer"]

ROLE_PERMISSIONS: Dict[str, List[str]] = {
    "admin": [
        "view_dashboard",
        "edit_content",
        "manage_users",
        "view_analytics",
        "delete_content",
        "manage_settings",
    ],
    "editor": ["view_dashboard", "edit_content", "view_analytics"],
    "viewer": ["view_dashboard"],
}

ROLE_DESCRIPTIONS: Dict[str, str] = {
    "admin": "Administrador - Acceso total",
    "editor": "Editor - Puede editar contenido",
    "viewer": "Visor - Solo lectura",
}

# admin ⊃ editor ⊃ viewer
_RANK = {"viewer": 1, "editor": 2, "admin": 3}


class Principal(BaseModel):
    uid: str = Field(..., description="Firebase UID")
    role: Role = Field("viewer", description="admin | editor | viewer")
    email: Optional[str] = Field(None, description="E-mail (if any)")

    def has_permission(self, required: Role) -> bool:
        """True when this principal's role is `required` or above it."""
        return _RANK[self.role] >= _RANK.get(required, 99)


class SessionOut(BaseModel):
    uid: str
    email: Optional[str] = None
    role: Role
    roleDescription: str
    permissions: List[str]

    @classmethod
    def from_principal(cls, principal: Principal) -> "SessionOut":
        return cls(
            uid=principal.uid,
            email=principal.email,
            role=principal.role,
            roleDescription=ROLE_DESCRIPTIONS[principal.role],
            permissions=list(ROLE_PERMISSIONS[principal.role]),
        )
