# santagemita/routers/categories.py
"""
Category management
- Public: GET /categories/{kind}        → categories of flowers or jewelry
- Admin : POST /admin/categories/{kind} → append a category (no update/delete)
"""
from typing import List

from fastapi import APIRouter, Depends, Response, status

from santagemita.config import get_db
from santagemita.core.security import require_editor
from santagemita.schemas.category import CategoryCreate, CategoryOut
from santagemita.schemas.product import ProductKind
from santagemita.services import catalog

# ---------- Public ----------
router = APIRouter(prefix="/categories", tags=["Categories"])


@router.get("/{kind}", response_model=List[CategoryOut], summary="List Categories")
def list_categories(kind: ProductKind, response: Response, db=Depends(get_db)):
    response.headers["Cache-Control"] = "public, max-age=60"
    return catalog.list_categories(db, kind)


# ---------- Admin ----------
admin_router = APIRouter(
    prefix="/categories",
    tags=["Admin: Categories"],
    dependencies=[Depends(require_editor)],
)


@admin_router.post(
    "/{kind}",
    response_model=CategoryOut,
    status_code=status.HTTP_201_CREATED,
    summary="Create Category",
)
def create_category(kind: ProductKind, category_in: CategoryCreate, db=Depends(get_db)):
    """
    Appends a category. Names are stored as typed (trimmed); duplicates are allowed.
    """
    return catalog.add_category(db, kind, category_in.name)
