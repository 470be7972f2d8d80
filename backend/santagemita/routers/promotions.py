"""
# `santagemita/routers/promotions.py` — Promotions

## Public endpoints

### `GET /promotions`
Promotions live today (switched on, inside their date window).

### `GET /promotions/discounted`
"Ofertas del mes": every flower and jewel with at least one live promotion
applying to it, priced by the same engine as the catalog pages.
**Optional parameters:** `filter` — `todos` | `flowers` | `jewelry`.

---

## Admin endpoints (editor or admin)

### `GET /admin/promotions`
All stored promotions, live or not.

### `POST /admin/promotions`
Creates a promotion (`PromotionCreate`). Invalid input → `422`.

### `DELETE /admin/promotions/{promotion_id}`
Permanent delete. Promotions have no update endpoint.
"""
from datetime import datetime, timezone
from typing import List, Literal

from fastapi import APIRouter, Depends, HTTPException, Query, status

from santagemita.config import get_db
from santagemita.core.security import require_editor
from santagemita.schemas.pricing import PricedProduct
from santagemita.schemas.promotion import PromotionCreate, Promotion
from santagemita.services import catalog
from santagemita.services.discount_engine import discounted_products, is_live

router = APIRouter(prefix="/promotions", tags=["Promotions"])


@router.get("", response_model=List[Promotion], summary="List Live Promotions")
def list_live_promotions(db=Depends(get_db)):
    now = datetime.now(timezone.utc)
    return [p for p in catalog.list_promotions(db) if is_live(p, now)]


@router.get("/discounted", response_model=List[PricedProduct], summary="Discounted Products")
def list_discounted_products(
    filter: Literal["todos", "flowers", "jewelry"] = Query("todos", description="Product kind"),
    db=Depends(get_db),
):
    promotions = catalog.list_promotions(db)
    if filter == "todos":
        products = catalog.list_all_products(db)
    else:
        products = catalog.list_products(db, filter)
    return discounted_products(products, promotions)


# ---------- Admin ----------
admin_router = APIRouter(
    prefix="/promotions",
    tags=["Admin: Promotions"],
    dependencies=[Depends(require_editor)],
)


@admin_router.get("", response_model=List[Promotion], summary="List Promotions")
def list_promotions(db=Depends(get_db)):
    return catalog.list_promotions(db)


@admin_router.post(
    "",
    response_model=Promotion,
    status_code=status.HTTP_201_CREATED,
    summary="Create Promotion",
)
def create_promotion(promotion_in: PromotionCreate, db=Depends(get_db)):
    return catalog.add_promotion(db, promotion_in)


@admin_router.delete("/{promotion_id}", summary="Delete Promotion")
def delete_promotion(promotion_id: str, db=Depends(get_db)):
    if not catalog.delete_promotion(db, promotion_id):
        raise HTTPException(status_code=404, detail="Promotion not found")
    return {"detail": "Promotion deleted"}
