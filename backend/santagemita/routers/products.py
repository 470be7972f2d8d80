"""
# `santagemita/routers/products.py` — Catalog (flowers & jewelry)

## General
Both kinds expose the same endpoints; the router pair is built once per kind
by `_build_routers`. Every product leaves the API priced by
`services.discount_engine` against the current promotions.

---

## Public endpoints

### `GET /{kind}`
Priced catalog of one kind.
**Optional parameters:** `category` — exact category name (`todos` = all).

### `GET /{kind}/{product_id}`
One priced product, `404` if it does not exist.

### `GET /{kind}/{product_id}/whatsapp`
Quote message and `api.whatsapp.com` link for the product, with the
discounted price when a promotion applies.

---

## Admin endpoints (editor or admin)

### `POST /admin/{kind}`
Creates a product (`ProductCreate`, JSON).

### `PUT /admin/{kind}/{product_id}`
Overwrites every field of a product (`ProductUpdate`). `404` if missing.

### `DELETE /admin/{kind}/{product_id}`
Permanent delete. `404` if missing.
"""
from typing import List, Optional, Tuple

from fastapi import APIRouter, Depends, HTTPException, Query, status

from santagemita.config import get_db
from santagemita.core.security import require_editor
from santagemita.schemas.pricing import PricedProduct
from santagemita.schemas.product import Product, ProductCreate, ProductKind, ProductUpdate
from santagemita.services import catalog, checkout
from santagemita.services.discount_engine import price_catalog, price_product

ALL_CATEGORIES = "todos"


def _build_routers(kind: ProductKind, label: str) -> Tuple[APIRouter, APIRouter]:
    router = APIRouter(prefix=f"/{kind}", tags=[label])

    @router.get("", response_model=List[PricedProduct], summary=f"List ({kind})")
    def list_priced(
        category: Optional[str] = Query(None, description="Category name ('todos' for all)"),
        db=Depends(get_db),
    ):
        if category == ALL_CATEGORIES:
            category = None
        products = catalog.list_products(db, kind, category)
        return price_catalog(products, catalog.list_promotions(db))

    @router.get("/{product_id}", response_model=PricedProduct, summary=f"Get ({kind})")
    def get_priced(product_id: str, db=Depends(get_db)):
        product = catalog.get_product(db, kind, product_id)
        if product is None:
            raise HTTPException(status_code=404, detail="Product not found")
        return price_product(product, catalog.list_promotions(db))

    @router.get("/{product_id}/whatsapp", summary="WhatsApp quote link")
    def whatsapp_quote(product_id: str, db=Depends(get_db)):
        product = catalog.get_product(db, kind, product_id)
        if product is None:
            raise HTTPException(status_code=404, detail="Product not found")
        priced = price_product(product, catalog.list_promotions(db))
        message = checkout.quote_message(priced)
        return {"message": message, "url": checkout.whatsapp_url(message)}

    admin_router = APIRouter(
        prefix=f"/{kind}",
        tags=[f"Admin: {label}"],
        dependencies=[Depends(require_editor)],
    )

    @admin_router.post("", response_model=Product, status_code=status.HTTP_201_CREATED, summary=f"Create ({kind})")
    def create(product_in: ProductCreate, db=Depends(get_db)):
        return catalog.add_product(db, kind, product_in)

    @admin_router.put("/{product_id}", response_model=Product, summary=f"Update ({kind})")
    def update(product_id: str, product_in: ProductUpdate, db=Depends(get_db)):
        product = catalog.update_product(db, kind, product_id, product_in)
        if product is None:
            raise HTTPException(status_code=404, detail="Product not found")
        return product

    @admin_router.delete("/{product_id}", summary=f"Delete ({kind})")
    def delete(product_id: str, db=Depends(get_db)):
        if not catalog.delete_product(db, kind, product_id):
            raise HTTPException(status_code=404, detail="Product not found")
        return {"detail": "Product deleted"}

    return router, admin_router


flowers_router, flowers_admin_router = _build_routers("flowers", "Flowers")
jewelry_router, jewelry_admin_router = _build_routers("jewelry", "Jewelry")
