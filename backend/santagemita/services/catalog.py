# santagemita/services/catalog.py
"""
Firestore access for products, categories and promotions.

Raw documents are turned into schema models here, before anything reaches the
discount engine. Promotions that cannot be parsed (no numeric `discountValue`,
unreadable dates) are skipped and logged instead of leaking into prices.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from firebase_admin import firestore
from google.cloud.firestore_v1 import FieldFilter
from pydantic import ValidationError

from santagemita.schemas.category import CategoryOut
from santagemita.schemas.product import PRODUCT_KINDS, Product, ProductBase, ProductKind
from santagemita.schemas.promotion import Promotion, PromotionCreate

logger = logging.getLogger("santagemita.catalog")

PROMOTIONS_COLLECTION = "promotions"

_PRODUCT_COLLECTIONS: Dict[str, str] = {
    "flowers": "flowers",
    "jewelry": "jewelry",
}
_CATEGORY_COLLECTIONS: Dict[str, str] = {
    "flowers": "flowerCategories",
    "jewelry": "jewelryCategories",
}


def collection_for(kind: ProductKind) -> str:
    return _PRODUCT_COLLECTIONS[kind]


def categories_collection_for(kind: ProductKind) -> str:
    return _CATEGORY_COLLECTIONS[kind]


# ---------------------------------------------------------------------
# Products
# ---------------------------------------------------------------------

def list_products(db, kind: ProductKind, category: Optional[str] = None) -> List[Product]:
    """All products of one kind; `category` narrows to an exact category name."""
    q = db.collection(collection_for(kind))
    if category:
        q = q.where(filter=FieldFilter("category", "==", category))
    return [Product.from_document(kind, d.id, d.to_dict() or {}) for d in q.stream()]


def list_all_products(db) -> List[Product]:
    """Flowers first, then jewels."""
    out: List[Product] = []
    for kind in PRODUCT_KINDS:
        out.extend(list_products(db, kind))
    return out


def get_product(db, kind: ProductKind, product_id: str) -> Optional[Product]:
    snap = db.collection(collection_for(kind)).document(product_id).get()
    if not snap.exists:
        return None
    return Product.from_document(kind, snap.id, snap.to_dict() or {})


def add_product(db, kind: ProductKind, product_in: ProductBase) -> Product:
    ref = db.collection(collection_for(kind)).document()
    data = product_in.model_dump()
    data["createdAt"] = firestore.SERVER_TIMESTAMP
    ref.set(data)
    logger.info("Created %s product %s (%s)", kind, ref.id, product_in.name)
    return Product(id=ref.id, kind=kind, **product_in.model_dump())


def update_product(db, kind: ProductKind, product_id: str, product_in: ProductBase) -> Optional[Product]:
    """Overwrites every editable field. Returns None when the product does not exist."""
    ref = db.collection(collection_for(kind)).document(product_id)
    if not ref.get().exists:
        return None
    ref.update(product_in.model_dump())
    logger.info("Updated %s product %s", kind, product_id)
    return Product(id=product_id, kind=kind, **product_in.model_dump())


def delete_product(db, kind: ProductKind, product_id: str) -> bool:
    """Hard delete. False when there was nothing to delete."""
    ref = db.collection(collection_for(kind)).document(product_id)
    if not ref.get().exists:
        return False
    ref.delete()
    logger.info("Deleted %s product %s", kind, product_id)
    return True


# ---------------------------------------------------------------------
# Categories (append-only)
# ---------------------------------------------------------------------

def list_categories(db, kind: ProductKind) -> List[CategoryOut]:
    out: List[CategoryOut] = []
    for d in db.collection(categories_collection_for(kind)).stream():
        data = d.to_dict() or {}
        out.append(CategoryOut(
            id=d.id,
            name=str(data.get("name") or ""),
            createdAt=data.get("createdAt"),
        ))
    return out


def add_category(db, kind: ProductKind, name: str) -> CategoryOut:
    ref = db.collection(categories_collection_for(kind)).document()
    ref.set({"name": name, "createdAt": firestore.SERVER_TIMESTAMP})
    logger.info("Created %s category %s (%s)", kind, ref.id, name)
    return CategoryOut(id=ref.id, name=name)


# ---------------------------------------------------------------------
# Promotions (create / delete only)
# ---------------------------------------------------------------------

def parse_promotion(doc_id: str, data: Dict[str, Any]) -> Optional[Promotion]:
    try:
        return Promotion(**{**data, "id": doc_id})
    except ValidationError as exc:
        logger.warning("Skipping malformed promotion %s: %s", doc_id, exc.errors())
        return None


def list_promotions(db) -> List[Promotion]:
    """Every well-formed promotion, in the order Firestore streams them."""
    out: List[Promotion] = []
    for d in db.collection(PROMOTIONS_COLLECTION).stream():
        promo = parse_promotion(d.id, d.to_dict() or {})
        if promo is not None:
            out.append(promo)
    return out


def add_promotion(db, promotion_in: PromotionCreate) -> Promotion:
    ref = db.collection(PROMOTIONS_COLLECTION).document()
    payload = promotion_in.to_document()
    payload["createdAt"] = firestore.SERVER_TIMESTAMP
    ref.set(payload)
    logger.info("Created promotion %s (%s)", ref.id, promotion_in.name)
    return Promotion(id=ref.id, **promotion_in.to_document())


def delete_promotion(db, promotion_id: str) -> bool:
    ref = db.collection(PROMOTIONS_COLLECTION).document(promotion_id)
    if not ref.get().exists:
        return False
    ref.delete()
    logger.info("Deleted promotion %s", promotion_id)
    return True
