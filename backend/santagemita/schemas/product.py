"""
# `santagemita/schemas/product.py` — Product schemas

## General
Flowers and jewels are structurally identical; the `kind` axis
(`flowers` | `jewelry`) says which Firestore collection a product lives in.
`category` is a soft reference to a Category `name` of the same kind and is
never enforced: dangling names are valid.

---

## Input schemas

### `ProductCreate`
| Field       | Type    | Required | Notes |
|-------------|---------|----------|-------|
| name        | `str`   | ✔        | non-empty |
| category    | `str`   | ✔        | category name |
| price       | `float` | ✔        | ≥ 0 |
| imageUrl    | `str`   | ✔        | image URL |
| description | `str`   | ✖        | free text |

### `ProductUpdate`
Same fields as `ProductCreate`; an update overwrites every field.

---

## Output schemas

### `Product`
The stored record plus `id` and `kind`. `price` is `None` when the stored
document carries no usable number; such products price to zero.
"""
import math
from numbers import Number
from typing import Any, Dict, Literal, Optional

from pydantic import BaseModel, Field

ProductKind = Literal["flowers", "jewelry"]
PRODUCT_KINDS = ("flowers", "jewelry")


class ProductBase(BaseModel):
    """Fields the admin form writes for both kinds."""
    name: str = Field(..., min_length=1, description="Product name")
    category: str = Field(..., min_length=1, description="Category name of the same kind")
    price: float = Field(..., ge=0, description="Base price in CLP")
    imageUrl: str = Field(..., min_length=1, description="Image URL")
    description: str = Field("", description="Description (optional)")


class ProductCreate(ProductBase):
    pass


class ProductUpdate(ProductBase):
    """Full-field overwrite of an existing product."""


class Product(BaseModel):
    id: str
    kind: ProductKind
    name: str = ""
    category: str = ""
    price: Optional[float] = None
    imageUrl: Optional[str] = None
    description: Optional[str] = None

    model_config = {"from_attributes": True}

    @classmethod
    def from_document(cls, kind: ProductKind, doc_id: str, data: Dict[str, Any]) -> "Product":
        """Build a Product from a raw Firestore document, defaulting missing fields."""
        raw_price = data.get("price")
        if isinstance(raw_price, bool) or not isinstance(raw_price, Number) or not math.isfinite(raw_price):
            price = None
        else:
            price = float(raw_price)
        return cls(
            id=doc_id,
            kind=kind,
            name=str(data.get("name") or ""),
            category=str(data.get("category") or ""),
            price=price,
            imageUrl=data.get("imageUrl"),
            description=data.get("description"),
        )
