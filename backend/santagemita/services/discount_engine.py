"""
# `santagemita/services/discount_engine.py` — Promotion pricing

## General
Single source of truth for "which promotions apply to this product and what
does it cost after them". The flower catalog, the jewelry catalog, the
promotions page and the WhatsApp hand-off all price through this module.

Everything here is pure: inputs are already-fetched `Product` / `Promotion`
models, nothing is mutated, and the same inputs always give the same output.

---

## Liveness
A promotion is live on day `D` when `isActive` is true and
`startDate <= D <= endDate`, each bound being optional. Days are compared as
`YYYY-MM-DD` strings. The evaluation day is taken in UTC for aware datetimes.

## Applicability
Live, and one of:
- `applicableTo == "all"`
- `applicableTo == product.kind`
- `applicableTo == "specific_category"` with `productType == product.kind`
  and `specificCategory == product.category` (exact match)

## Stacking
Promotions are applied in the order received, each on the previous result:
- `percentage`: `price * (1 - value / 100)`
- `fixed`: `price - value`
- anything else: ignored

The floor at zero is applied once, after the last promotion. Intermediate
negatives go through later percentage steps unclamped.
"""
import math
from datetime import date, datetime, timezone
from decimal import ROUND_HALF_UP, Context, Decimal
from numbers import Number
from typing import Iterable, List, Optional, Sequence, Union

from santagemita.schemas.pricing import PricedProduct, PricingResult
from santagemita.schemas.product import Product
from santagemita.schemas.promotion import Promotion

Instant = Union[datetime, date]

# Enough digits to quantize any finite float
_WIDE = Context(prec=400)


def _evaluation_day(now: Optional[Instant]) -> str:
    if now is None:
        now = datetime.now(timezone.utc)
    if isinstance(now, datetime):
        if now.tzinfo is not None:
            now = now.astimezone(timezone.utc)
        return now.date().isoformat()
    return now.isoformat()


def _usable_price(price) -> bool:
    return (
        isinstance(price, Number)
        and not isinstance(price, bool)
        and math.isfinite(price)
    )


def _one_decimal(value: float) -> str:
    if not math.isfinite(value):
        return f"{value:.1f}"
    # Half-up on the exact binary value, like JS Number.toFixed(1)
    return str(Decimal(value).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP, context=_WIDE))


def _live_on(promotion: Promotion, today: str) -> bool:
    if not promotion.isActive:
        return False
    if promotion.startDate and today < promotion.startDate:
        return False
    if promotion.endDate and today > promotion.endDate:
        return False
    return True


def is_live(promotion: Promotion, now: Optional[Instant] = None) -> bool:
    """True when the promotion is switched on and `now` falls inside its day window."""
    return _live_on(promotion, _evaluation_day(now))


def _targets(promotion: Promotion, product: Product) -> bool:
    if promotion.applicableTo == "all":
        return True
    if promotion.applicableTo == product.kind:
        return True
    return (
        promotion.applicableTo == "specific_category"
        and promotion.productType == product.kind
        and promotion.specificCategory == product.category
    )


def applicable_promotions(
    product: Optional[Product],
    promotions: Iterable[Promotion],
    now: Optional[Instant] = None,
) -> List[Promotion]:
    """Live promotions that target `product`, in their original relative order."""
    if product is None:
        return []
    # Resolve "today" once so the whole list is judged against the same day
    today = _evaluation_day(now)
    return [
        p for p in promotions or []
        if _live_on(p, today) and _targets(p, product)
    ]


def compute_final_price(product: Optional[Product], applicable: Sequence[Promotion]) -> PricingResult:
    """Stack `applicable` over the product price, in order, and floor the result at zero."""
    price = getattr(product, "price", None)
    if product is None or not _usable_price(price):
        return PricingResult()

    applied = list(applicable or [])
    final_price = price
    for promo in applied:
        if promo.discountType == "percentage":
            final_price = final_price * (1 - promo.discountValue / 100)
        elif promo.discountType == "fixed":
            final_price = final_price - promo.discountValue

    final_price = max(0, final_price)

    discount = price - final_price
    discount_percentage = _one_decimal(discount / price * 100) if price > 0 else "0"

    return PricingResult(
        originalPrice=price,
        finalPrice=final_price,
        discount=discount,
        discountPercentage=discount_percentage,
        hasDiscount=len(applied) > 0,
        appliedPromotions=applied,
    )


def price_product(
    product: Product,
    promotions: Iterable[Promotion],
    now: Optional[Instant] = None,
) -> PricedProduct:
    applied = applicable_promotions(product, promotions, now)
    return PricedProduct(
        **product.model_dump(),
        pricing=compute_final_price(product, applied),
    )


def price_catalog(
    products: Iterable[Product],
    promotions: Sequence[Promotion],
    now: Optional[Instant] = None,
) -> List[PricedProduct]:
    return [price_product(p, promotions, now) for p in products]


def discounted_products(
    products: Iterable[Product],
    promotions: Sequence[Promotion],
    now: Optional[Instant] = None,
) -> List[PricedProduct]:
    """Only the products that at least one live promotion applies to."""
    return [pp for pp in price_catalog(products, promotions, now) if pp.pricing.hasDiscount]
