"""
santagemita/schemas/pricing.py - Discount engine output models.
"""
from typing import List

from pydantic import BaseModel, Field

from santagemita.schemas.product import Product
from santagemita.schemas.promotion import Promotion


class PricingResult(BaseModel):
    originalPrice: float = 0
    finalPrice: float = 0
    discount: float = 0
    discountPercentage: str = Field("0", description="Discount over the original price, one decimal (e.g. '20.0')")
    hasDiscount: bool = False
    appliedPromotions: List[Promotion] = []


class PricedProduct(Product):
    """Product view model handed to the storefront: the product plus its pricing."""
    pricing: PricingResult
