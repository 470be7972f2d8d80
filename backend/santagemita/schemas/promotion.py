"""
# `santagemita/schemas/promotion.py` — Promotion schemas

## General
A promotion discounts every product it applies to, either by a percentage
(`discountType="percentage"`) or by a fixed amount (`discountType="fixed"`).
Dates are calendar days stored as zero-padded `YYYY-MM-DD` strings; an empty
or missing date leaves that side of the window open. `isActive` is a manual
switch independent of the dates.

| applicableTo        | Applies to |
|---------------------|------------|
| `all`               | every product |
| `flowers`           | every flower |
| `jewelry`           | every jewel |
| `specific_category` | products of `productType` whose category is `specificCategory` |

Stored records missing `discountType` or `applicableTo` keep them as `None`:
such a promotion matches no product and discounts nothing.

Promotions are only created and deleted; there is no update in place.
"""
from datetime import date, datetime
from typing import Any, Dict, Literal, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from santagemita.schemas.product import ProductKind

DiscountType = Literal["percentage", "fixed"]
ApplicableTo = Literal["all", "flowers", "jewelry", "specific_category"]


def _iso_day(value: Any) -> Optional[str]:
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    # Rejects anything that is not a real YYYY-MM-DD day
    return date.fromisoformat(str(value)).isoformat()


class Promotion(BaseModel):
    """A promotion record as read from the `promotions` collection."""
    id: str = ""
    name: str = ""
    description: str = ""
    discountType: Optional[str] = None
    discountValue: float = Field(..., allow_inf_nan=False)
    applicableTo: Optional[str] = None
    productType: Optional[str] = None
    specificCategory: Optional[str] = None
    startDate: Optional[str] = None
    endDate: Optional[str] = None
    isActive: bool = False
    createdAt: Optional[datetime] = None

    @field_validator("startDate", "endDate", mode="before")
    @classmethod
    def _blank_date_is_open(cls, v):
        if isinstance(v, (date, datetime)):
            return _iso_day(v)
        return None if v == "" else v


class PromotionCreate(BaseModel):
    """Admin ⇒ new promotion."""
    name: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    discountType: DiscountType = "percentage"
    discountValue: float = Field(..., gt=0, allow_inf_nan=False, description="Percent (0-100] or fixed CLP amount")
    applicableTo: ApplicableTo = "all"
    productType: Optional[ProductKind] = None
    specificCategory: Optional[str] = None
    startDate: Optional[str] = Field(None, description="YYYY-MM-DD")
    endDate: Optional[str] = Field(None, description="YYYY-MM-DD")
    isActive: bool = True

    @field_validator("name", "description")
    @classmethod
    def _not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be blank")
        return v

    @field_validator("startDate", "endDate", mode="before")
    @classmethod
    def _normalize_day(cls, v):
        return _iso_day(v)

    @model_validator(mode="after")
    def _check_window_and_target(self):
        if self.startDate and self.endDate and self.startDate > self.endDate:
            raise ValueError("startDate must not be after endDate")
        if self.applicableTo == "specific_category":
            if not self.productType or not self.specificCategory:
                raise ValueError("specific_category promotions need productType and specificCategory")
        else:
            self.productType = None
            self.specificCategory = None
        return self

    def to_document(self) -> Dict[str, Any]:
        """Firestore payload; the target fields only exist for specific_category."""
        data = self.model_dump()
        if self.applicableTo != "specific_category":
            data.pop("productType")
            data.pop("specificCategory")
        return data
