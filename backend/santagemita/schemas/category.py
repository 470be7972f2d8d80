# santagemita/schemas/category.py
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator


# ---------- input ----------
class CategoryCreate(BaseModel):
    """Admin ⇒ new category input. Names are free text; uniqueness is not enforced."""
    name: str = Field(..., min_length=1, description="Category name")

    @field_validator("name")
    @classmethod
    def _strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("must not be blank")
        return v


# ---------- output ----------
class CategoryOut(BaseModel):
    """Listing output."""
    id: str
    name: str
    createdAt: Optional[datetime] = None
