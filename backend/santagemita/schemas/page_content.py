# santagemita/schemas/page_content.py
from typing import Any, Dict, Literal

from pydantic import BaseModel, Field

# Documents of the `pageContent` collection the panel can edit
PageName = Literal["home", "quienesSomos"]


class PageContentUpdate(BaseModel):
    """Partial page content; merged into the stored document."""
    content: Dict[str, Any] = Field(..., description="Fields to merge (title, subtitle, cards...)")


class PageContentOut(BaseModel):
    page: PageName
    content: Dict[str, Any] = {}
