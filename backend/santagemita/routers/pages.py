# santagemita/routers/pages.py
"""
Editable page content (`pageContent/home`, `pageContent/quienesSomos`).
- Public: GET /pages/{page}
- Admin : PUT /admin/pages/{page} → merge write
"""
import logging

from fastapi import APIRouter, Depends

from santagemita.config import get_db
from santagemita.core.security import require_editor
from santagemita.schemas.page_content import PageContentOut, PageContentUpdate, PageName
from santagemita.schemas.principal import Principal

logger = logging.getLogger("santagemita.pages")

PAGE_CONTENT_COLLECTION = "pageContent"

router = APIRouter(prefix="/pages", tags=["Pages"])


@router.get("/{page}", response_model=PageContentOut, summary="Get Page Content")
def get_page(page: PageName, db=Depends(get_db)):
    """Missing documents return empty content; the storefront falls back to its defaults."""
    snap = db.collection(PAGE_CONTENT_COLLECTION).document(page).get()
    content = (snap.to_dict() or {}) if snap.exists else {}
    return PageContentOut(page=page, content=content)


admin_router = APIRouter(prefix="/pages", tags=["Admin: Pages"])


@admin_router.put("/{page}", response_model=PageContentOut, summary="Update Page Content")
def update_page(
    page: PageName,
    body: PageContentUpdate,
    principal: Principal = Depends(require_editor),
    db=Depends(get_db),
):
    ref = db.collection(PAGE_CONTENT_COLLECTION).document(page)
    ref.set(body.content, merge=True)
    logger.info("Page %s updated by %s", page, principal.uid)
    snap = ref.get()
    return PageContentOut(page=page, content=snap.to_dict() or {})
