"""
# `santagemita/main.py` — Application entry point

## General
Creates the FastAPI app, configures logging and CORS, and mounts the public
storefront routers and the admin panel routers.

---

## Routers
**Public:**
- `/auth`
- `/flowers`
- `/jewelry`
- `/categories`
- `/promotions`
- `/pages`

**Admin (prefix `/admin`):**
- `/flowers`, `/jewelry`, `/categories`, `/promotions`, `/pages` — editor or admin
- `/users` — admin only

Every admin router is gated in its module through `core.security`.
"""
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from santagemita.config import settings
from santagemita.routers import auth, categories, pages, products, promotions, users

logging.basicConfig(
    level=logging.DEBUG if settings.debug else settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

# Initialize FastAPI app
app = FastAPI(
    title="Santa Gemita Storefront API",
    description="Flowers & jewelry catalog with promotions, plus the content-management panel.",
    version="1.0.0",
    redirect_slashes=False,
)

# Configure CORS (allow front-end domain or all origins as specified)
allow_origins = [origin.strip() for origin in settings.allowed_origins.split(',')] if settings.allowed_origins else ["*"]
app.add_middleware(
    CORSMiddleware,
    allow_origins=allow_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include public routers
app.include_router(auth.router)
app.include_router(products.flowers_router)
app.include_router(products.jewelry_router)
app.include_router(categories.router)
app.include_router(promotions.router)
app.include_router(pages.router)

# Include admin routers (with prefix /admin)
app.include_router(products.flowers_admin_router, prefix="/admin")
app.include_router(products.jewelry_admin_router, prefix="/admin")
app.include_router(categories.admin_router, prefix="/admin")
app.include_router(promotions.admin_router, prefix="/admin")
app.include_router(pages.admin_router, prefix="/admin")
app.include_router(users.admin_router, prefix="/admin")


@app.get("/health", tags=["Health"])
def health():
    return {"status": "ok"}


# Run the app directly with uvicorn (for development)
if __name__ == "__main__":
    import uvicorn
    uvicorn.run("santagemita.main:app", host="0.0.0.0", port=8000, reload=True)
