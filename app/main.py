"""FastAPI entrypoint for the restaurant directory."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api.v1.api import api_router
from app.core.config import settings
from app.db.base import Base
from app.db.migrations import ensure_sqlite_schema
from app.db.seed import ensure_seed_data
from app.db.session import SessionLocal, engine
from app.web import dishes, restaurant_list
from app.web.rendering import BASE_DIR, render_template

logging.basicConfig(level=settings.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger(__name__)

app = FastAPI(title=settings.app_name, debug=settings.debug)
app.include_router(api_router, prefix="/api/v1")
app.include_router(restaurant_list.router)
app.include_router(dishes.router)
app.mount("/static", StaticFiles(directory=BASE_DIR / "static"), name="static")


@app.on_event("startup")
def startup() -> None:
    logger.info("Starting %s (%s) on %s", settings.app_name, settings.app_env, engine.url.render_as_string(hide_password=True))
    Base.metadata.create_all(bind=engine)
    ensure_sqlite_schema(engine)
    with SessionLocal() as session:
        try:
            ensure_seed_data(session)
        except Exception:
            logger.exception("[BOOTSTRAP] Seeding failed; continuing startup.")


@app.exception_handler(StarletteHTTPException)
async def html_error_page(request: Request, exc: StarletteHTTPException):
    """Render HTML error pages for browser routes; the API keeps JSON errors."""
    if request.url.path.startswith("/api/") or request.url.path.startswith("/static/"):
        return await http_exception_handler(request, exc)
    return render_template(
        request,
        "error.html",
        {"status_code": exc.status_code, "detail": exc.detail},
        status_code=exc.status_code,
    )


@app.get("/api", include_in_schema=False)
def api_root() -> dict[str, str]:
    return {"name": settings.app_name, "docs": "/docs", "version": "v1"}
