"""FastAPI application wiring for the RouteGuard permit checker."""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.responses import JSONResponse, Response
from fastapi.staticfiles import StaticFiles

from src.app.api.routes.check import router as check_router
from src.app.settings import settings
from src.app.ui.responses import STATIC_DIR
from src.app.ui.routes import export_router, offline_router
from src.app.ui.server import router as ui_router

app = FastAPI(title=settings.app_title)


@app.get("/health")
def health() -> JSONResponse:
    """Simple liveness endpoint used by deployment probes."""

    return JSONResponse({"status": "ok"})


@app.get("/favicon.ico")
def favicon() -> Response:
    """Return an empty favicon response to silence 404 noise."""

    return Response(status_code=204)


# JSON API (jurisdiction lookups, permit checks).
app.include_router(check_router)

# Register UI routes (form, results table).
app.include_router(ui_router)

# CSV export and offline install support.
app.include_router(export_router)
app.include_router(offline_router)


# Expose static assets (CSS/JS) used by the UI.
app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")


__all__ = ["app", "health"]
