"""Service worker and web manifest for offline installs."""

from __future__ import annotations

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from src.app.settings import settings
from src.app.ui.responses import templates

router = APIRouter()


def build_manifest() -> dict[str, object]:
    return {
        "name": settings.app_title,
        "short_name": "RouteGuard",
        "start_url": "/",
        "display": "standalone",
        "background_color": "#0f172a",
        "theme_color": "#0f172a",
        "icons": [],
    }


@router.get("/sw.js", include_in_schema=False)
def service_worker(request: Request):
    """Cache-first worker: pre-caches the asset list, purges older cache versions."""

    return templates.TemplateResponse(
        request,
        "sw.js",
        {"cache_name": settings.cache_name, "assets": list(settings.offline_assets)},
        media_type="application/javascript",
        headers={"Service-Worker-Allowed": "/", "Cache-Control": "no-cache"},
    )


@router.get("/manifest.json", include_in_schema=False)
def manifest() -> JSONResponse:
    return JSONResponse(build_manifest(), media_type="application/manifest+json")


__all__ = ["router", "build_manifest"]
