"""Helpers for producing UI payloads and responses."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List

from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.templating import Jinja2Templates

from src.app.reporting.table import present_rows
from src.app.schemas import CheckResponse
from src.app.regulation import PermitCheck
from src.app.settings import settings
from src.app.utils.units import fmt_inches, fmt_pounds

__all__ = [
    "TEMPLATES_DIR",
    "STATIC_DIR",
    "templates",
    "make_results_payload",
    "respond_success",
    "wants_json",
]

UI_DIR = Path(__file__).resolve().parent
TEMPLATES_DIR = UI_DIR / "templates"
STATIC_DIR = UI_DIR / "static"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
templates.env.globals["app_title"] = settings.app_title


def wants_json(request: Request) -> bool:
    accept = (request.headers.get("accept") or "").lower()
    return "application/json" in accept


def make_results_payload(checks: List[PermitCheck], response: CheckResponse) -> Dict[str, Any]:
    """Return the payload rendered by ``results.html`` and returned to JSON clients."""

    dims = response.dimensions
    rows = present_rows(checks)
    return {
        "dimensions": dims.model_dump(),
        "dimensions_label": (
            f"W {fmt_inches(dims.width_in)}, H {fmt_inches(dims.height_in)}, "
            f"L {fmt_inches(dims.length_in)}, G {fmt_pounds(dims.gross_lbs)} lbs"
        ),
        "road_label": "Multi-lane" if dims.road_type == "multi" else "Two-lane",
        "rows": rows,
        "summary": {
            "states": len(rows),
            "permit": sum(1 for row in rows if row["status"] == "ok" and row["pill_class"] == "bad"),
            "no_data": sum(1 for row in rows if row["status"] == "noData"),
        },
        "results": response.model_dump(mode="json", exclude_none=True)["results"],
    }


def respond_success(payload: Dict[str, Any]) -> JSONResponse:
    """Wrap the payload in the canonical API response envelope."""

    return JSONResponse(status_code=200, content={"results_payload": payload})
