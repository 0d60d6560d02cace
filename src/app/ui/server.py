"""Permit checker UI server routes."""

from __future__ import annotations

from fastapi import APIRouter, Request, status

from src.app.api.routes.check import run_check
from src.app.regulation import get_rule_table
from src.app.schemas import CheckRequest
from src.app.settings import settings
from src.app.ui.responses import make_results_payload, respond_success, templates, wants_json

router = APIRouter()


def _state_options() -> list[dict[str, object]]:
    table = get_rule_table()
    return [
        {
            "code": code,
            "available": table.lookup(code).available,
            "selected": code == settings.default_jurisdiction,
        }
        for code in table.codes()
    ]


@router.get("/", include_in_schema=False)
async def index(request: Request):
    return templates.TemplateResponse(
        request,
        "index.html",
        {"states": _state_options()},
    )


@router.post("/check", include_in_schema=False)
async def check(request: Request):
    form = await request.form()
    checks, response = run_check(CheckRequest.from_form(form))
    payload = make_results_payload(checks, response)

    if wants_json(request):
        return respond_success(payload)

    return templates.TemplateResponse(
        request,
        "results.html",
        {"results_payload": payload, "states": _state_options()},
        status_code=status.HTTP_200_OK,
    )


__all__ = ["router"]
