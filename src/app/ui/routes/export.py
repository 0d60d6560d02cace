"""CSV export of permit check results."""

from __future__ import annotations

import io
import json

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import StreamingResponse
from pydantic import ValidationError

from src.app.api.routes.check import run_check
from src.app.reporting.export import build_csv_bytes
from src.app.reporting.table import present_rows
from src.app.schemas import CheckRequest

router = APIRouter()


@router.post("/export_csv", include_in_schema=False)
async def export_csv(request: Request) -> StreamingResponse:
    """Re-run the submitted check and return the results table as CSV."""

    content_type = (request.headers.get("content-type") or "").lower()
    try:
        if "application/json" in content_type:
            check_request = CheckRequest.model_validate(await request.json())
        else:
            check_request = CheckRequest.from_form(await request.form())
    except json.JSONDecodeError as exc:
        raise HTTPException(status_code=400, detail="Request body must be valid JSON.") from exc
    except ValidationError as exc:
        raise HTTPException(status_code=422, detail="Request body must be a JSON object.") from exc

    checks, _ = run_check(check_request)
    rows = present_rows(checks)

    blob = build_csv_bytes(rows)
    return StreamingResponse(
        io.BytesIO(blob),
        media_type="text/csv",
        headers={"Content-Disposition": 'attachment; filename="permit_check.csv"'},
    )


__all__ = ["router"]
