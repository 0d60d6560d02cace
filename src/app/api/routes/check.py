"""JSON endpoints for jurisdiction lookups and permit checks."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, HTTPException

from src.app.data.regulation import normalise_code
from src.app.regulation import PermitCheck, check_permits, get_rule_table
from src.app.schemas import (
    CheckRequest,
    CheckResponse,
    DimensionsOut,
    JurisdictionSummary,
    PermitRow,
)


router = APIRouter(prefix="/api", tags=["permits"])


def run_check(request: CheckRequest) -> tuple[list[PermitCheck], CheckResponse]:
    """Run a permit check, returning the raw checks and the response model."""

    dims = request.to_dimensions()
    checks = check_permits(dims, request.states)
    response = CheckResponse(
        dimensions=DimensionsOut.model_validate(dims.as_dict()),
        results=[PermitRow.from_check(check) for check in checks],
    )
    return checks, response


@router.get("/jurisdictions", response_model=list[JurisdictionSummary])
def list_jurisdictions() -> list[JurisdictionSummary]:
    """Return every known jurisdiction with its data status."""

    table = get_rule_table()
    return [
        JurisdictionSummary(code=code, status=table.lookup(code).status.value)
        for code in table.codes()
    ]


@router.get("/jurisdictions/{code}")
def get_jurisdiction(code: str) -> dict[str, Any]:
    """Return the rule set for ``code``."""

    table = get_rule_table()
    key = normalise_code(code)
    if key not in table.codes():
        raise HTTPException(status_code=404, detail="Jurisdiction not found")
    return table.lookup(key).as_dict()


@router.post("/check", response_model=CheckResponse, response_model_exclude_none=True)
def check(request: CheckRequest) -> CheckResponse:
    """Evaluate the submitted dimensions against each selected jurisdiction."""

    _, response = run_check(request)
    return response


__all__ = ["router", "run_check"]
