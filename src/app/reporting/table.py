"""Presentation rows for the permit results table."""

from __future__ import annotations

from typing import Any, Iterable

from src.app.data.regulation import LegalMax
from src.app.regulation import PermitCheck
from src.app.utils.units import fmt_inches, fmt_pounds

PLACEHOLDER = "--"
NO_DATA_HINT = "Add this state's thresholds to the rule table"

_PILLS = {
    "permit": ("bad", "YES -- permit likely"),
    "legal": ("ok", "NO -- within legal"),
    "noData": ("info", "Data not loaded yet"),
}

_WHY_LABELS = (
    ("width", "Over width"),
    ("height", "Over height"),
    ("length", "Over length"),
    ("weight", "Over weight"),
)


def format_legal_baseline(limits: LegalMax) -> str:
    """``W 8′ 6″, H 13′ 6″, L 65′ 0″, G 80,000 lbs``"""

    return (
        f"W {fmt_inches(limits.width_in)}, H {fmt_inches(limits.height_in)}, "
        f"L {fmt_inches(limits.length_in)}, G {fmt_pounds(limits.gross_lbs)} lbs"
    )


def present_row(check: PermitCheck) -> dict[str, Any]:
    """Flatten a :class:`PermitCheck` into the strings shown in one table row."""

    verdict = check.verdict
    if not verdict.available:
        pill_class, pill_text = _PILLS["noData"]
        return {
            "state": check.state,
            "status": verdict.status.value,
            "pill_class": pill_class,
            "pill_text": pill_text,
            "why": NO_DATA_HINT,
            "escort": PLACEHOLDER,
            "high_pole": PLACEHOLDER,
            "travel": PLACEHOLDER,
            "legal_baseline": PLACEHOLDER,
            "sources": [],
        }

    pill_class, pill_text = _PILLS["permit" if verdict.permit else "legal"]
    over = verdict.over.as_dict() if verdict.over else {}
    why = [label for axis, label in _WHY_LABELS if over.get(axis)]

    return {
        "state": check.state,
        "status": verdict.status.value,
        "pill_class": pill_class,
        "pill_text": pill_text,
        "why": ", ".join(why) if why else PLACEHOLDER,
        "escort": verdict.escort,
        "high_pole": verdict.high_pole,
        "travel": verdict.travel,
        "legal_baseline": format_legal_baseline(verdict.legal_max) if verdict.legal_max else PLACEHOLDER,
        "sources": list(verdict.sources),
    }


def present_rows(checks: Iterable[PermitCheck]) -> list[dict[str, Any]]:
    return [present_row(check) for check in checks]


__all__ = ["format_legal_baseline", "present_row", "present_rows", "PLACEHOLDER", "NO_DATA_HINT"]
