"""Tabular exports of permit check results."""

from __future__ import annotations

from typing import Any, Iterable, Mapping

import pandas as pd

EXPORT_COLUMNS: tuple[tuple[str, str], ...] = (
    ("state", "State"),
    ("pill_text", "Permit needed?"),
    ("why", "Why"),
    ("escort", "Escort / Pilot"),
    ("high_pole", "High-pole"),
    ("travel", "Travel notes"),
    ("legal_baseline", "Legal baseline"),
    ("sources", "Sources"),
)


def rows_to_frame(rows: Iterable[Mapping[str, Any]]) -> pd.DataFrame:
    """Build a DataFrame of presented rows with human readable headers."""

    frame = pd.DataFrame(list(rows), columns=[key for key, _ in EXPORT_COLUMNS])
    if not frame.empty:
        frame["sources"] = frame["sources"].map(
            lambda value: " ".join(value) if isinstance(value, (list, tuple)) else (value or "")
        )
    return frame.rename(columns=dict(EXPORT_COLUMNS))


def build_csv_bytes(rows: Iterable[Mapping[str, Any]]) -> bytes:
    """Serialise presented rows to UTF-8 CSV."""

    return rows_to_frame(rows).to_csv(index=False).encode("utf-8")


__all__ = ["EXPORT_COLUMNS", "rows_to_frame", "build_csv_bytes"]
