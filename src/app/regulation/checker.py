"""Convenience helpers for loading the rule table and checking selections."""

from __future__ import annotations

import functools
import pathlib
from dataclasses import dataclass
from typing import Any, Iterable, Mapping

from src.app.data.regulation import (
    DimensionInput,
    RuleTable,
    Verdict,
    evaluate_jurisdiction,
    load_rule_table,
    normalise_code,
)
from src.app.logging_utils import get_logger
from src.app.settings import settings


@dataclass(slots=True, frozen=True)
class PermitCheck:
    """Verdict for one selected jurisdiction."""

    state: str
    verdict: Verdict

    def as_dict(self) -> dict[str, Any]:
        return {"state": self.state, "verdict": self.verdict.as_dict()}


@functools.lru_cache(maxsize=1)
def get_rule_table(
    source: str | pathlib.Path | None = None,
) -> RuleTable:
    """Load the configured rule table once, optionally overriding the source."""

    target = source if source is not None else settings.rule_table_path
    return load_rule_table(target)


def resolve_selection(states: Iterable[Any] | None, *, fallback: str | None = None) -> list[str]:
    """Normalise the selected codes, defaulting to the fallback jurisdiction."""

    selection = [normalise_code(code) for code in (states or ())]
    selection = [code for code in selection if code]
    if not selection:
        selection.append(normalise_code(fallback or settings.default_jurisdiction))
    return selection


def check_permits(
    dimensions: DimensionInput | Mapping[str, Any],
    states: Iterable[Any] | None = None,
    table: RuleTable | None = None,
) -> list[PermitCheck]:
    """Evaluate ``dimensions`` for each selected jurisdiction, in selection order."""

    dims = dimensions if isinstance(dimensions, DimensionInput) else DimensionInput.from_mapping(dimensions)
    rules = table if table is not None else get_rule_table()

    results = [
        PermitCheck(state=code, verdict=evaluate_jurisdiction(code, dims, rules))
        for code in resolve_selection(states)
    ]

    get_logger().debug(
        "permit_check",
        extra={
            "event": "permit_check",
            "states": [item.state for item in results],
            "permits": sum(1 for item in results if item.verdict.permit),
            "road_type": dims.road_type,
        },
    )
    return results


__all__ = ["PermitCheck", "check_permits", "get_rule_table", "resolve_selection"]
