"""Evaluation engine that applies jurisdiction rules to vehicle dimensions."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from src.app.utils.units import sanitize_measure

from .table import ESCORT_AXES, EscortTier, LegalMax, RuleSet, RuleStatus, RuleTable

NO_ESCORT = "None indicated by current table"
HIGH_POLE_NOT_INDICATED = "Not indicated"
HIGH_POLE_REQUIRED = "Yes (high-pole advised/required)"
HIGH_POLE_NOT_REQUIRED = "No"
NO_TRAVEL_NOTES = "--"


def normalise_road_type(value: Any) -> str:
    text = str(value or "").strip().lower()
    if text in {"multi", "multilane", "multi-lane", "multi_lane"}:
        return "multi"
    return "two"


@dataclass(slots=True, frozen=True)
class DimensionInput:
    """Vehicle dimensions (inches), gross weight (lbs) and road category."""

    width_in: float = 0.0
    height_in: float = 0.0
    length_in: float = 0.0
    gross_lbs: float = 0.0
    road_type: str = "two"

    def __post_init__(self) -> None:
        # Frozen, so sanitize through object.__setattr__.
        for name in ("width_in", "height_in", "length_in", "gross_lbs"):
            object.__setattr__(self, name, sanitize_measure(getattr(self, name)))
        object.__setattr__(self, "road_type", normalise_road_type(self.road_type))

    @classmethod
    def from_mapping(cls, payload: Mapping[str, Any]) -> "DimensionInput":
        return cls(
            width_in=payload.get("width_in"),
            height_in=payload.get("height_in"),
            length_in=payload.get("length_in"),
            gross_lbs=payload.get("gross_lbs"),
            road_type=payload.get("road_type"),
        )

    def as_dict(self) -> dict[str, Any]:
        return {
            "width_in": self.width_in,
            "height_in": self.height_in,
            "length_in": self.length_in,
            "gross_lbs": self.gross_lbs,
            "road_type": self.road_type,
        }

    def axis_value(self, axis: str) -> float:
        return getattr(self, f"{axis}_in")


@dataclass(slots=True, frozen=True)
class OverAxes:
    width: bool = False
    height: bool = False
    length: bool = False
    weight: bool = False

    @property
    def any_exceeded(self) -> bool:
        return self.width or self.height or self.length or self.weight

    def as_dict(self) -> dict[str, bool]:
        return {
            "width": self.width,
            "height": self.height,
            "length": self.length,
            "weight": self.weight,
        }


@dataclass(slots=True, frozen=True)
class Verdict:
    """Outcome of checking one jurisdiction; only ``status`` is set for ``noData``."""

    status: RuleStatus
    permit: bool | None = None
    over: OverAxes | None = None
    escort: str | None = None
    high_pole: str | None = None
    travel: str | None = None
    legal_max: LegalMax | None = None
    sources: tuple[str, ...] = field(default_factory=tuple)

    @property
    def available(self) -> bool:
        return self.status is RuleStatus.AVAILABLE

    def as_dict(self) -> dict[str, Any]:
        if not self.available:
            return {"status": self.status.value}
        return {
            "status": self.status.value,
            "permit": self.permit,
            "over": self.over.as_dict() if self.over else None,
            "escort": self.escort,
            "high_pole": self.high_pole,
            "travel": self.travel,
            "legal_max": self.legal_max.as_dict() if self.legal_max else None,
            "sources": list(self.sources),
        }


def _first_exceeded(tiers: tuple[EscortTier, ...], value: float) -> EscortTier | None:
    for tier in tiers:
        if value > tier.over_in:
            return tier
    return None


def _escort_summary(rule: RuleSet, dims: DimensionInput) -> str:
    bits: list[str] = []
    for axis in ESCORT_AXES:
        tiers = rule.escort.axis(axis).for_road(dims.road_type)
        tier = _first_exceeded(tiers, dims.axis_value(axis))
        if tier is not None:
            bits.append(tier.describe())
    return "; ".join(bits) if bits else NO_ESCORT


def _high_pole_summary(rule: RuleSet, dims: DimensionInput) -> str:
    high_pole = rule.high_pole
    if high_pole is None or high_pole.required_over_height_in is None:
        return HIGH_POLE_NOT_INDICATED

    required = dims.height_in > high_pole.required_over_height_in
    summary = HIGH_POLE_REQUIRED if required else HIGH_POLE_NOT_REQUIRED
    if high_pole.notes:
        summary += f" -- {high_pole.notes}"
    return summary


def evaluate_rule_set(rule: RuleSet, dims: DimensionInput) -> Verdict:
    """Compare ``dims`` against a single jurisdiction's rules."""

    if not rule.available or rule.legal_max is None:
        return Verdict(status=RuleStatus.NO_DATA)

    limits = rule.legal_max
    over = OverAxes(
        width=dims.width_in > limits.width_in,
        height=dims.height_in > limits.height_in,
        length=dims.length_in > limits.length_in,
        weight=dims.gross_lbs > limits.gross_lbs,
    )

    return Verdict(
        status=RuleStatus.AVAILABLE,
        permit=over.any_exceeded,
        over=over,
        escort=_escort_summary(rule, dims),
        high_pole=_high_pole_summary(rule, dims),
        travel=rule.travel or NO_TRAVEL_NOTES,
        legal_max=limits,
        sources=rule.sources,
    )


def evaluate_jurisdiction(code: str, dims: DimensionInput, table: RuleTable) -> Verdict:
    """Look up ``code`` in ``table`` and evaluate it; unknown codes yield ``noData``."""

    return evaluate_rule_set(table.lookup(code), dims)


__all__ = [
    "NO_ESCORT",
    "HIGH_POLE_NOT_INDICATED",
    "HIGH_POLE_REQUIRED",
    "HIGH_POLE_NOT_REQUIRED",
    "NO_TRAVEL_NOTES",
    "DimensionInput",
    "OverAxes",
    "Verdict",
    "normalise_road_type",
    "evaluate_rule_set",
    "evaluate_jurisdiction",
]
