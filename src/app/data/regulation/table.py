"""Per-jurisdiction permit rule tables expressed as JSON or YAML."""

from __future__ import annotations

import json
import math
import pathlib
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Iterable, Mapping, Sequence

import yaml

from src.app.logging_utils import get_logger, log_event

# 48 contiguous states (no AK, HI).
JURISDICTIONS: tuple[str, ...] = (
    "AL", "AZ", "AR", "CA", "CO", "CT", "DE", "FL", "GA", "ID", "IL", "IN",
    "IA", "KS", "KY", "LA", "ME", "MD", "MA", "MI", "MN", "MS", "MO", "MT",
    "NE", "NV", "NH", "NJ", "NM", "NY", "NC", "ND", "OH", "OK", "OR", "PA",
    "RI", "SC", "SD", "TN", "TX", "UT", "VT", "VA", "WA", "WV", "WI", "WY",
)

ROAD_TYPES: tuple[str, ...] = ("two", "multi")
ESCORT_AXES: tuple[str, ...] = ("width", "length", "height")


class RuleStatus(str, Enum):
    """Whether a jurisdiction has authored thresholds."""

    NO_DATA = "noData"
    AVAILABLE = "ok"


def normalise_code(code: Any) -> str:
    return str(code or "").strip().upper()


def _non_negative(value: Any, *, label: str) -> float:
    if value is None:
        raise ValueError(f"{label} is required.")
    if isinstance(value, bool):
        raise ValueError(f"{label} must be numeric.")
    try:
        number = float(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"{label} must be numeric.") from exc
    if not math.isfinite(number) or number < 0:
        raise ValueError(f"{label} must be a finite, non-negative number.")
    return number


@dataclass(slots=True, frozen=True)
class LegalMax:
    """Dimensions and weight allowed without a special permit."""

    width_in: float
    height_in: float
    length_in: float
    gross_lbs: float

    @classmethod
    def from_mapping(cls, payload: Mapping[str, Any], *, code: str) -> "LegalMax":
        return cls(
            width_in=_non_negative(payload.get("width_in"), label=f"{code} legal_max.width_in"),
            height_in=_non_negative(payload.get("height_in"), label=f"{code} legal_max.height_in"),
            length_in=_non_negative(payload.get("length_in"), label=f"{code} legal_max.length_in"),
            gross_lbs=_non_negative(payload.get("gross_lbs"), label=f"{code} legal_max.gross_lbs"),
        )

    def as_dict(self) -> dict[str, float]:
        return {
            "width_in": self.width_in,
            "height_in": self.height_in,
            "length_in": self.length_in,
            "gross_lbs": self.gross_lbs,
        }


@dataclass(slots=True, frozen=True)
class EscortTier:
    """Escort configuration required once a dimension exceeds ``over_in``."""

    over_in: float
    escorts: str
    flags: bool = False
    notes: str = ""

    def describe(self) -> str:
        text = self.escorts
        if self.flags:
            text += " + flags"
        if self.notes:
            text += f" -- {self.notes}"
        return text


@dataclass(slots=True, frozen=True)
class AxisTiers:
    """Tier sequences for one axis, keyed by road category."""

    two: tuple[EscortTier, ...] = ()
    multi: tuple[EscortTier, ...] = ()

    def for_road(self, road_type: str) -> tuple[EscortTier, ...]:
        return self.multi if road_type == "multi" else self.two


@dataclass(slots=True, frozen=True)
class EscortTable:
    width: AxisTiers = field(default_factory=AxisTiers)
    length: AxisTiers = field(default_factory=AxisTiers)
    height: AxisTiers = field(default_factory=AxisTiers)

    def axis(self, name: str) -> AxisTiers:
        return getattr(self, name)


@dataclass(slots=True, frozen=True)
class HighPole:
    required_over_height_in: float | None
    notes: str = ""


@dataclass(slots=True, frozen=True)
class RuleSet:
    """Rules for a single jurisdiction."""

    code: str
    status: RuleStatus
    legal_max: LegalMax | None = None
    escort: EscortTable = field(default_factory=EscortTable)
    high_pole: HighPole | None = None
    travel: str = ""
    sources: tuple[str, ...] = ()

    @property
    def available(self) -> bool:
        return self.status is RuleStatus.AVAILABLE

    @classmethod
    def no_data(cls, code: str) -> "RuleSet":
        return cls(code=code, status=RuleStatus.NO_DATA)

    @classmethod
    def from_mapping(cls, code: str, payload: Mapping[str, Any]) -> "RuleSet":
        raw_status = str(payload.get("status") or RuleStatus.NO_DATA.value).strip()
        try:
            status = RuleStatus(raw_status)
        except ValueError as exc:
            raise ValueError(f"Jurisdiction '{code}' has unknown status '{raw_status}'.") from exc

        if status is RuleStatus.NO_DATA:
            return cls.no_data(code)

        legal_max = payload.get("legal_max")
        if not isinstance(legal_max, Mapping):
            raise ValueError(f"Jurisdiction '{code}' must define a 'legal_max' mapping.")

        sources = payload.get("sources") or ()
        if isinstance(sources, str) or not isinstance(sources, Sequence):
            raise ValueError(f"Jurisdiction '{code}' sources must be a list.")

        return cls(
            code=code,
            status=status,
            legal_max=LegalMax.from_mapping(legal_max, code=code),
            escort=_parse_escort(code, payload.get("escort")),
            high_pole=_parse_high_pole(code, payload.get("high_pole")),
            travel=str(payload.get("travel") or ""),
            sources=tuple(str(item) for item in sources),
        )

    def as_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"code": self.code, "status": self.status.value}
        if not self.available:
            return payload
        payload["legal_max"] = self.legal_max.as_dict() if self.legal_max else None
        payload["escort"] = {
            axis: {
                road: [
                    {
                        "over_in": tier.over_in,
                        "escorts": tier.escorts,
                        "flags": tier.flags,
                        "notes": tier.notes,
                    }
                    for tier in self.escort.axis(axis).for_road(road)
                ]
                for road in ROAD_TYPES
            }
            for axis in ESCORT_AXES
        }
        payload["high_pole"] = (
            {
                "required_over_height_in": self.high_pole.required_over_height_in,
                "notes": self.high_pole.notes,
            }
            if self.high_pole
            else None
        )
        payload["travel"] = self.travel
        payload["sources"] = list(self.sources)
        return payload


def _parse_tiers(code: str, axis: str, road: str, raw: Any) -> tuple[EscortTier, ...]:
    if raw is None:
        return ()
    if isinstance(raw, (str, bytes)) or not isinstance(raw, Sequence):
        raise ValueError(f"Jurisdiction '{code}' escort.{axis}.{road} must be a list.")

    tiers: list[EscortTier] = []
    for index, entry in enumerate(raw):
        if not isinstance(entry, Mapping):
            raise ValueError(f"Jurisdiction '{code}' escort.{axis}.{road}[{index}] is not a mapping.")
        escorts = str(entry.get("escorts") or "").strip()
        if not escorts:
            raise ValueError(f"Jurisdiction '{code}' escort.{axis}.{road}[{index}] is missing 'escorts'.")
        tiers.append(
            EscortTier(
                over_in=_non_negative(
                    entry.get("over_in"), label=f"{code} escort.{axis}.{road}[{index}].over_in"
                ),
                escorts=escorts,
                flags=bool(entry.get("flags", False)),
                notes=str(entry.get("notes") or ""),
            )
        )

    # First match wins during evaluation, so the most restrictive tier must lead.
    ordered = sorted(tiers, key=lambda tier: tier.over_in, reverse=True)
    if ordered != tiers:
        get_logger().warning(
            "escort_tiers_reordered",
            extra={"event": "escort_tiers_reordered", "jurisdiction": code, "axis": axis, "road": road},
        )
    return tuple(ordered)


def _parse_escort(code: str, raw: Any) -> EscortTable:
    if raw is None:
        return EscortTable()
    if not isinstance(raw, Mapping):
        raise ValueError(f"Jurisdiction '{code}' escort must be a mapping.")

    axes: dict[str, AxisTiers] = {}
    for axis in ESCORT_AXES:
        block = raw.get(axis) or {}
        if not isinstance(block, Mapping):
            raise ValueError(f"Jurisdiction '{code}' escort.{axis} must be a mapping.")
        axes[axis] = AxisTiers(
            two=_parse_tiers(code, axis, "two", block.get("two")),
            multi=_parse_tiers(code, axis, "multi", block.get("multi")),
        )
    return EscortTable(**axes)


def _parse_high_pole(code: str, raw: Any) -> HighPole | None:
    if raw is None:
        return None
    if not isinstance(raw, Mapping):
        raise ValueError(f"Jurisdiction '{code}' high_pole must be a mapping.")
    threshold = raw.get("required_over_height_in")
    return HighPole(
        required_over_height_in=(
            None
            if threshold is None
            else _non_negative(threshold, label=f"{code} high_pole.required_over_height_in")
        ),
        notes=str(raw.get("notes") or ""),
    )


@dataclass(slots=True, frozen=True)
class RuleTable:
    """Immutable lookup of rule sets covering every known jurisdiction."""

    id: str
    title: str
    version: str | None
    rules: Mapping[str, RuleSet]

    def lookup(self, code: str) -> RuleSet:
        key = normalise_code(code)
        rule = self.rules.get(key)
        return rule if rule is not None else RuleSet.no_data(key)

    def codes(self) -> tuple[str, ...]:
        return tuple(self.rules)

    def available_codes(self) -> tuple[str, ...]:
        return tuple(code for code, rule in self.rules.items() if rule.available)

    @classmethod
    def build(
        cls,
        entries: Mapping[str, Any],
        *,
        id: str = "us48",
        title: str | None = None,
        version: str | None = None,
        jurisdictions: Iterable[str] = JURISDICTIONS,
    ) -> "RuleTable":
        """Stub every jurisdiction as ``noData`` then overlay ``entries``."""

        known = tuple(jurisdictions)
        rules: dict[str, RuleSet] = {code: RuleSet.no_data(code) for code in known}

        for raw_code, payload in entries.items():
            code = normalise_code(raw_code)
            if code not in rules:
                raise ValueError(f"Unknown jurisdiction '{raw_code}' in rule table.")
            if not isinstance(payload, Mapping):
                raise ValueError(f"Jurisdiction '{code}' rules must be a mapping.")
            rules[code] = RuleSet.from_mapping(code, payload)

        return cls(
            id=id,
            title=title or id,
            version=version,
            rules=MappingProxyType(rules),
        )

    @classmethod
    def from_mapping(cls, payload: Mapping[str, Any]) -> "RuleTable":
        table_id = str(payload.get("id") or "").strip()
        if not table_id:
            raise ValueError("Rule table is missing an 'id'.")

        entries = payload.get("jurisdictions") or {}
        if not isinstance(entries, Mapping):
            raise ValueError("Rule table 'jurisdictions' must be a mapping.")

        version = payload.get("version")
        return cls.build(
            entries,
            id=table_id,
            title=str(payload.get("title") or table_id),
            version=str(version) if version is not None else None,
        )


def _parse_text(text: str, *, suffix: str) -> Mapping[str, Any]:
    if suffix in {".yaml", ".yml"}:
        data = yaml.safe_load(text)
    else:
        data = json.loads(text)

    if not isinstance(data, Mapping):
        raise ValueError("Rule table payload must be a mapping.")
    return data


def load_rule_table(source: str | pathlib.Path | Mapping[str, Any]) -> RuleTable:
    """Load a rule table from a path or mapping."""

    if isinstance(source, Mapping):
        payload = source
    else:
        path = pathlib.Path(source)
        payload = _parse_text(path.read_text(encoding="utf-8"), suffix=path.suffix.lower())

    table = RuleTable.from_mapping(payload)
    log_event(
        "rule_table_loaded",
        table_id=table.id,
        jurisdictions=len(table.rules),
        available=len(table.available_codes()),
    )
    return table


__all__ = [
    "JURISDICTIONS",
    "ROAD_TYPES",
    "ESCORT_AXES",
    "RuleStatus",
    "LegalMax",
    "EscortTier",
    "AxisTiers",
    "EscortTable",
    "HighPole",
    "RuleSet",
    "RuleTable",
    "normalise_code",
    "load_rule_table",
]
