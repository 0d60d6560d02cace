"""Jurisdiction rule table loading and evaluation utilities."""

from .table import (
    ESCORT_AXES,
    JURISDICTIONS,
    ROAD_TYPES,
    AxisTiers,
    EscortTable,
    EscortTier,
    HighPole,
    LegalMax,
    RuleSet,
    RuleStatus,
    RuleTable,
    load_rule_table,
    normalise_code,
)
from .evaluation import (
    HIGH_POLE_NOT_INDICATED,
    NO_ESCORT,
    DimensionInput,
    OverAxes,
    Verdict,
    evaluate_jurisdiction,
    evaluate_rule_set,
    normalise_road_type,
)

__all__ = [
    "ESCORT_AXES",
    "JURISDICTIONS",
    "ROAD_TYPES",
    "AxisTiers",
    "EscortTable",
    "EscortTier",
    "HighPole",
    "LegalMax",
    "RuleSet",
    "RuleStatus",
    "RuleTable",
    "load_rule_table",
    "normalise_code",
    "HIGH_POLE_NOT_INDICATED",
    "NO_ESCORT",
    "DimensionInput",
    "OverAxes",
    "Verdict",
    "evaluate_jurisdiction",
    "evaluate_rule_set",
    "normalise_road_type",
]
