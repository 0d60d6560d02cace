"""Data layer utilities for the permit checker."""

from .regulation import (
    JURISDICTIONS,
    DimensionInput,
    RuleSet,
    RuleTable,
    Verdict,
    evaluate_jurisdiction,
    load_rule_table,
)

__all__ = [
    "JURISDICTIONS",
    "DimensionInput",
    "RuleSet",
    "RuleTable",
    "Verdict",
    "evaluate_jurisdiction",
    "load_rule_table",
]
