"""Utility helpers for the application."""

from .units import (
    finite_or_zero,
    fmt_inches,
    fmt_pounds,
    sanitize_measure,
    to_inches,
    ureg,
)

__all__ = [
    "ureg",
    "finite_or_zero",
    "sanitize_measure",
    "to_inches",
    "fmt_inches",
    "fmt_pounds",
]
