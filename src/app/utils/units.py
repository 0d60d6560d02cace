"""Unit handling utilities built on top of :mod:`pint`."""

from __future__ import annotations

import math
import sys
from functools import lru_cache
from typing import Any

import pint


@lru_cache(maxsize=1)
def ureg() -> pint.UnitRegistry:
    """Return a process-wide :class:`~pint.UnitRegistry` instance."""

    return pint.UnitRegistry()


def finite_or_zero(value: Any) -> float:
    """Coerce ``value`` to a float, mapping missing or non-finite input to 0."""

    if value is None or isinstance(value, bool):
        return 0.0
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return 0.0
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    return number if math.isfinite(number) else 0.0


def sanitize_measure(value: Any) -> float:
    """Return ``value`` as a non-negative finite float (invalid input -> 0)."""

    return max(0.0, finite_or_zero(value))


def to_inches(feet: Any, inches: Any = 0) -> float:
    """Combine a feet/inches pair into total inches, clamped to a finite non-negative value."""

    registry = ureg()
    total = finite_or_zero(feet) * registry.foot + finite_or_zero(inches) * registry.inch
    # pint converts through metres; drop the float noise so 8 ft 6 in is exactly 102.
    magnitude = round(float(total.to(registry.inch).magnitude), 6)
    # An overflowing total saturates at the largest float instead of reading as 0.
    return min(max(0.0, magnitude), sys.float_info.max)


def fmt_inches(inches: float) -> str:
    """Render a length in inches as ``<ft>′ <in>″``."""

    # Round the total first so the inch part never reads 12.
    total = int(math.floor(sanitize_measure(inches) + 0.5))
    feet, remainder = divmod(total, 12)
    return f"{feet}′ {remainder}″"


def fmt_pounds(pounds: float) -> str:
    """Format a weight with thousands separators (``80,000``)."""

    value = sanitize_measure(pounds)
    if value.is_integer():
        return f"{int(value):,}"
    return f"{value:,}"


__all__ = [
    "ureg",
    "finite_or_zero",
    "sanitize_measure",
    "to_inches",
    "fmt_inches",
    "fmt_pounds",
]
