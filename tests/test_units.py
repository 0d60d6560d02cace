from __future__ import annotations

import math
import sys

import pytest

from src.app.utils import finite_or_zero, fmt_inches, fmt_pounds, sanitize_measure, to_inches


def test_to_inches_combines_feet_and_inches() -> None:
    assert to_inches(8, 6) == 102.0
    assert to_inches(13, 6) == 162.0
    assert to_inches(65, 0) == 780.0
    assert to_inches("10", "0") == 120.0


def test_to_inches_treats_invalid_parts_as_zero() -> None:
    assert to_inches("abc", 6) == 6.0
    assert to_inches(float("nan"), None) == 0.0
    assert to_inches(math.inf, 3) == 3.0
    assert to_inches(None, None) == 0.0


def test_to_inches_clamps_total_not_parts() -> None:
    assert to_inches(-1, 0) == 0.0
    assert to_inches(10, -3) == 117.0


def test_to_inches_saturates_instead_of_overflowing() -> None:
    total = to_inches(1e308, 0)
    assert math.isfinite(total)
    assert total == sys.float_info.max
    assert to_inches(-1e308, 0) == 0.0


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("12.5", 12.5),
        ("", 0.0),
        ("  ", 0.0),
        (None, 0.0),
        (-4, 0.0),
        (float("inf"), 0.0),
        (float("nan"), 0.0),
        ("nope", 0.0),
        (True, 0.0),
        (80000, 80000.0),
    ],
)
def test_sanitize_measure(raw, expected) -> None:
    assert sanitize_measure(raw) == expected


def test_finite_or_zero_keeps_negative_values() -> None:
    assert finite_or_zero("-3") == -3.0
    assert finite_or_zero(object()) == 0.0


def test_fmt_inches_round_trips_whole_inches() -> None:
    for feet in (0, 1, 8, 13, 15, 65, 99):
        for inches in range(12):
            assert fmt_inches(to_inches(feet, inches)) == f"{feet}′ {inches}″"


def test_fmt_inches_never_renders_twelve_inches() -> None:
    assert fmt_inches(11.6) == "1′ 0″"
    assert fmt_inches(101.5) == "8′ 6″"
    assert fmt_inches(-5) == "0′ 0″"


def test_fmt_pounds_uses_thousands_separators() -> None:
    assert fmt_pounds(80000) == "80,000"
    assert fmt_pounds(1234567.5) == "1,234,567.5"
    assert fmt_pounds(0) == "0"
