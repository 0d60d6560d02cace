from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from src.app.data.regulation import (
    JURISDICTIONS,
    RuleStatus,
    RuleTable,
    load_rule_table,
)
from src.app.settings import settings


def _ok_entry(**overrides) -> dict:
    entry = {
        "status": "ok",
        "legal_max": {"width_in": 102, "height_in": 162, "length_in": 780, "gross_lbs": 80000},
    }
    entry.update(overrides)
    return entry


def test_load_default_rule_table_from_yaml() -> None:
    table = load_rule_table(settings.rule_table_path)
    assert table.id == "us48"
    assert table.version == "1"
    assert len(table.rules) == 48
    assert table.codes() == JURISDICTIONS
    assert table.available_codes() == ("OK",)

    ok = table.lookup("OK")
    assert ok.status is RuleStatus.AVAILABLE
    assert ok.legal_max is not None
    assert ok.legal_max.width_in == 102
    assert ok.legal_max.height_in == 162
    assert ok.legal_max.length_in == 780
    assert ok.legal_max.gross_lbs == 80000
    assert [tier.over_in for tier in ok.escort.width.two] == [144, 120]
    assert [tier.over_in for tier in ok.escort.width.multi] == [144, 138]
    assert ok.high_pole is not None and ok.high_pole.required_over_height_in == 180
    assert ok.sources == ("https://www.ok.gov/",)


def test_every_other_state_is_stubbed_as_no_data() -> None:
    table = load_rule_table(settings.rule_table_path)
    for code in JURISDICTIONS:
        if code == "OK":
            continue
        rule = table.lookup(code)
        assert rule.status is RuleStatus.NO_DATA
        assert rule.legal_max is None


def test_lookup_is_total_and_case_insensitive() -> None:
    table = RuleTable.build({"OK": _ok_entry()})
    assert table.lookup(" ok ").available
    assert table.lookup("AK").status is RuleStatus.NO_DATA
    assert table.lookup("").status is RuleStatus.NO_DATA


def test_explicit_entries_override_stubs() -> None:
    table = RuleTable.build({"tx": _ok_entry(travel="Daylight only")})
    assert table.lookup("TX").available
    assert table.lookup("TX").travel == "Daylight only"
    assert not table.lookup("OK").available


def test_explicit_no_data_entry_is_allowed() -> None:
    table = RuleTable.build({"OK": {"status": "noData"}})
    assert table.lookup("OK").status is RuleStatus.NO_DATA


def test_entry_without_status_is_no_data() -> None:
    entry = _ok_entry()
    del entry["status"]
    table = RuleTable.build({"TX": entry})
    assert table.lookup("TX").status is RuleStatus.NO_DATA
    assert table.lookup("TX").legal_max is None
    assert table.available_codes() == ()


def test_tiers_are_sorted_most_restrictive_first(caplog) -> None:
    entry = _ok_entry(
        escort={
            "width": {
                "two": [
                    {"over_in": 120, "escorts": "1F", "flags": True},
                    {"over_in": 144, "escorts": "1F+1R", "flags": True},
                ]
            }
        }
    )
    logger = logging.getLogger("routeguard")
    logger.addHandler(caplog.handler)
    try:
        table = RuleTable.build({"OK": entry})
    finally:
        logger.removeHandler(caplog.handler)

    tiers = table.lookup("OK").escort.width.two
    assert [tier.escorts for tier in tiers] == ["1F+1R", "1F"]
    assert table.lookup("OK").escort.width.multi == ()
    assert any(record.getMessage() == "escort_tiers_reordered" for record in caplog.records)


def test_rule_table_is_read_only() -> None:
    table = RuleTable.build({"OK": _ok_entry()})
    with pytest.raises(TypeError):
        table.rules["OK"] = table.lookup("AL")  # type: ignore[index]


@pytest.mark.parametrize(
    ("entries", "message"),
    [
        ({"ZZ": _ok_entry()}, "Unknown jurisdiction"),
        ({"OK": {"status": "maybe"}}, "unknown status"),
        ({"OK": {"status": "ok"}}, "legal_max"),
        (
            {"OK": _ok_entry(legal_max={"width_in": -1, "height_in": 1, "length_in": 1, "gross_lbs": 1})},
            "non-negative",
        ),
        (
            {"OK": _ok_entry(legal_max={"width_in": "wide", "height_in": 1, "length_in": 1, "gross_lbs": 1})},
            "numeric",
        ),
        ({"OK": _ok_entry(escort={"width": {"two": [{"over_in": 10}]}})}, "escorts"),
        ({"OK": _ok_entry(escort={"width": {"two": "1F"}})}, "must be a list"),
        ({"OK": _ok_entry(sources="https://www.ok.gov/")}, "sources"),
        ({"OK": "ok"}, "must be a mapping"),
    ],
)
def test_invalid_entries_raise_value_error(entries, message) -> None:
    with pytest.raises(ValueError, match=message):
        RuleTable.build(entries)


def test_load_rule_table_from_json(tmp_path: Path) -> None:
    path = tmp_path / "table.json"
    path.write_text(
        json.dumps({"id": "demo", "title": "Demo", "jurisdictions": {"KS": _ok_entry()}}),
        encoding="utf-8",
    )
    table = load_rule_table(path)
    assert table.id == "demo"
    assert table.title == "Demo"
    assert table.version is None
    assert table.available_codes() == ("KS",)


def test_load_rule_table_requires_id() -> None:
    with pytest.raises(ValueError, match="id"):
        load_rule_table({"jurisdictions": {}})


def test_yaml_payload_must_be_mapping(tmp_path: Path) -> None:
    path = tmp_path / "table.yaml"
    path.write_text("- just\n- a list\n", encoding="utf-8")
    with pytest.raises(ValueError, match="mapping"):
        load_rule_table(path)
