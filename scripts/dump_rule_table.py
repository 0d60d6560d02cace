"""Write the flattened permit rule table to CSV for data review.

Run from the repository root::

    python -m scripts.dump_rule_table [output.csv]
"""
from __future__ import annotations

import sys
from pathlib import Path

import pandas as pd

from src.app.data.regulation import ESCORT_AXES, ROAD_TYPES, RuleTable
from src.app.regulation import get_rule_table

DEFAULT_OUTPUT = Path(__file__).resolve().parents[1] / "out" / "rule_table.csv"


def flatten_rule_table(table: RuleTable) -> pd.DataFrame:
    """One row per jurisdiction; escort tiers collapsed to ``over_in:escorts`` lists."""
    records = []
    for code in table.codes():
        rule = table.lookup(code)
        record: dict[str, object] = {"state": code, "status": rule.status.value}
        if rule.available and rule.legal_max is not None:
            record.update(rule.legal_max.as_dict())
            for axis in ESCORT_AXES:
                for road in ROAD_TYPES:
                    tiers = rule.escort.axis(axis).for_road(road)
                    record[f"escort_{axis}_{road}"] = " | ".join(
                        f"{tier.over_in:g}:{tier.escorts}" for tier in tiers
                    )
            record["high_pole_over_in"] = (
                rule.high_pole.required_over_height_in if rule.high_pole else None
            )
            record["travel"] = rule.travel
            record["sources"] = " ".join(rule.sources)
        records.append(record)
    return pd.DataFrame.from_records(records)


def main(argv: list[str] | None = None) -> None:
    args = sys.argv[1:] if argv is None else argv
    output = Path(args[0]) if args else DEFAULT_OUTPUT

    frame = flatten_rule_table(get_rule_table())
    output.parent.mkdir(parents=True, exist_ok=True)
    frame.to_csv(output, index=False)

    available = int((frame["status"] == "ok").sum())
    print(f"Wrote {len(frame)} jurisdictions ({available} with data) to {output}")


if __name__ == "__main__":
    main()
