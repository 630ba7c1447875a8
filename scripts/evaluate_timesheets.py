#!/usr/bin/env python3
"""Mini-README: CLI utility to check billable hours for a set of timesheets.

Use this to see how a site billing configuration treats exported timesheet
entries before they are invoiced. Entries are read from a JSON list; the
billing configuration defaults to the site defaults from settings/`.env`.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from plant_billing.config import settings
from plant_billing.logging_config import configure_logging
from plant_billing.schemas import BillingConfig, TimesheetEntry
from plant_billing.services_billing import calculate_billable_hours_for_timesheets, get_total_billable_hours

ENTRIES_ADAPTER = TypeAdapter(list[TimesheetEntry])


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Resolve billable hours for a JSON list of timesheet entries.")
    parser.add_argument("entries", type=Path, help="Path to a JSON file containing a list of timesheet entries.")
    parser.add_argument(
        "--config",
        dest="config",
        type=Path,
        default=None,
        help="Optional JSON billing configuration. Defaults to the site defaults from settings.",
    )
    parser.add_argument("--log-level", dest="log_level", default=None, help="Override LOG_LEVEL for this run.")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    configure_logging(args.log_level)

    try:
        entries = ENTRIES_ADAPTER.validate_json(args.entries.read_text(encoding="utf-8"))
        if args.config is not None:
            config = BillingConfig.model_validate(json.loads(args.config.read_text(encoding="utf-8")))
        else:
            config = settings.default_billing_config()
    except (OSError, ValueError, ValidationError) as exc:
        print(f"[billable-hours] ERROR: {exc}")
        return 1

    results = calculate_billable_hours_for_timesheets(entries, config)
    for entry, result in zip(entries, results):
        print(
            f"[billable-hours] {entry.date or '-'}: actual={result.actual_hours:g}h "
            f"billable={result.billable_hours:g}h rule={result.applied_rule.value} ({result.notes})"
        )

    totals = get_total_billable_hours(results)
    print(
        f"[billable-hours] Totals: actual={totals.total_actual_hours:g}h "
        f"billable={totals.total_billable_hours:g}h over {len(results)} entries"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
