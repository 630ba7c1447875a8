"""Billable hours domain services.

Resolves how many hours of a recorded work session may be billed to the
client for a site billing configuration.

Rules, highest priority first:
- no recorded time: the entry is invalid and bills nothing
- breakdown (when the site bills breakdowns): bill actual hours, no minimum
- inclement weather (when the site bills rain days): max(actual, rain minimum)
- day type: max(actual, weekday/Saturday/Sunday/public holiday minimum)

A breakdown flag on a site with breakdown billing disabled is ignored and the
entry is billed by the lower rules.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence

from plant_billing.schemas import AppliedRule, BillableHoursResult, BillingConfig, BillingTotals, TimesheetEntry
from plant_billing.services_time import WEEKDAY_LABELS, classify_day, normalize_duration

logger = logging.getLogger(__name__)

BillingRule = Callable[[TimesheetEntry, float, BillingConfig], BillableHoursResult | None]


def _minimum_note(label: str, actual_hours: float, minimum_hours: float) -> str:
    if actual_hours >= minimum_hours:
        return f"{label} - raw hours ({actual_hours:g}h) meets or exceeds minimum ({minimum_hours:g}h)"
    return f"{label} - minimum hours ({minimum_hours:g}h) applied over raw hours ({actual_hours:g}h)"


def _breakdown_rule(entry: TimesheetEntry, actual_hours: float, config: BillingConfig) -> BillableHoursResult | None:
    if not entry.is_breakdown:
        return None
    if not config.breakdown_rule_enabled:
        logger.info("Breakdown flagged but breakdown billing is disabled; falling through to lower rules")
        return None
    logger.debug("Breakdown rule: billing actual hours %s with no minimum", actual_hours)
    return BillableHoursResult(
        actual_hours=actual_hours,
        billable_hours=actual_hours,
        applied_rule=AppliedRule.BREAKDOWN,
        minimum_applied=0,
        notes=f"Breakdown - billed at actual hours ({actual_hours:g}h), no minimum applied",
    )


def _weather_rule(entry: TimesheetEntry, actual_hours: float, config: BillingConfig) -> BillableHoursResult | None:
    if not (entry.is_weather_affected and config.rain_day_enabled):
        return None
    minimum = config.rain_day_minimum_hours
    billable = max(actual_hours, minimum)
    logger.debug("Rain day rule: max(actual=%s, minimum=%s) = %s", actual_hours, minimum, billable)
    return BillableHoursResult(
        actual_hours=actual_hours,
        billable_hours=billable,
        applied_rule=AppliedRule.RAIN_DAY,
        minimum_applied=minimum,
        notes=_minimum_note("Rain day", actual_hours, minimum),
    )


def _day_type_rule(entry: TimesheetEntry, actual_hours: float, config: BillingConfig) -> BillableHoursResult:
    day = classify_day(entry.date, entry.is_public_holiday, config)
    billable = max(actual_hours, day.minimum_hours)
    logger.debug(
        "Day type rule: %s (%s) max(actual=%s, minimum=%s) = %s",
        day.day_type.value,
        WEEKDAY_LABELS[day.weekday_index] if day.weekday_index is not None else "unknown date",
        actual_hours,
        day.minimum_hours,
        billable,
    )
    return BillableHoursResult(
        actual_hours=actual_hours,
        billable_hours=billable,
        applied_rule=day.day_type.applied_rule,
        minimum_applied=day.minimum_hours,
        notes=_minimum_note(day.day_type.value, actual_hours, day.minimum_hours),
    )


# Condition rules evaluated in order before the day type rule; the first
# rule returning a result wins.
CONDITION_RULES: tuple[BillingRule, ...] = (_breakdown_rule, _weather_rule)


def calculate_billable_hours(entry: TimesheetEntry, config: BillingConfig) -> BillableHoursResult:
    """Resolve the billable hours for a single timesheet entry.

    Never raises for malformed times or dates: an entry with no usable time
    resolves to the `invalid` rule with zero hours, whatever its flags.
    """
    actual_hours = normalize_duration(entry)
    if actual_hours == 0:
        logger.debug("No valid time entry for %s; returning invalid result", entry.date or "undated entry")
        return BillableHoursResult(
            actual_hours=0,
            billable_hours=0,
            applied_rule=AppliedRule.INVALID,
            minimum_applied=0,
            notes="No valid start and end times provided",
        )

    for rule in CONDITION_RULES:
        result = rule(entry, actual_hours, config)
        if result is not None:
            return result

    return _day_type_rule(entry, actual_hours, config)


def calculate_billable_hours_for_timesheets(
    entries: Iterable[TimesheetEntry],
    config: BillingConfig,
) -> list[BillableHoursResult]:
    """Resolve every entry independently, preserving input order."""
    results = [calculate_billable_hours(entry, config) for entry in entries]
    logger.debug("Calculated billable hours for %s timesheets", len(results))
    return results


def get_total_billable_hours(results: Sequence[BillableHoursResult]) -> BillingTotals:
    """Sum actual and billable hours, with billable hours split per rule."""
    by_rule: dict[AppliedRule, float] = {}
    for result in results:
        by_rule[result.applied_rule] = by_rule.get(result.applied_rule, 0) + result.billable_hours

    return BillingTotals(
        total_actual_hours=sum(result.actual_hours for result in results),
        total_billable_hours=sum(result.billable_hours for result in results),
        billable_hours_by_rule=by_rule,
    )
