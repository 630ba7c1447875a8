"""Time and calendar helpers for billing.

This module turns the mixed time representations captured on timesheets
(clock strings, decimal hours, meter readings, precomputed totals) into a
single decimal-hour duration, and classifies an entry date into the day type
whose minimum-hour threshold applies.

Parsing is fail-soft: a value that cannot be read counts as zero hours for
that side of the interval instead of raising.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from datetime import date, datetime

from plant_billing.schemas import BillingConfig, DayType, TimesheetEntry

logger = logging.getLogger(__name__)

SATURDAY_INDEX = 6
SUNDAY_INDEX = 0
WEEKDAY_LABELS = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")


def _parse_time(value: str | float | None) -> float | None:
    """Parse one time value to decimal hours, or None when unreadable."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value) if math.isfinite(value) else None

    text = str(value).strip()
    if not text or text == "00:00":
        return 0.0

    try:
        parsed = float(text)
    except ValueError:
        parsed = None
    if parsed is not None and math.isfinite(parsed):
        return parsed

    hours, separator, minutes = text.partition(":")
    if not separator:
        return None
    try:
        return int(hours) + int(minutes) / 60
    except ValueError:
        return None


def parse_time_to_hours(value: str | float | None) -> float:
    """Parse a clock string or decimal hour value, treating bad input as 0."""
    parsed = _parse_time(value)
    if parsed is None:
        if value not in (None, ""):
            logger.debug("Unparseable time value %r treated as 0 hours", value)
        return 0.0
    return parsed


def normalize_duration(entry: TimesheetEntry) -> float:
    """Return the raw worked duration of an entry in decimal hours.

    A positive `total_hours` wins outright. Otherwise the start/end pair is
    read, falling back to the open/close meter readings, and the difference
    is clamped at zero. Shifts are never wrapped across midnight.
    """
    if entry.total_hours is not None and entry.total_hours > 0:
        return entry.total_hours

    start_hours = parse_time_to_hours(entry.start_time or entry.open_hours)
    end_hours = parse_time_to_hours(entry.end_time or entry.close_hours or entry.closing_hours)

    if start_hours == 0 and end_hours == 0:
        return 0.0

    return max(end_hours - start_hours, 0.0)


def parse_entry_date(value: str | None) -> date | None:
    """Read the calendar date from an ISO date or datetime string."""
    text = (value or "").strip()
    if not text:
        return None
    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        pass
    try:
        return date.fromisoformat(text[:10])
    except ValueError:
        return None


def day_of_week(value: str | None) -> int | None:
    """Return the weekday index (0 = Sunday ... 6 = Saturday), or None."""
    parsed = parse_entry_date(value)
    if parsed is None:
        return None
    return (parsed.weekday() + 1) % 7


@dataclass(frozen=True)
class DayClassification:
    weekday_index: int | None
    day_type: DayType
    minimum_hours: float


def classify_day(date_string: str | None, is_public_holiday: bool, config: BillingConfig) -> DayClassification:
    """Classify an entry date into a day type and look up its minimum.

    The public holiday flag is supplied by the caller and outranks the
    weekday. Unparseable dates are billed as weekdays.
    """
    weekday_index = day_of_week(date_string)
    if weekday_index is None:
        logger.warning("Unparseable entry date %r; classifying as weekday", date_string)

    if is_public_holiday:
        day_type = DayType.PUBLIC_HOLIDAY
    elif weekday_index == SATURDAY_INDEX:
        day_type = DayType.SATURDAY
    elif weekday_index == SUNDAY_INDEX:
        day_type = DayType.SUNDAY
    else:
        day_type = DayType.WEEKDAY

    return DayClassification(
        weekday_index=weekday_index,
        day_type=day_type,
        minimum_hours=day_type.minimum_hours(config),
    )
