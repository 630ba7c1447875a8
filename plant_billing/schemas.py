"""Pydantic schemas.

Defines the billing configuration, timesheet entry and result shapes shared
by the billing services, the HTTP routes and the command line scripts.
Records read from the site document store use camelCase keys, so every model
accepts both the camelCase alias and the snake_case field name.
"""

from enum import Enum

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class AppliedRule(str, Enum):
    BREAKDOWN = "breakdown"
    RAIN_DAY = "rain_day"
    WEEKDAY = "weekday"
    SATURDAY = "saturday"
    SUNDAY = "sunday"
    PUBLIC_HOLIDAY = "public_holiday"
    INVALID = "invalid"


class DayType(str, Enum):
    WEEKDAY = "weekday"
    SATURDAY = "saturday"
    SUNDAY = "sunday"
    PUBLIC_HOLIDAY = "public_holiday"

    def minimum_hours(self, config: "BillingConfig") -> float:
        """Return the configured minimum for this day type."""
        return getattr(config, f"{self.value}_minimum_hours")

    @property
    def applied_rule(self) -> AppliedRule:
        return AppliedRule(self.value)


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class BillingConfig(_CamelModel):
    """Site-level billing configuration.

    Minimums are expected to be non-negative but are not clamped; a negative
    minimum simply never wins the comparison against actual hours.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    weekday_minimum_hours: float = 8
    saturday_minimum_hours: float = 8
    sunday_minimum_hours: float = 8
    public_holiday_minimum_hours: float = 8
    rain_day_enabled: bool = True
    rain_day_minimum_hours: float = 4.5
    breakdown_rule_enabled: bool = True


class TimesheetEntry(_CamelModel):
    """One work session submitted for billing evaluation.

    `open_hours`/`close_hours`/`closing_hours` are meter readings captured by
    the plant-hours screens and stand in for missing start/end times.
    """

    date: str = ""
    start_time: str | float | None = None
    end_time: str | float | None = None
    open_hours: str | float | None = None
    close_hours: str | float | None = None
    closing_hours: str | float | None = None
    total_hours: float | None = None
    is_breakdown: bool = False
    is_rain_day: bool = False
    is_inclement_weather: bool = Field(
        default=False,
        validation_alias=AliasChoices("isInclementWeather", "inclementWeather", "is_inclement_weather"),
    )
    is_public_holiday: bool = False
    is_strike_day: bool = False

    @field_validator(
        "is_breakdown", "is_rain_day", "is_inclement_weather", "is_public_holiday", "is_strike_day", mode="before"
    )
    @classmethod
    def _null_flag_is_false(cls, value):
        return False if value is None else value

    @field_validator("date", mode="before")
    @classmethod
    def _null_date_is_blank(cls, value):
        return "" if value is None else value

    @property
    def is_weather_affected(self) -> bool:
        return self.is_rain_day or self.is_inclement_weather


class BillableHoursResult(_CamelModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    actual_hours: float
    billable_hours: float
    applied_rule: AppliedRule
    minimum_applied: float
    notes: str


class BillingTotals(_CamelModel):
    total_actual_hours: float = 0
    total_billable_hours: float = 0
    billable_hours_by_rule: dict[AppliedRule, float] = Field(default_factory=dict)


class BillableHoursRequest(_CamelModel):
    entry: TimesheetEntry
    config: BillingConfig | None = None


class BatchBillableHoursRequest(_CamelModel):
    entries: list[TimesheetEntry]
    config: BillingConfig | None = None


class BatchBillableHoursResponse(_CamelModel):
    results: list[BillableHoursResult]
    totals: BillingTotals
