"""Mini-README: HTTP tests for the billable-hours routes.

These checks prove the routes delegate to the billing services, fall back to
the site default configuration, and answer in the camelCase shape the
timesheet clients store.
"""

from fastapi.testclient import TestClient

from plant_billing.config import settings
from plant_billing.main import app


client = TestClient(app)


def test_default_billing_config_comes_from_settings() -> None:
    response = client.get("/billing-config/default")

    assert response.status_code == 200
    body = response.json()
    assert body["weekdayMinimumHours"] == settings.default_weekday_minimum_hours
    assert body["rainDayMinimumHours"] == settings.default_rain_day_minimum_hours
    assert body["breakdownRuleEnabled"] is settings.default_breakdown_rule_enabled


def test_single_entry_uses_supplied_config() -> None:
    response = client.post(
        "/billable-hours",
        json={
            "entry": {"date": "2025-01-18", "startTime": "08:00", "endTime": "11:00"},
            "config": {"saturdayMinimumHours": 6},
        },
    )

    assert response.status_code == 200
    body = response.json()
    assert body["actualHours"] == 3
    assert body["billableHours"] == 6
    assert body["appliedRule"] == "saturday"
    assert body["minimumApplied"] == 6
    assert body["notes"]


def test_single_entry_without_config_uses_site_default() -> None:
    response = client.post(
        "/billable-hours",
        json={"entry": {"date": "2025-01-15", "totalHours": 1, "isBreakdown": True}},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["appliedRule"] == ("breakdown" if settings.default_breakdown_rule_enabled else "weekday")


def test_invalid_time_values_degrade_instead_of_failing() -> None:
    response = client.post(
        "/billable-hours",
        json={"entry": {"date": "not-a-date", "startTime": "??", "endTime": ""}},
    )

    assert response.status_code == 200
    assert response.json()["appliedRule"] == "invalid"


def test_malformed_payload_shape_is_rejected() -> None:
    response = client.post("/billable-hours", json={"entry": "08:00-17:00"})

    assert response.status_code == 422


def test_batch_returns_results_and_totals() -> None:
    response = client.post(
        "/billable-hours/batch",
        json={
            "entries": [
                {"date": "2025-01-15", "totalHours": 2, "isRainDay": True},
                {"date": "2025-01-19", "startTime": "07:00", "endTime": "17:00"},
                {"date": "2025-01-15", "startTime": "", "endTime": ""},
            ],
            "config": {"rainDayEnabled": True, "rainDayMinimumHours": 4.5, "sundayMinimumHours": 8},
        },
    )

    assert response.status_code == 200
    body = response.json()
    assert [result["appliedRule"] for result in body["results"]] == ["rain_day", "sunday", "invalid"]
    assert body["totals"]["totalActualHours"] == 12
    assert body["totals"]["totalBillableHours"] == 14.5
    assert body["totals"]["billableHoursByRule"] == {"rain_day": 4.5, "sunday": 10, "invalid": 0}


def test_healthcheck() -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_null_flags_and_date_resolve_to_weekday_rule() -> None:
    response = client.post(
        "/billable-hours",
        json={
            "entry": {"date": None, "totalHours": 4, "isBreakdown": None, "isRainDay": None},
            "config": {"weekdayMinimumHours": 8},
        },
    )

    assert response.status_code == 200
    body = response.json()
    assert body["appliedRule"] == "weekday"
    assert body["billableHours"] == 8
