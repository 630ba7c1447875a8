"""Application entrypoint.

This file wires the HTTP routes that expose billable-hours resolution to the
timesheet submission and reporting clients. The routes only validate payloads
and delegate to the billing services; nothing is persisted here.
"""

from datetime import date

import uvicorn
from fastapi import Depends, FastAPI

from plant_billing.config import settings
from plant_billing.dependencies import get_default_billing_config, resolve_billing_config
from plant_billing.logging_config import configure_logging
from plant_billing.schemas import (
    BatchBillableHoursRequest,
    BatchBillableHoursResponse,
    BillableHoursRequest,
    BillableHoursResult,
    BillingConfig,
)
from plant_billing.services_billing import (
    calculate_billable_hours,
    calculate_billable_hours_for_timesheets,
    get_total_billable_hours,
)

app = FastAPI(title=settings.app_name, debug=settings.debug)


@app.on_event("startup")
def startup() -> None:
    configure_logging()


@app.get("/billing-config/default", response_model=BillingConfig)
def default_billing_config(default_config: BillingConfig = Depends(get_default_billing_config)):
    return default_config


@app.post("/billable-hours", response_model=BillableHoursResult)
def billable_hours(payload: BillableHoursRequest, default_config: BillingConfig = Depends(get_default_billing_config)):
    config = resolve_billing_config(payload.config, default_config)
    return calculate_billable_hours(payload.entry, config)


@app.post("/billable-hours/batch", response_model=BatchBillableHoursResponse)
def billable_hours_batch(payload: BatchBillableHoursRequest, default_config: BillingConfig = Depends(get_default_billing_config)):
    config = resolve_billing_config(payload.config, default_config)
    results = calculate_billable_hours_for_timesheets(payload.entries, config)
    return BatchBillableHoursResponse(results=results, totals=get_total_billable_hours(results))


@app.get("/health")
def healthcheck():
    return {"status": "ok", "date": date.today().isoformat()}


def run() -> None:
    """Serve the API with uvicorn using the configured host and port."""
    uvicorn.run(app, host=settings.host, port=settings.port)
