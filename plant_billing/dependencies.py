"""Dependency helpers.

Provides the site billing configuration used by FastAPI routes when a request
does not carry its own.
"""

from plant_billing.config import settings
from plant_billing.schemas import BillingConfig


def get_default_billing_config() -> BillingConfig:
    return settings.default_billing_config()


def resolve_billing_config(requested: BillingConfig | None, default: BillingConfig) -> BillingConfig:
    """Prefer the caller's configuration, falling back to the site default."""
    return requested if requested is not None else default
