"""Configuration module.

This file centralizes runtime configuration for the billing service and the
site-level billing defaults used when a caller does not send its own billing
configuration. Values can be provided via environment variables or a local
`.env` file.
"""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from plant_billing.schemas import BillingConfig


PROJECT_ROOT = Path(__file__).resolve().parent.parent
ENV_FILE_PATH = PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    app_name: str = "Plant Billing"
    environment: str = "development"
    debug: bool = True
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8000

    default_weekday_minimum_hours: float = 8
    default_saturday_minimum_hours: float = 8
    default_sunday_minimum_hours: float = 8
    default_public_holiday_minimum_hours: float = 8
    default_rain_day_enabled: bool = True
    default_rain_day_minimum_hours: float = 4.5
    default_breakdown_rule_enabled: bool = True

    # Use an absolute path so `.env` is consistently discovered regardless of
    # the process working directory used to start uvicorn or the CLI.
    model_config = SettingsConfigDict(env_file=ENV_FILE_PATH, env_file_encoding="utf-8")

    def default_billing_config(self) -> BillingConfig:
        """Build the site billing configuration used when none is supplied."""
        return BillingConfig(
            weekday_minimum_hours=self.default_weekday_minimum_hours,
            saturday_minimum_hours=self.default_saturday_minimum_hours,
            sunday_minimum_hours=self.default_sunday_minimum_hours,
            public_holiday_minimum_hours=self.default_public_holiday_minimum_hours,
            rain_day_enabled=self.default_rain_day_enabled,
            rain_day_minimum_hours=self.default_rain_day_minimum_hours,
            breakdown_rule_enabled=self.default_breakdown_rule_enabled,
        )


settings = Settings()
