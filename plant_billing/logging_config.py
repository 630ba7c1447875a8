"""Logging setup shared by the HTTP app and the command line scripts."""

import logging

from plant_billing.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str | None = None) -> None:
    """Apply the configured log level to the root logger.

    Unknown level names fall back to INFO rather than failing startup.
    """
    resolved = logging.getLevelName((level or settings.log_level).upper())
    if not isinstance(resolved, int):
        resolved = logging.INFO
    logging.basicConfig(level=resolved, format=LOG_FORMAT)
    logging.getLogger().setLevel(resolved)
