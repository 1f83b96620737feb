"""Module: logging."""

import logging

from petclinic.core.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str | None = None) -> None:
    # Called once from application startup; handlers use module-level loggers.
    logging.basicConfig(level=(level or settings.log_level).upper(), format=LOG_FORMAT)
