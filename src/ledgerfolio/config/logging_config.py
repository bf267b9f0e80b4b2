"""Logging configuration."""

import logging
import sys

from ledgerfolio.config.settings import get_settings


def build_log_format(app_name: str) -> str:
    """Log line format tagged with the application name."""
    return f"%(asctime)s - {app_name} - %(name)s - %(levelname)s - %(message)s"


def setup_logging() -> None:
    """Configure application logging."""
    settings = get_settings()
    level = getattr(logging, settings.log_level.upper())

    logging.basicConfig(
        level=level,
        format=build_log_format(settings.app_name),
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    logging.getLogger("ledgerfolio").setLevel(level)

    # Reduce noise from third-party libraries
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("uvicorn").setLevel(logging.INFO)
