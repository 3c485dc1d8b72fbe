"""Logging configuration for the application."""

import logging
import sys

import logfire

from vibeforum.config import Settings

# Libraries that log every statement or request at INFO
_NOISY_LOGGERS = ("sqlalchemy.engine", "uvicorn.access", "alembic.runtime.migration")


def setup_logging(settings: Settings) -> None:
    """Configure stdlib logging for the forum process.

    Records go to stdout and are forwarded to Logfire, so modules using
    ``get_logger`` show up next to the spans emitted by the services.
    Debug output is only enabled outside production.

    Args:
        settings: Application settings
    """
    level = (
        logging.DEBUG
        if settings.debug and settings.environment != "production"
        else logging.INFO
    )

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)-7s [%(name)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[
            logging.StreamHandler(sys.stdout),
            logfire.LogfireLoggingHandler(),
        ],
        force=True,
    )

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    get_logger(__name__).info(
        "Logging configured for %s (%s)",
        settings.forum.site_name,
        logging.getLevelName(level),
    )


def get_logger(name: str) -> logging.Logger:
    """Get a logger below the ``vibeforum`` namespace."""
    if not name.startswith("vibeforum"):
        name = f"vibeforum.{name}"
    return logging.getLogger(name)
