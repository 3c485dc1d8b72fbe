#!/usr/bin/env python3
"""Apply the forum schema migrations with Logfire error tracking."""

import sys
from pathlib import Path

import logfire
from alembic import command
from alembic.config import Config

from vibeforum.config import Settings
from vibeforum.util.logging import setup_logging
from vibeforum.util.observability import configure_logfire

ALEMBIC_INI = Path(__file__).resolve().parent.parent / "alembic.ini"


def main(revision: str = "head") -> int:
    """Upgrade the database to ``revision`` and report failures to Logfire."""
    settings = Settings()

    configure_logfire(settings)
    setup_logging(settings)

    try:
        with logfire.span("run_migrations", revision=revision):
            command.upgrade(Config(str(ALEMBIC_INI)), revision)

        logfire.info("Database migrations completed", revision=revision)
        return 0

    except Exception as e:
        logfire.error(
            "Database migration failed",
            revision=revision,
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # Re-raise so the deploy fails instead of serving a stale schema
        raise


if __name__ == "__main__":
    sys.exit(main(*sys.argv[1:2]))
