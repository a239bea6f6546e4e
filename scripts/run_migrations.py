#!/usr/bin/env python3
"""Apply database migrations, reporting failures to Logfire."""

import sys
import logfire
from alembic import command
from alembic.config import Config

from artbook.config import Settings
from artbook.util.observability import configure_logfire


def main(revision: str = "head") -> int:
    """Upgrade the schema to ``revision``."""
    settings = Settings()
    configure_logfire(settings)

    with logfire.span("Running migrations", revision=revision):
        try:
            alembic_cfg = Config("alembic.ini")
            alembic_cfg.set_main_option("sqlalchemy.url", settings.database_url)
            command.upgrade(alembic_cfg, revision)
        except Exception as e:
            logfire.error(
                "Database migration failed",
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            # Fail the deploy rather than start against a stale schema
            raise

    logfire.info("Database migrations completed", revision=revision)
    return 0


if __name__ == "__main__":
    sys.exit(main(*sys.argv[1:2]))
