#!/usr/bin/env python3
"""Create the database schema with Logfire error tracking."""

import asyncio
import sys

import logfire

from attend.config import Settings
from attend.persistence.database import create_engine, create_schema
from attend.util.observability import configure_logfire


async def init_db(settings: Settings) -> None:
    """Create missing tables, then release the connection pool."""
    engine = create_engine(settings)
    try:
        await create_schema(engine)
    finally:
        await engine.dispose()


def main() -> int:
    """Create the schema and log any errors to Logfire."""
    settings = Settings()

    configure_logfire(settings)

    try:
        logfire.info("Creating database schema")
        asyncio.run(init_db(settings))
        return 0

    except Exception as e:
        logfire.error(
            "Database initialisation failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # Re-raise so the container fails and doesn't start without a schema
        raise


if __name__ == "__main__":
    sys.exit(main())
