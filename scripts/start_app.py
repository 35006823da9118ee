#!/usr/bin/env python3
"""Start the API server with logging and Logfire configured first."""

import logging
import sys

import logfire
import uvicorn

from quorum.config import Settings
from quorum.util.logging import setup_logging
from quorum.util.observability import configure_logfire


def main() -> int:
    """Start the application and log any startup errors to Logfire."""
    settings = Settings()

    level = setup_logging(settings)
    configure_logfire(settings)

    try:
        logfire.info("Starting Quorum API", host=settings.host, port=settings.port)
        uvicorn.run(
            "quorum.interface.api.app:app",
            host="0.0.0.0",
            port=settings.port,
            log_level=logging.getLevelName(level).lower(),
        )
        return 0

    except Exception as e:
        logfire.error(
            "Application startup failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())
