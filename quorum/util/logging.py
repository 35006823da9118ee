"""Stdlib logging setup.

Application events go through Logfire; this only tames the stdlib loggers
that uvicorn, SQLAlchemy and the multipart parser write to.
"""

import logging
import sys

from quorum.config import Settings

_QUIET_LOGGERS = ("sqlalchemy.engine", "asyncpg", "multipart", "python_multipart")


def log_level(settings: Settings) -> int:
    """Log level for an environment: DEBUG when debugging, WARNING in tests."""
    if settings.debug:
        return logging.DEBUG
    if settings.environment == "test":
        return logging.WARNING
    return logging.INFO


def setup_logging(settings: Settings) -> int:
    """Configure the root logger.

    Args:
        settings: Application settings

    Returns:
        The level applied, so the server can log at the same level
    """
    level = log_level(settings)

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))
    logging.getLogger("quorum").setLevel(level)

    logging.getLogger(__name__).info(
        "Logging configured for %s at %s",
        settings.environment,
        logging.getLevelName(level),
    )
    return level
