"""Logging setup for the tag cloud service."""

import logging
import sys

from tagcloud.core.config import Settings, get_settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Library loggers stay at WARNING unless debugging.
_QUIET_LOGGERS = ("httpx", "asyncio", "redis")


def setup_logging(settings: Settings | None = None) -> None:
    """Configure root logging to stdout for the service and its scripts.

    DEBUG when settings.debug is set, otherwise INFO. SQL statements are
    logged only when database_echo is set.
    """
    settings = settings or get_settings()
    level = logging.DEBUG if settings.debug else logging.INFO
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    logging.getLogger("tagcloud").setLevel(level)
    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.INFO if settings.database_echo else logging.WARNING
    )
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(level if settings.debug else logging.WARNING)
