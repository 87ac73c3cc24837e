"""
Logging configuration for the dashboard API and scripts
"""

import logging
import sys
from typing import Optional
from core.config import settings

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Top-level packages of the dashboard; these follow LOG_LEVEL
APP_LOGGERS = ("api", "analytics", "core", "scripts", "services", "storage", "schemas")

# Library loggers held at WARNING unless the dashboard itself runs at DEBUG
NOISY_LOGGERS = ("sqlalchemy.engine", "sqlalchemy.pool", "multipart", "httpx")


def resolve_level(level_name: Optional[str] = None) -> int:
    """Numeric level for a name such as 'info', falling back to INFO"""
    name = (level_name or settings.LOG_LEVEL).upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def setup_logging(level_name: Optional[str] = None) -> int:
    """
    Configure dashboard logging and return the level applied.

    The root logger stays at WARNING so third-party libraries only report
    problems; the dashboard's own packages log at LOG_LEVEL (or the given
    override, used by the command-line scripts).
    """
    app_level = resolve_level(level_name)

    logging.basicConfig(
        level=logging.WARNING,
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        handlers=[
            logging.StreamHandler(sys.stdout)
        ]
    )

    for name in APP_LOGGERS + ("__main__",):
        logging.getLogger(name).setLevel(app_level)

    library_level = logging.INFO if app_level <= logging.DEBUG else logging.WARNING
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(library_level)

    logging.getLogger(__name__).info(
        f"Logging configured: dashboard at {logging.getLevelName(app_level)}, "
        f"environment {settings.ENVIRONMENT}"
    )
    return app_level
