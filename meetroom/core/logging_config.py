"""
Logging setup for scripts and the migration runner.
Library modules only create `logging.getLogger(__name__)` loggers; the process entry point decides format and level.
"""

import logging

from meetroom.config import get_settings

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def configure_logging(level: str | None = None) -> None:
    """Configure the root logger. Level defaults to settings.log_level."""
    settings = get_settings()
    level = (level or settings.log_level).upper()
    logging.basicConfig(level=level, format=LOG_FORMAT, force=True)
    # SQL echo is noisy; only show it in debug mode
    logging.getLogger("sqlalchemy.engine").setLevel(logging.INFO if settings.debug else logging.WARNING)
