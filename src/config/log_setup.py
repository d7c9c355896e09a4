"""
Pass the Pigs - Logging Configuration
"""

import logging

from src.config.settings import Settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(settings: Settings) -> int:
    """Configure root logging from settings; debug mode forces DEBUG.

    Returns:
        The numeric level that was applied
    """
    if settings.debug:
        level = logging.DEBUG
    else:
        level = logging.getLevelName(settings.log_level.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level {settings.log_level!r}.")

    logging.basicConfig(level=level, format=LOG_FORMAT, force=True)
    return level
