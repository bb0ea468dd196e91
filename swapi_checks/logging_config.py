"""Console logging for a check session."""

import sys

from loguru import logger

from .config import SwapiSettings


# Runner lines already carry a [SwapiRunner]/[SwapiClient] prefix
LOG_FORMAT = "<green>{time:HH:mm:ss.SSS}</green> <level>{level: <7}</level> {message}"


def configure_logging(settings: SwapiSettings) -> int:
    """
    Route loguru to stderr at ``settings.log_level``.

    Drops any previously added handlers so repeated calls (one per
    pytest session) do not duplicate output.

    Returns:
        The loguru handler id
    """
    logger.remove()
    handler_id = logger.add(
        sys.stderr,
        level=settings.log_level,
        format=LOG_FORMAT,
        colorize=True,
    )
    logger.debug(f"Checking {settings.base_url} (timeout={settings.timeout}s)")
    return handler_id
