"""
Settings for the SWAPI check suite.

Every variable is optional; with none set the suite runs against
https://swapi.dev/api with a 10s bound per case.

Environment Variables:
    SWAPI_BASE_URL: API root (default: https://swapi.dev/api)
    SWAPI_TIMEOUT: Per-case timeout in seconds (default: 10.0)
    LOG_LEVEL: Console verbosity, one of DEBUG/INFO/WARNING/ERROR (default: INFO)

Values may also come from a ``.env.local`` file in the working directory.
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv
from loguru import logger


DEFAULT_BASE_URL = "https://swapi.dev/api"

# Search queries against the public API regularly take several seconds
DEFAULT_TIMEOUT = 10.0

# DEBUG shows request URLs, INFO passing checks, WARNING failing checks,
# ERROR only timeouts and transport errors
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True)
class SwapiSettings:
    """Resolved settings for one test session."""

    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    log_level: str = DEFAULT_LOG_LEVEL


def _get_timeout(default: float = DEFAULT_TIMEOUT) -> float:
    raw = os.environ.get("SWAPI_TIMEOUT")
    if not raw:
        return default
    try:
        timeout = float(raw)
    except ValueError:
        logger.warning(f"Invalid SWAPI_TIMEOUT={raw!r}, using {default}")
        return default
    if timeout <= 0:
        logger.warning(f"Non-positive SWAPI_TIMEOUT={raw!r}, using {default}")
        return default
    return timeout


def _get_log_level(default: str = DEFAULT_LOG_LEVEL) -> str:
    level = os.environ.get("LOG_LEVEL", default).upper()
    if level not in LOG_LEVELS:
        return default
    return level


def load_settings(env_file: str | None = ".env.local") -> SwapiSettings:
    """
    Build settings from the environment.

    Args:
        env_file: dotenv file to load first (existing variables win).
            Pass None to skip it.

    Returns:
        SwapiSettings with defaults for anything unset
    """
    if env_file:
        load_dotenv(env_file)

    base_url = os.environ.get("SWAPI_BASE_URL") or DEFAULT_BASE_URL
    settings = SwapiSettings(
        base_url=base_url.rstrip("/"),
        timeout=_get_timeout(),
        log_level=_get_log_level(),
    )
    logger.debug(f"Loaded settings: {settings}")
    return settings
