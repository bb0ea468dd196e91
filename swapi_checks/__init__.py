"""
SWAPI Checks

Table-driven integration checks for the Star Wars API (swapi.dev).

Components:
    - Fixture Table: literal (search key, expected fields) records
    - Assertion Runner: one GET per fixture, exact field comparison
"""

from .client import SwapiClient
from .config import (
    DEFAULT_BASE_URL,
    DEFAULT_LOG_LEVEL,
    DEFAULT_TIMEOUT,
    LOG_LEVELS,
    SwapiSettings,
    load_settings,
)
from .failures import CheckFailure, FailureKind
from .fixtures import (
    CHARACTER_FIXTURES,
    FILM_FIXTURES,
    CharacterFixture,
    FilmFixture,
    fixture_id,
)
from .logging_config import configure_logging
from .models import Film, Person, Resource, SearchResultSet
from .result import Error, Ok, Result
from .runner import FieldCheck, check_character, check_film, check_listing, compare_fields


__all__ = [
    # Fixture Table
    "CHARACTER_FIXTURES",
    "FILM_FIXTURES",
    "CharacterFixture",
    "FilmFixture",
    "fixture_id",
    # Assertion Runner
    "FieldCheck",
    "check_character",
    "check_film",
    "check_listing",
    "compare_fields",
    # Failures and results
    "CheckFailure",
    "Error",
    "FailureKind",
    "Ok",
    "Result",
    # HTTP and models
    "Film",
    "Person",
    "Resource",
    "SearchResultSet",
    "SwapiClient",
    # Configuration
    "DEFAULT_BASE_URL",
    "DEFAULT_LOG_LEVEL",
    "DEFAULT_TIMEOUT",
    "LOG_LEVELS",
    "SwapiSettings",
    "configure_logging",
    "load_settings",
]
