"""Pytest configuration for live SWAPI tests.

Live tests hit https://swapi.dev (or SWAPI_BASE_URL) and run with every
plain ``pytest`` invocation. Deselect them explicitly with
``pytest -m "not live"`` when working offline.
"""

import pytest

from swapi_checks import SwapiSettings, load_settings


@pytest.fixture
def live_settings() -> SwapiSettings:
    return load_settings()
