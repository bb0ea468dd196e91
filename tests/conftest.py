"""Pytest configuration and shared fixtures for tests.

This module provides common pytest fixtures that are shared across
unit and E2E tests.
"""

import pytest

from swapi_checks import SwapiSettings, configure_logging, load_settings
from tests.utils import FakeSwapi


@pytest.fixture(scope="session", autouse=True)
def _configure_logging() -> None:
    """Apply LOG_LEVEL once per test session."""
    configure_logging(load_settings())


# ============================================================
# Offline SWAPI Fixtures
# ============================================================


@pytest.fixture
def fake_swapi() -> FakeSwapi:
    """Fresh in-memory SWAPI with the default dataset."""
    return FakeSwapi()


@pytest.fixture
def fast_settings() -> SwapiSettings:
    """Settings with a short time bound for timeout tests."""
    return SwapiSettings(timeout=0.05)
