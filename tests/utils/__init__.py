"""Shared test utilities for unit and e2e tests."""

from tests.utils.fake_swapi import FakeSwapi
from tests.utils.result_assertions import assert_error, assert_ok


__all__ = ["FakeSwapi", "assert_error", "assert_ok"]
