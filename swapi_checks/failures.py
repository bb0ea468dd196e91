"""Failure taxonomy for SWAPI checks."""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class FailureKind(str, Enum):
    """Why a check failed."""

    UNEXPECTED_STATUS = "unexpected-status"  # HTTP status other than 200
    NO_RESULTS = "no-results"  # search matched nothing
    AMBIGUOUS_SEARCH = "ambiguous-search"  # search matched more than one entry
    FIELD_MISMATCH = "field-mismatch"  # a returned field differs from the expected value
    EMPTY_LISTING = "empty-listing"  # list endpoint reported count == 0
    TIMEOUT = "timeout"  # case exceeded its time bound
    TRANSPORT_ERROR = "transport-error"  # connection refused, TLS failure, ...
    INVALID_PAYLOAD = "invalid-payload"  # body is not a search result set


@dataclass(frozen=True)
class CheckFailure:
    """
    A failed check.

    Attributes:
        kind: Failure category
        message: Human-readable reason, used as the test failure message
        field: Name of the mismatching field (FIELD_MISMATCH only)
        expected: Expected value (FIELD_MISMATCH only)
        actual: Returned value (FIELD_MISMATCH only)
    """

    kind: FailureKind
    message: str
    field: str | None = None
    expected: Any = None
    actual: Any = None

    def __str__(self) -> str:
        return self.message
