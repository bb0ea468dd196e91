"""
Assertion Runner

Runs one fixture against SWAPI and decides pass or fail:

    Request -> StatusCheck -> CountCheck -> FieldComparisons -> Ok | Error

Every check returns a Result instead of raising, so the pytest layer can
turn ``Error(CheckFailure)`` into ``pytest.fail(failure.message)``.
Nothing is retried. Each check is bounded by ``settings.timeout``.
"""

import asyncio
from collections.abc import Awaitable, Iterable
from typing import Any, NamedTuple, TypeVar

import httpx
from loguru import logger
from pydantic import ValidationError

from .client import SwapiClient
from .failures import CheckFailure, FailureKind
from .fixtures import CharacterFixture, FilmFixture
from .models import (
    Film,
    Person,
    Resource,
    SearchResultSet,
    entry_first_species,
    entry_planet_count,
)
from .result import Error, Ok, Result


_T = TypeVar("_T")
_R = TypeVar("_R")

# (singular, plural) used in listing messages
_LISTING_NOUNS: dict[str, tuple[str, str]] = {
    "people": ("person", "people"),
    "films": ("film", "films"),
}


class FieldCheck(NamedTuple):
    """One expected-vs-returned comparison; ``template`` takes {key}, {expected} and {actual}."""

    field: str
    expected: Any
    actual: Any
    template: str


def compare_fields(checks: Iterable[FieldCheck], key: str = "") -> CheckFailure | None:
    """
    Compare fields in order using exact equality: same type and same value.
    When the types differ, the message ends with both type names, since
    "6" and 6 render identically.

    Returns:
        CheckFailure for the first mismatching field, None if all match
    """
    for check in checks:
        same_type = type(check.expected) is type(check.actual)
        if same_type and check.expected == check.actual:
            continue
        message = check.template.format(key=key, expected=check.expected, actual=check.actual)
        if not same_type:
            message += f" ({type(check.expected).__name__} vs {type(check.actual).__name__})"
        return CheckFailure(
            kind=FailureKind.FIELD_MISMATCH,
            message=message,
            field=check.field,
            expected=check.expected,
            actual=check.actual,
        )
    return None


async def _bounded(
    check: Awaitable[Result[_T, CheckFailure]], timeout: float, label: str
) -> Result[_T, CheckFailure]:
    """Await a check under a single time bound, mapping transport errors to failures."""
    try:
        return await asyncio.wait_for(check, timeout=timeout)
    except (TimeoutError, httpx.TimeoutException):
        logger.error(f"[SwapiRunner] Timeout after {timeout}s: {label}")
        return Error(
            CheckFailure(
                kind=FailureKind.TIMEOUT,
                message=f"Timed out after {timeout}s waiting for {label}",
            )
        )
    except httpx.HTTPError as e:
        logger.error(f"[SwapiRunner] Transport error for {label}: {e!r}")
        return Error(
            CheckFailure(
                kind=FailureKind.TRANSPORT_ERROR,
                message=f"Request for {label} failed: {e!r}",
            )
        )


def _parse_result_set(
    response: httpx.Response,
) -> Result[SearchResultSet[dict[str, Any]], CheckFailure]:
    """Validate the {count, results} envelope; entries stay raw JSON objects."""
    if response.status_code != 200:  # noqa: PLR2004 - HTTP OK status code
        return Error(
            CheckFailure(
                kind=FailureKind.UNEXPECTED_STATUS,
                message=f"Unexpected status code {response.status_code} for {response.request.url}",
            )
        )

    try:
        return Ok(SearchResultSet[dict[str, Any]].model_validate(response.json()))
    except (ValueError, ValidationError) as e:
        # json.JSONDecodeError is a ValueError
        return Error(
            CheckFailure(
                kind=FailureKind.INVALID_PAYLOAD,
                message=f"Response from {response.request.url} is not a result set: {e!s}",
            )
        )


async def _search_single(
    client: SwapiClient, resource: Resource, key: str, noun: str
) -> Result[dict[str, Any], CheckFailure]:
    """Search and require exactly one hit."""
    response = await client.search(resource, key)

    match _parse_result_set(response):
        case Error() as error:
            return error
        case Ok(result_set):
            pass

    if result_set.count > 1:
        return Error(
            CheckFailure(
                kind=FailureKind.AMBIGUOUS_SEARCH,
                message=f'More than one {noun} returned for "{key}"',
            )
        )
    if result_set.count == 0:
        return Error(
            CheckFailure(
                kind=FailureKind.NO_RESULTS,
                message=f'No {noun}s returned for "{key}"',
            )
        )
    if not result_set.results:
        return Error(
            CheckFailure(
                kind=FailureKind.INVALID_PAYLOAD,
                message=f'Count is 1 but no {noun} entry was returned for "{key}"',
            )
        )
    return Ok(result_set.results[0])


def _build_entry(
    model: type[_R], entry: dict[str, Any], key: str, noun: str
) -> Result[_R, CheckFailure]:
    """Turn a matching raw entry into its strict model."""
    try:
        return Ok(model.model_validate(entry))
    except ValidationError as e:
        return Error(
            CheckFailure(
                kind=FailureKind.INVALID_PAYLOAD,
                message=f'The {noun} returned for "{key}" is malformed: {e!s}',
            )
        )


def _log_outcome(label: str, outcome: Result[Any, CheckFailure]) -> None:
    match outcome:
        case Ok(_):
            logger.info(f"[SwapiRunner] PASS {label}")
        case Error(failure) if failure.kind not in (FailureKind.TIMEOUT, FailureKind.TRANSPORT_ERROR):
            logger.warning(f"[SwapiRunner] FAIL {label} ({failure.kind.value}): {failure.message}")


async def check_listing(client: SwapiClient, resource: Resource) -> Result[int, CheckFailure]:
    """
    Smoke-check a list endpoint: status 200 and a positive count.

    Returns:
        Ok(count) or Error(CheckFailure)
    """
    singular, plural = _LISTING_NOUNS[resource]

    async def run() -> Result[int, CheckFailure]:
        response = await client.list_resource(resource)
        match _parse_result_set(response):
            case Error() as error:
                return error
            case Ok(result_set):
                pass
        if result_set.count > 0:
            return Ok(result_set.count)
        return Error(
            CheckFailure(
                kind=FailureKind.EMPTY_LISTING,
                message=(
                    f"Expected at least one {singular} but {result_set.count} "
                    f"{plural} were returned"
                ),
            )
        )

    label = f"/{resource} listing"
    outcome = await _bounded(run(), client.settings.timeout, label)
    _log_outcome(label, outcome)
    return outcome


async def check_character(
    client: SwapiClient, fixture: CharacterFixture
) -> Result[Person, CheckFailure]:
    """
    Look up one character by name and compare height, mass and species.

    Values are compared as the API sent them: a numeric height never
    equals the string "172".

    Returns:
        Ok(Person) if every field matches, otherwise Error(CheckFailure)
        describing the first failure
    """
    key = fixture.name

    async def run() -> Result[Person, CheckFailure]:
        match await _search_single(client, "people", key, "character"):
            case Error() as error:
                return error
            case Ok(entry):
                pass

        mismatch = compare_fields(
            [
                FieldCheck(
                    "height",
                    fixture.height,
                    entry.get("height"),
                    'Expected a height of "{expected}" for {key}, but "{actual}" was returned',
                ),
                FieldCheck(
                    "mass",
                    fixture.mass,
                    entry.get("mass"),
                    'Expected a mass of "{expected}" for {key}, but "{actual}" was returned',
                ),
                # species is a list of URLs, often empty
                FieldCheck(
                    "species",
                    fixture.species,
                    entry_first_species(entry),
                    'Expected species "{expected}" for {key}, but "{actual}" was returned',
                ),
            ],
            key=key,
        )
        if mismatch:
            return Error(mismatch)
        return _build_entry(Person, entry, key, "character")

    label = f'character "{key}"'
    outcome = await _bounded(run(), client.settings.timeout, label)
    _log_outcome(label, outcome)
    return outcome


async def check_film(client: SwapiClient, fixture: FilmFixture) -> Result[Film, CheckFailure]:
    """
    Look up one film by title and compare episode ID, director and planet count.

    episode_id is compared as an integer, not a string.
    """
    key = fixture.title

    async def run() -> Result[Film, CheckFailure]:
        match await _search_single(client, "films", key, "film"):
            case Error() as error:
                return error
            case Ok(entry):
                pass

        mismatch = compare_fields(
            [
                FieldCheck(
                    "episode_id",
                    fixture.episode_id,
                    entry.get("episode_id"),
                    'Expected episode ID "{expected}" for {key}, but "{actual}" was returned',
                ),
                FieldCheck(
                    "director",
                    fixture.director,
                    entry.get("director"),
                    'Expected director "{expected}" for {key}, but "{actual}" was returned',
                ),
                FieldCheck(
                    "planets",
                    fixture.planets,
                    entry_planet_count(entry),
                    "Expected {expected} planets for {key}, but {actual} were returned",
                ),
            ],
            key=key,
        )
        if mismatch:
            return Error(mismatch)
        return _build_entry(Film, entry, key, "film")

    label = f'film "{key}"'
    outcome = await _bounded(run(), client.settings.timeout, label)
    _log_outcome(label, outcome)
    return outcome
