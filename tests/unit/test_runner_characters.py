"""
Unit tests for check_character.

Runs every character fixture against the in-memory SWAPI and verifies
the decision rule: status -> count -> field comparisons.
"""

import pytest

from swapi_checks import (
    CHARACTER_FIXTURES,
    CharacterFixture,
    FailureKind,
    check_character,
    fixture_id,
)
from tests.utils import FakeSwapi, assert_error, assert_ok


class TestCharacterFixtureTable:
    """Every fixture in the table behaves as authored."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("fixture", CHARACTER_FIXTURES, ids=fixture_id)
    async def test_fixture_outcome_matches_expected_failure(
        self, fake_swapi: FakeSwapi, fixture: CharacterFixture
    ) -> None:
        # given / when
        async with fake_swapi.client() as client:
            outcome = await check_character(client, fixture)

        # then
        if fixture.expected_failure is None:
            person = assert_ok(outcome)
            assert person.name == fixture.name
        else:
            assert assert_error(outcome).kind == fixture.expected_failure


class TestCharacterDecisionRule:
    """Tests for the count and field rules."""

    @pytest.mark.asyncio
    async def test_exact_match_returns_person(self, fake_swapi: FakeSwapi) -> None:
        """Luke has no species entry; the empty string must match."""
        # given
        fixture = CharacterFixture(name="Luke Skywalker", height="172", mass="77", species="")

        # when
        async with fake_swapi.client() as client:
            person = assert_ok(await check_character(client, fixture))

        # then
        assert person.height == "172"
        assert person.mass == "77"
        assert person.species == []

    @pytest.mark.asyncio
    async def test_species_url_compared_verbatim(self, fake_swapi: FakeSwapi) -> None:
        # given
        fixture = CharacterFixture(
            name="Darth Maul",
            height="175",
            mass="80",
            species="https://swapi.dev/api/species/22/",
        )

        # when
        async with fake_swapi.client() as client:
            outcome = await check_character(client, fixture)

        # then
        assert assert_ok(outcome).first_species == "https://swapi.dev/api/species/22/"

    @pytest.mark.asyncio
    async def test_ambiguous_search_fails(self, fake_swapi: FakeSwapi) -> None:
        # given: three people contain "Skywalker"
        fixture = CharacterFixture(name="Skywalker", height="180", mass="80", species="Human")

        # when
        async with fake_swapi.client() as client:
            failure = assert_error(await check_character(client, fixture))

        # then
        assert failure.kind == FailureKind.AMBIGUOUS_SEARCH
        assert failure.message == 'More than one character returned for "Skywalker"'

    @pytest.mark.asyncio
    async def test_no_results_fails(self, fake_swapi: FakeSwapi) -> None:
        # given
        fixture = CharacterFixture(name="NotACharacter", height="180", mass="80", species="Human")

        # when
        async with fake_swapi.client() as client:
            failure = assert_error(await check_character(client, fixture))

        # then
        assert failure.kind == FailureKind.NO_RESULTS
        assert failure.message == 'No characters returned for "NotACharacter"'

    @pytest.mark.asyncio
    async def test_species_mismatch_names_expected_and_actual(
        self, fake_swapi: FakeSwapi
    ) -> None:
        # given: Han Solo has no species entry, so "Human" cannot match
        fixture = CharacterFixture(name="Han Solo", height="180", mass="80", species="Human")

        # when
        async with fake_swapi.client() as client:
            failure = assert_error(await check_character(client, fixture))

        # then
        assert failure.kind == FailureKind.FIELD_MISMATCH
        assert failure.field == "species"
        assert failure.expected == "Human"
        assert failure.actual == ""
        assert failure.message == 'Expected species "Human" for Han Solo, but "" was returned'

    @pytest.mark.asyncio
    async def test_first_mismatching_field_is_reported(self, fake_swapi: FakeSwapi) -> None:
        """Height is compared before mass; only the height mismatch is reported."""
        # given
        fixture = CharacterFixture(name="Han Solo", height="181", mass="81", species="")

        # when
        async with fake_swapi.client() as client:
            failure = assert_error(await check_character(client, fixture))

        # then
        assert failure.field == "height"
        assert failure.message == 'Expected a height of "181" for Han Solo, but "180" was returned'

    @pytest.mark.asyncio
    async def test_mass_is_compared_as_string(self, fake_swapi: FakeSwapi) -> None:
        # given: API reports mass "unknown" for Shmi
        fixture = CharacterFixture(name="Shmi Skywalker", height="163", mass="0", species="")

        # when
        async with fake_swapi.client() as client:
            failure = assert_error(await check_character(client, fixture))

        # then
        assert failure.field == "mass"
        assert failure.actual == "unknown"
        assert failure.message == 'Expected a mass of "0" for Shmi Skywalker, but "unknown" was returned'

    @pytest.mark.asyncio
    async def test_search_key_is_sent_as_query_parameter(self, fake_swapi: FakeSwapi) -> None:
        # given
        fixture = CHARACTER_FIXTURES[0]

        # when
        async with fake_swapi.client() as client:
            await check_character(client, fixture)

        # then: one request, to /people/ with the key as a query parameter
        assert len(fake_swapi.requests) == 1
        request = fake_swapi.requests[0]
        assert request.method == "GET"
        assert request.url.path == "/api/people/"
        assert request.url.params["search"] == "Luke Skywalker"

    @pytest.mark.asyncio
    async def test_repeated_query_is_idempotent(self, fake_swapi: FakeSwapi) -> None:
        # given
        fixture = CHARACTER_FIXTURES[1]

        # when
        async with fake_swapi.client() as client:
            first = assert_ok(await check_character(client, fixture))
            second = assert_ok(await check_character(client, fixture))

        # then
        assert first == second


class TestCharacterExactTypes:
    """Values are compared as decoded from JSON, never coerced."""

    @pytest.mark.asyncio
    async def test_numeric_height_is_field_mismatch(self) -> None:
        # given: the API sends height as a number
        fake = FakeSwapi(
            people=[{"name": "Luke Skywalker", "height": 172, "mass": "77", "species": []}]
        )
        fixture = CharacterFixture(name="Luke Skywalker", height="172", mass="77", species="")

        # when
        async with fake.client() as client:
            failure = assert_error(await check_character(client, fixture))

        # then
        assert failure.kind == FailureKind.FIELD_MISMATCH
        assert failure.field == "height"
        assert (failure.expected, failure.actual) == ("172", 172)
        assert failure.message == (
            'Expected a height of "172" for Luke Skywalker, but "172" was returned (str vs int)'
        )

    @pytest.mark.asyncio
    async def test_missing_mass_is_field_mismatch(self) -> None:
        # given
        fake = FakeSwapi(people=[{"name": "Luke Skywalker", "height": "172", "species": []}])
        fixture = CharacterFixture(name="Luke Skywalker", height="172", mass="77", species="")

        # when
        async with fake.client() as client:
            failure = assert_error(await check_character(client, fixture))

        # then
        assert failure.field == "mass"
        assert failure.actual is None

    @pytest.mark.asyncio
    async def test_species_string_instead_of_list_is_compared_raw(self) -> None:
        # given
        fake = FakeSwapi(
            people=[{"name": "Han Solo", "height": "180", "mass": "80", "species": "Human"}]
        )
        fixture = CharacterFixture(name="Han Solo", height="180", mass="80", species="Human")

        # when
        async with fake.client() as client:
            failure = assert_error(await check_character(client, fixture))

        # then: fields match, but a species that is not a list is malformed
        assert failure.kind == FailureKind.INVALID_PAYLOAD
