"""
Fixture Table

Literal (search key, expected fields) records driving one check each.

The tables deliberately include failing cases:
- Characters: wrong species for Han Solo, more than one result for
  "Skywalker", no results for "NotACharacter"
- Films: wrong episode ID for Return of the Jedi, more than one result
  for "The", and "The Rise of Skywalker" is not in the dataset
"""

from pydantic import BaseModel, ConfigDict

from .failures import FailureKind


class CharacterFixture(BaseModel):
    """Expected /people search outcome for one character name."""

    model_config = ConfigDict(frozen=True)

    name: str
    height: str
    mass: str
    species: str
    # Failure the record is authored to provoke; None for passing records
    expected_failure: FailureKind | None = None


class FilmFixture(BaseModel):
    """Expected /films search outcome for one title."""

    model_config = ConfigDict(frozen=True)

    title: str
    episode_id: int
    director: str
    planets: int
    expected_failure: FailureKind | None = None


CHARACTER_FIXTURES: tuple[CharacterFixture, ...] = (
    CharacterFixture(name="Luke Skywalker", height="172", mass="77", species=""),
    CharacterFixture(
        name="Darth Maul",
        height="175",
        mass="80",
        species="https://swapi.dev/api/species/22/",
    ),
    CharacterFixture(
        name="Han Solo",
        height="180",
        mass="80",
        species="Human",
        expected_failure=FailureKind.FIELD_MISMATCH,
    ),
    CharacterFixture(
        name="Skywalker",
        height="180",
        mass="80",
        species="Human",
        expected_failure=FailureKind.AMBIGUOUS_SEARCH,
    ),
    CharacterFixture(
        name="NotACharacter",
        height="180",
        mass="80",
        species="Human",
        expected_failure=FailureKind.NO_RESULTS,
    ),
)

FILM_FIXTURES: tuple[FilmFixture, ...] = (
    FilmFixture(title="A New Hope", episode_id=4, director="George Lucas", planets=3),
    FilmFixture(
        title="The Empire Strikes Back", episode_id=5, director="Irvin Kershner", planets=4
    ),
    FilmFixture(
        title="Return of the Jedi",
        episode_id=7,  # canon is 6
        director="Richard Marquand",
        planets=5,
        expected_failure=FailureKind.FIELD_MISMATCH,
    ),
    FilmFixture(
        title="The",
        episode_id=4,
        director="George Lucas",
        planets=3,
        expected_failure=FailureKind.AMBIGUOUS_SEARCH,
    ),
    FilmFixture(
        title="The Rise of Skywalker",
        episode_id=9,
        director="George Lucas",
        planets=7,
        expected_failure=FailureKind.NO_RESULTS,
    ),
)


def fixture_id(fixture: CharacterFixture | FilmFixture) -> str:
    """pytest id for a fixture: its search key."""
    if isinstance(fixture, CharacterFixture):
        return fixture.name
    return fixture.title
