"""
SWAPI Response Models

pydantic models for the parts of SWAPI payloads the checks consume.
Fields the checks never read (``next``, ``previous``, ``created``, ...)
are ignored rather than modelled.

Payload shape (both /people and /films):

    {
        "count": 82,
        "next": "https://swapi.dev/api/people/?page=2",
        "previous": null,
        "results": [{...}, ...]
    }

Reference:
- https://swapi.dev/documentation
"""

from typing import Any, Generic, Literal, TypeVar

from pydantic import BaseModel, ConfigDict, Field


Resource = Literal["people", "films"]

_R = TypeVar("_R")


class Person(BaseModel):
    """
    Character entry from /people.

    Height and mass stay strings exactly as the API sends them
    ("172", "unknown", "1,358").
    """

    model_config = ConfigDict(strict=True)

    name: str
    height: str
    mass: str
    species: list[str] = Field(default_factory=list)

    @property
    def first_species(self) -> str:
        """First species URL, or "" when the API lists none (humans usually)."""
        return self.species[0] if self.species else ""


class Film(BaseModel):
    """Film entry from /films."""

    model_config = ConfigDict(strict=True)

    title: str
    episode_id: int
    director: str
    planets: list[str] = Field(default_factory=list)

    @property
    def planet_count(self) -> int:
        return len(self.planets)


class SearchResultSet(BaseModel, Generic[_R]):  # noqa: UP046
    """Paged collection payload; lives for a single check."""

    count: int
    results: list[_R] = Field(default_factory=list)


# Raw entry accessors. Checks compare the values exactly as decoded from
# JSON, so a "6" sent for episode_id is reported instead of coerced.


def entry_first_species(entry: dict[str, Any]) -> Any:
    """First element of ``species``, "" for an empty list, the raw value otherwise."""
    species = entry.get("species", [])
    if isinstance(species, list):
        return species[0] if species else ""
    return species


def entry_planet_count(entry: dict[str, Any]) -> Any:
    """Length of ``planets``, or the raw value when it is not a list."""
    planets = entry.get("planets", [])
    if isinstance(planets, list):
        return len(planets)
    return planets
