"""Tests for src/infrastructure/swapi/mappers.

Verifies SWAPI JSON is decoded into domain entities and that malformed
payloads are rejected as a whole.
"""

from datetime import UTC, datetime

import pytest

from src.domain.entities.planet import Planet
from src.infrastructure.swapi.mappers import SwapiPlanetMapper, SwapiResidentMapper
from tests.utils.swapi_payloads import (
    page_json,
    person_json,
    person_url,
    planet_json,
)


def _map_single_planet(mapper: SwapiPlanetMapper, data: dict) -> Planet | None:
    """Map one planet through a single-planet catalog page."""
    page = mapper.map_page(page_json([data]))
    return page.planets[0] if page is not None else None


@pytest.fixture
def planet_mapper() -> SwapiPlanetMapper:
    return SwapiPlanetMapper()


@pytest.fixture
def resident_mapper() -> SwapiResidentMapper:
    return SwapiResidentMapper()


@pytest.mark.unit
class TestSwapiPlanetMapperPlanet:
    """Tests for per-planet decoding within SwapiPlanetMapper.map_page."""

    def test_maps_all_fields(self, planet_mapper: SwapiPlanetMapper):
        data = planet_json(
            "Tatooine",
            films=3,
            residents=[person_url(1), person_url(2)],
        )

        planet = _map_single_planet(planet_mapper, data)

        assert planet is not None
        assert planet.name == "Tatooine"
        assert planet.climate == "arid"
        assert planet.population == "200000"
        assert planet.residents == (person_url(1), person_url(2))
        assert planet.film_count == 3
        assert planet.created == datetime(2014, 12, 9, 13, 50, 49, 641000, tzinfo=UTC)
        assert planet.url == "https://swapi.dev/api/planets/tatooine/"

    def test_keeps_duplicate_residents_in_order(self, planet_mapper: SwapiPlanetMapper):
        data = planet_json("Kamino", residents=[person_url(2), person_url(1), person_url(2)])

        planet = _map_single_planet(planet_mapper, data)

        assert planet is not None
        assert planet.residents == (person_url(2), person_url(1), person_url(2))

    def test_missing_optional_attributes_default_to_empty(
        self, planet_mapper: SwapiPlanetMapper
    ):
        data = {"name": "Bare", "residents": [], "films": []}

        planet = _map_single_planet(planet_mapper, data)

        assert planet is not None
        assert planet.climate == ""
        assert planet.starships == ()
        assert planet.created is None

    def test_returns_none_without_name(self, planet_mapper: SwapiPlanetMapper):
        data = planet_json("Nameless")
        del data["name"]

        assert _map_single_planet(planet_mapper, data) is None

    def test_returns_none_without_films(self, planet_mapper: SwapiPlanetMapper):
        data = planet_json("Filmless")
        del data["films"]

        assert _map_single_planet(planet_mapper, data) is None

    def test_returns_none_when_residents_not_a_list(
        self, planet_mapper: SwapiPlanetMapper
    ):
        data = planet_json("Odd", residents=None)
        data["residents"] = "https://swapi.dev/api/people/1/"

        assert _map_single_planet(planet_mapper, data) is None

    def test_returns_none_for_bad_timestamp(self, planet_mapper: SwapiPlanetMapper):
        data = planet_json("Late", created="yesterday")

        assert _map_single_planet(planet_mapper, data) is None


@pytest.mark.unit
class TestSwapiPlanetMapperPage:
    """Tests for SwapiPlanetMapper.map_page."""

    def test_maps_page_with_next(self, planet_mapper: SwapiPlanetMapper):
        data = page_json(
            [planet_json("A"), planet_json("B")],
            next_url="https://swapi.dev/api/planets/?page=2",
            count=60,
        )

        page = planet_mapper.map_page(data)

        assert page is not None
        assert [p.name for p in page.planets] == ["A", "B"]
        assert page.next_url == "https://swapi.dev/api/planets/?page=2"
        assert page.count == 60
        assert page.is_last is False

    def test_null_next_marks_last_page(self, planet_mapper: SwapiPlanetMapper):
        page = planet_mapper.map_page(page_json([planet_json("A")]))

        assert page is not None
        assert page.next_url is None
        assert page.is_last is True

    def test_empty_results_page(self, planet_mapper: SwapiPlanetMapper):
        page = planet_mapper.map_page(page_json([]))

        assert page is not None
        assert page.planets == ()

    def test_one_malformed_planet_rejects_whole_page(
        self, planet_mapper: SwapiPlanetMapper
    ):
        bad = planet_json("Bad")
        del bad["residents"]

        assert planet_mapper.map_page(page_json([planet_json("Good"), bad])) is None

    def test_missing_results_rejects_page(self, planet_mapper: SwapiPlanetMapper):
        assert planet_mapper.map_page({"count": 0, "next": None}) is None

    def test_non_list_results_rejects_page(self, planet_mapper: SwapiPlanetMapper):
        assert planet_mapper.map_page({"next": None, "results": {"name": "A"}}) is None

    def test_non_string_next_rejects_page(self, planet_mapper: SwapiPlanetMapper):
        assert planet_mapper.map_page({"next": 2, "results": []}) is None


@pytest.mark.unit
class TestSwapiResidentMapper:
    """Tests for SwapiResidentMapper.map_resident."""

    def test_maps_resident(self, resident_mapper: SwapiResidentMapper):
        resident = resident_mapper.map_resident(person_json("Luke Skywalker"))

        assert resident is not None
        assert resident.name == "Luke Skywalker"
        assert resident.birth_year == "19BBY"
        assert resident.homeworld == "https://swapi.dev/api/planets/1/"

    def test_name_only_record_is_enough(self, resident_mapper: SwapiResidentMapper):
        resident = resident_mapper.map_resident({"name": "R2-D2"})

        assert resident is not None
        assert resident.name == "R2-D2"

    def test_returns_none_without_name(self, resident_mapper: SwapiResidentMapper):
        assert resident_mapper.map_resident({"height": "96"}) is None

    def test_returns_none_for_non_string_name(
        self, resident_mapper: SwapiResidentMapper
    ):
        assert resident_mapper.map_resident({"name": 42}) is None
