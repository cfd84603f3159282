"""SWAPI planet mapper.

Converts SWAPI catalog page JSON into CatalogPage and Planet entities.
Contains SWAPI-specific knowledge about JSON structure.

SWAPI Catalog Page Structure:
    {
        "count": 60,
        "next": "https://swapi.dev/api/planets/?page=2",
        "previous": null,
        "results": [
            {
                "name": "Tatooine",
                "rotation_period": "23",
                "climate": "arid",
                "residents": ["https://swapi.dev/api/people/1/", ...],
                "films": ["https://swapi.dev/api/films/1/", ...],
                "created": "2014-12-09T13:50:49.641000Z",
                "url": "https://swapi.dev/api/planets/1/",
                ...
            }
        ]
    }

Reference:
    - https://swapi.dev/documentation#planets
"""

from typing import Any

import structlog

from src.domain.entities.catalog_page import CatalogPage
from src.domain.entities.planet import Planet
from src.infrastructure.swapi.mappers._fields import (
    optional_str,
    optional_timestamp,
    required_str,
    uri_tuple,
)

logger = structlog.get_logger(__name__)


class SwapiPlanetMapper:
    """Mapper for converting SWAPI planet JSON to domain entities.

    A page maps all-or-nothing: one malformed planet makes the whole page
    unmappable, so a partial catalog never reaches the pipeline.

    Thread-safe: No mutable state, can be shared across requests.

    Example:
        >>> mapper = SwapiPlanetMapper()
        >>> page = mapper.map_page({"next": None, "results": [...]})
        >>> if page is not None:
        ...     print(len(page.planets))
    """

    def map_page(self, data: dict[str, Any]) -> CatalogPage | None:
        """Map a SWAPI catalog page to CatalogPage.

        Args:
            data: Page object from the planets endpoint.

        Returns:
            CatalogPage if every planet maps, None if the page or any planet
            is malformed.
        """
        try:
            return self._map_page_internal(data)
        except (KeyError, TypeError, ValueError) as e:
            logger.warning(
                "swapi_page_mapping_failed",
                error=str(e),
                error_type=type(e).__name__,
            )
            return None

    def _map_page_internal(self, data: dict[str, Any]) -> CatalogPage:
        results = data["results"]
        if not isinstance(results, list):
            raise TypeError(f"results must be a list, got {type(results).__name__}")

        planets = []
        for item in results:
            if not isinstance(item, dict):
                raise TypeError("results entries must be objects")
            planets.append(self._map_planet_internal(item))

        count = data.get("count")
        if count is not None and (isinstance(count, bool) or not isinstance(count, int)):
            raise TypeError("count must be an integer")

        return CatalogPage(
            planets=tuple(planets),
            next_url=self._link(data, "next"),
            previous_url=self._link(data, "previous"),
            count=count,
        )

    def _map_planet_internal(self, data: dict[str, Any]) -> Planet:
        return Planet(
            name=required_str(data, "name"),
            rotation_period=optional_str(data, "rotation_period"),
            orbital_period=optional_str(data, "orbital_period"),
            diameter=optional_str(data, "diameter"),
            climate=optional_str(data, "climate"),
            gravity=optional_str(data, "gravity"),
            terrain=optional_str(data, "terrain"),
            surface_water=optional_str(data, "surface_water"),
            population=optional_str(data, "population"),
            residents=uri_tuple(data, "residents", required=True),
            films=uri_tuple(data, "films", required=True),
            starships=uri_tuple(data, "starships"),
            created=optional_timestamp(data, "created"),
            edited=optional_timestamp(data, "edited"),
            url=optional_str(data, "url"),
        )

    @staticmethod
    def _link(data: dict[str, Any], key: str) -> str | None:
        """Read a pagination link; empty string and null both mean "none"."""
        value = data.get(key)
        if value is None:
            return None
        if not isinstance(value, str):
            raise TypeError(f"{key} must be a string or null")
        return value or None
