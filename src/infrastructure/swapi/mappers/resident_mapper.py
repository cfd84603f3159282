"""SWAPI resident mapper.

Converts SWAPI people JSON into Resident entities.

SWAPI People Structure:
    {
        "name": "Luke Skywalker",
        "height": "172",
        "mass": "77",
        "birth_year": "19BBY",
        "homeworld": "https://swapi.dev/api/planets/1/",
        "films": ["https://swapi.dev/api/films/1/", ...],
        "created": "2014-12-09T13:50:51.644000Z",
        "url": "https://swapi.dev/api/people/1/",
        ...
    }

Reference:
    - https://swapi.dev/documentation#people
"""

from typing import Any

import structlog

from src.domain.entities.resident import Resident
from src.infrastructure.swapi.mappers._fields import (
    optional_str,
    optional_timestamp,
    required_str,
    uri_tuple,
)

logger = structlog.get_logger(__name__)


class SwapiResidentMapper:
    """Mapper for converting SWAPI people JSON to Resident.

    Thread-safe: No mutable state, can be shared across requests.
    """

    def map_resident(self, data: dict[str, Any]) -> Resident | None:
        """Map a SWAPI people object to Resident.

        Args:
            data: People object from SWAPI.

        Returns:
            Resident if mapping succeeds, None if name is missing or any
            field has the wrong type.
        """
        try:
            return self._map_resident_internal(data)
        except (KeyError, TypeError, ValueError) as e:
            logger.warning(
                "swapi_resident_mapping_failed",
                error=str(e),
                error_type=type(e).__name__,
            )
            return None

    def _map_resident_internal(self, data: dict[str, Any]) -> Resident:
        return Resident(
            name=required_str(data, "name"),
            height=optional_str(data, "height"),
            mass=optional_str(data, "mass"),
            hair_color=optional_str(data, "hair_color"),
            skin_color=optional_str(data, "skin_color"),
            eye_color=optional_str(data, "eye_color"),
            birth_year=optional_str(data, "birth_year"),
            gender=optional_str(data, "gender"),
            homeworld=optional_str(data, "homeworld"),
            films=uri_tuple(data, "films"),
            species=uri_tuple(data, "species"),
            vehicles=uri_tuple(data, "vehicles"),
            starships=uri_tuple(data, "starships"),
            created=optional_timestamp(data, "created"),
            edited=optional_timestamp(data, "edited"),
            url=optional_str(data, "url"),
        )
