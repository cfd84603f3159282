"""Planet domain entity.

Represents one record of the upstream planet catalog. Physical and climate
attributes are kept as the opaque strings the catalog returns ("unknown",
"1,000,000,000" and friends are all legal values); nothing downstream
parses them.

Architecture:
    - Pure domain entity (no infrastructure dependencies)
    - Immutable once fetched, lives for the duration of one request
    - Built by SwapiPlanetMapper from raw catalog JSON

Usage:
    from src.domain.entities import Planet

    planet = Planet(
        name="Tatooine",
        residents=("https://swapi.dev/api/people/1/",),
        films=("https://swapi.dev/api/films/1/",),
    )
    planet.appears_in_more_films_than(0)  # True
"""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True, slots=True, kw_only=True)
class Planet:
    """Planet record from the upstream catalog.

    Attributes:
        name: Planet display name.
        rotation_period: Rotation period (opaque string).
        orbital_period: Orbital period (opaque string).
        diameter: Diameter (opaque string).
        climate: Climate description.
        gravity: Gravity description.
        terrain: Terrain description.
        surface_water: Surface water ratio (opaque string).
        population: Population (opaque string).
        residents: Resident resource URIs, in upstream order.
        films: Film resource URIs (only the count matters).
        starships: Starship resource URIs.
        created: Upstream creation timestamp.
        edited: Upstream last-edit timestamp.
        url: Canonical URI of this planet.
    """

    name: str
    rotation_period: str = ""
    orbital_period: str = ""
    diameter: str = ""
    climate: str = ""
    gravity: str = ""
    terrain: str = ""
    surface_water: str = ""
    population: str = ""
    residents: tuple[str, ...] = ()
    films: tuple[str, ...] = ()
    starships: tuple[str, ...] = ()
    created: datetime | None = None
    edited: datetime | None = None
    url: str = ""

    @property
    def film_count(self) -> int:
        """Number of films this planet appears in."""
        return len(self.films)

    def appears_in_more_films_than(self, threshold: int) -> bool:
        """Check the residency filter predicate.

        Args:
            threshold: Strict lower bound on the film count.

        Returns:
            True if the planet appears in strictly more than threshold films.
        """
        return self.film_count > threshold
