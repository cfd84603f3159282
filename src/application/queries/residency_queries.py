"""Residency queries (CQRS read operations).

Reference:
    - src/application/queries/handlers/list_planet_residencies_handler.py
"""

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class ListPlanetResidencies:
    """List residents of every planet appearing in more than N films.

    Attributes:
        films_count: Strict lower bound on a planet's film count. 0 keeps
            every planet with at least one film; negative values keep all
            planets.

    Example:
        >>> query = ListPlanetResidencies(films_count=2)
        >>> result = await handler.handle(query)
    """

    films_count: int
