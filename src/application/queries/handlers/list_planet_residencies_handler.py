"""ListPlanetResidencies query handler.

Answers "for every planet appearing in more than N films, who lives there?"
in two stages:

1. Catalog fetch: the full, depaginated planet list.
2. Resident resolution: for each planet passing the film filter, in catalog
   order, resolve its resident references into names.

Architecture:
- Application layer handler (orchestrates the two upstream ports)
- Returns Result[list[PlanetResidency], ApplicationError]
- All-or-nothing: the first failure in either stage fails the query and is
  returned with its stage label; no partial residency list is produced

Reference:
    - src/domain/protocols/planet_catalog_protocol.py
    - src/domain/protocols/resident_resolver_protocol.py
"""

from collections.abc import Sequence

from src.application.errors import ApplicationError, ApplicationErrorCode
from src.application.queries.residency_queries import ListPlanetResidencies
from src.core.result import Failure, Result, Success
from src.domain.entities.planet import Planet
from src.domain.entities.planet_residency import PlanetResidency
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.planet_catalog_protocol import PlanetCatalogProtocol
from src.domain.protocols.resident_resolver_protocol import (
    ResidentResolverProtocol,
)


async def aggregate_residencies(
    planets: Sequence[Planet],
    films_threshold: int,
    resolver: ResidentResolverProtocol,
) -> Result[list[PlanetResidency], ApplicationError]:
    """Filter planets by film count and join each with its resident names.

    Args:
        planets: Planets in catalog order.
        films_threshold: A planet qualifies iff len(films) > films_threshold.
        resolver: Resident name resolver.

    Returns:
        Success(list[PlanetResidency]): One entry per qualifying planet, in
            catalog order. Planets without residents get an empty list.
        Failure(ApplicationError): RESIDENT_RESOLUTION_FAILED wrapping the
            first resolver failure.
    """
    residencies: list[PlanetResidency] = []

    for planet in planets:
        if not planet.appears_in_more_films_than(films_threshold):
            continue

        result = await resolver.resolve_resident_names(planet.residents)
        if isinstance(result, Failure):
            return Failure(
                error=ApplicationError(
                    code=ApplicationErrorCode.RESIDENT_RESOLUTION_FAILED,
                    message=f"Resident resolution failed for planet {planet.name}: "
                    f"{result.error.message}",
                    domain_error=result.error,
                    details={"planet": planet.name},
                )
            )

        residencies.append(
            PlanetResidency(name=planet.name, residents=tuple(result.value))
        )

    return Success(value=residencies)


class ListPlanetResidenciesHandler:
    """Handler for ListPlanetResidencies query.

    Dependencies (injected via constructor):
        - PlanetCatalogProtocol: Full planet catalog
        - ResidentResolverProtocol: Resident reference to name lookups
        - LoggerProtocol: Structured logging
    """

    def __init__(
        self,
        catalog: PlanetCatalogProtocol,
        resolver: ResidentResolverProtocol,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize handler with dependencies.

        Args:
            catalog: Planet catalog fetcher.
            resolver: Resident name resolver.
            logger: Structured logger.
        """
        self._catalog = catalog
        self._resolver = resolver
        self._logger = logger

    async def handle(
        self, query: ListPlanetResidencies
    ) -> Result[list[PlanetResidency], ApplicationError]:
        """Handle ListPlanetResidencies query.

        Args:
            query: ListPlanetResidencies query.

        Returns:
            Success(list[PlanetResidency]): Residencies of qualifying planets.
            Failure(ApplicationError): CATALOG_FETCH_FAILED or
                RESIDENT_RESOLUTION_FAILED.
        """
        catalog_result = await self._catalog.fetch_all_planets()
        if isinstance(catalog_result, Failure):
            self._logger.error(
                "planet_residencies_failed",
                stage=ApplicationErrorCode.CATALOG_FETCH_FAILED.stage,
                films_count=query.films_count,
                error_code=catalog_result.error.code.value,
                error_message=catalog_result.error.message,
            )
            return Failure(
                error=ApplicationError(
                    code=ApplicationErrorCode.CATALOG_FETCH_FAILED,
                    message=f"Catalog fetch failed: {catalog_result.error.message}",
                    domain_error=catalog_result.error,
                )
            )

        planets = catalog_result.value
        result = await aggregate_residencies(planets, query.films_count, self._resolver)

        if isinstance(result, Failure):
            domain_error = result.error.domain_error
            self._logger.error(
                "planet_residencies_failed",
                stage=result.error.code.stage,
                films_count=query.films_count,
                error_code=domain_error.code.value if domain_error else None,
                error_message=result.error.message,
            )
            return result

        self._logger.info(
            "planet_residencies_listed",
            films_count=query.films_count,
            catalog_size=len(planets),
            planet_count=len(result.value),
        )
        return result
