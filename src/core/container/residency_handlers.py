"""Residency pipeline dependency factories.

- Planet catalog fetcher (SWAPI, app-scoped: stateless between calls)
- Resident resolver (SWAPI, app-scoped: stateless between calls)
- ListPlanetResidencies handler (request-scoped)

Every factory is a plain function so FastAPI's `dependency_overrides` can
replace any of them in tests.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from fastapi import Depends

from src.core.config import settings
from src.core.container.infrastructure import get_logger
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.planet_catalog_protocol import PlanetCatalogProtocol
from src.domain.protocols.resident_resolver_protocol import ResidentResolverProtocol

if TYPE_CHECKING:
    from src.application.queries.handlers.list_planet_residencies_handler import (
        ListPlanetResidenciesHandler,
    )


# ============================================================================
# Upstream Clients (Application-Scoped)
# ============================================================================


@lru_cache()
def get_planet_catalog() -> PlanetCatalogProtocol:
    """Get the SWAPI planet catalog fetcher.

    Returns:
        SwapiPlanetsAPI configured from settings.
    """
    from src.infrastructure.swapi.planets_api import SwapiPlanetsAPI

    return SwapiPlanetsAPI(
        planets_url=settings.swapi_planets_url,
        timeout=settings.upstream_timeout_seconds,
        max_pages=settings.max_catalog_pages,
    )


@lru_cache()
def get_resident_resolver() -> ResidentResolverProtocol:
    """Get the SWAPI resident resolver.

    Returns:
        SwapiResidentsAPI configured from settings.
    """
    from src.infrastructure.swapi.residents_api import SwapiResidentsAPI

    return SwapiResidentsAPI(
        timeout=settings.upstream_timeout_seconds,
        max_concurrency=settings.resident_fetch_concurrency,
    )


# ============================================================================
# Query Handler Factories (Request-Scoped)
# ============================================================================


def get_list_planet_residencies_handler(
    catalog: PlanetCatalogProtocol = Depends(get_planet_catalog),
    resolver: ResidentResolverProtocol = Depends(get_resident_resolver),
    logger: LoggerProtocol = Depends(get_logger),
) -> "ListPlanetResidenciesHandler":
    """Get ListPlanetResidencies query handler (request-scoped).

    Args:
        catalog: Planet catalog fetcher.
        resolver: Resident name resolver.
        logger: Structured logger.

    Returns:
        ListPlanetResidenciesHandler wired with its ports.
    """
    from src.application.queries.handlers.list_planet_residencies_handler import (
        ListPlanetResidenciesHandler,
    )

    return ListPlanetResidenciesHandler(
        catalog=catalog,
        resolver=resolver,
        logger=logger,
    )
