"""PlanetCatalogProtocol - port for retrieving the full planet catalog.

The application layer depends on this protocol; the SWAPI HTTP client in
src/infrastructure/swapi implements it structurally (no inheritance).

Contract:
    - Returns every planet of every page, in page order then within-page order
    - All-or-nothing: any page failure yields Failure, never a partial list
    - Must terminate: pagination cycles and runaway page counts are failures
"""

from typing import Protocol

from src.core.result import Result
from src.domain.entities.planet import Planet
from src.domain.errors import UpstreamError


class PlanetCatalogProtocol(Protocol):
    """Source of the complete, depaginated planet catalog."""

    async def fetch_all_planets(self) -> Result[list[Planet], UpstreamError]:
        """Fetch every planet in the catalog.

        Returns:
            Success(list[Planet]): All planets in catalog order.
            Failure(UpstreamError): First page failure encountered.
        """
        ...
