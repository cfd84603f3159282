"""SWAPI planet catalog client.

Walks the paginated planet catalog from its root URI, following each page's
"next" link until the last page, and returns every planet in catalog order.

Endpoints:
    GET /api/planets/          - First catalog page
    GET /api/planets/?page=N   - Subsequent pages (as linked by "next")

Termination:
    The upstream "next" chain is not trusted. A link that points back to a
    page already visited, or a chain longer than max_pages, fails the fetch.

Reference:
    - https://swapi.dev/documentation#planets
"""

from src.core.constants import (
    MAX_CATALOG_PAGES_DEFAULT,
    SWAPI_PLANETS_URL_DEFAULT,
    UPSTREAM_NAME,
    UPSTREAM_TIMEOUT_DEFAULT,
)
from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.domain.entities.planet import Planet
from src.domain.errors import PaginationLimitError, PaginationLoopError, UpstreamError
from src.infrastructure.http.base_api_client import BaseUpstreamAPIClient
from src.infrastructure.swapi.mappers.planet_mapper import SwapiPlanetMapper


class SwapiPlanetsAPI(BaseUpstreamAPIClient):
    """Depaginating fetcher for the SWAPI planet catalog.

    Implements PlanetCatalogProtocol structurally. Pages are fetched
    sequentially over one pooled httpx client; each page depends on the
    previous page's "next" link.

    Attributes:
        _planets_url: Root URI of the catalog.
        _max_pages: Page ceiling before failing closed.
        _mapper: JSON to entity mapper.

    Example:
        >>> api = SwapiPlanetsAPI(planets_url="https://swapi.dev/api/planets/")
        >>> result = await api.fetch_all_planets()
        >>> if isinstance(result, Success):
        ...     print(len(result.value))
    """

    def __init__(
        self,
        *,
        planets_url: str = SWAPI_PLANETS_URL_DEFAULT,
        timeout: float = UPSTREAM_TIMEOUT_DEFAULT,
        max_pages: int = MAX_CATALOG_PAGES_DEFAULT,
        mapper: SwapiPlanetMapper | None = None,
    ) -> None:
        """Initialize the catalog client.

        Args:
            planets_url: Root URI of the planet catalog.
            timeout: Per-request timeout in seconds.
            max_pages: Maximum pages followed before failing.
            mapper: Planet mapper (defaults to SwapiPlanetMapper).
        """
        super().__init__(upstream_name=UPSTREAM_NAME, timeout=timeout)
        self._planets_url = planets_url
        self._max_pages = max_pages
        self._mapper = mapper or SwapiPlanetMapper()

    async def fetch_all_planets(self) -> Result[list[Planet], UpstreamError]:
        """Fetch every planet of every catalog page.

        Returns:
            Success(list[Planet]): All planets, page order then within-page order.
            Failure(UpstreamUnavailableError): Transport failure on any page.
            Failure(UpstreamInvalidResponseError): Malformed page.
            Failure(PaginationLoopError): "next" revisits a page.
            Failure(PaginationLimitError): More than max_pages pages.
        """
        planets: list[Planet] = []
        visited: set[str] = set()
        url: str | None = self._planets_url

        async with self._build_client() as client:
            while url:
                if url in visited:
                    self._logger.warning(
                        "swapi_api_pagination_loop",
                        url=url,
                        pages_fetched=len(visited),
                    )
                    return Failure(
                        error=PaginationLoopError(
                            code=ErrorCode.PAGINATION_LOOP_DETECTED,
                            message="Catalog pagination revisited a page",
                            upstream_name=self._upstream_name,
                            resource_url=url,
                        )
                    )

                if len(visited) >= self._max_pages:
                    self._logger.warning(
                        "swapi_api_pagination_limit",
                        url=url,
                        max_pages=self._max_pages,
                    )
                    return Failure(
                        error=PaginationLimitError(
                            code=ErrorCode.PAGINATION_LIMIT_EXCEEDED,
                            message=f"Catalog has more than {self._max_pages} pages",
                            upstream_name=self._upstream_name,
                            resource_url=url,
                            max_pages=self._max_pages,
                        )
                    )

                visited.add(url)
                result = await self._get_json_object(
                    client=client,
                    url=url,
                    operation="fetch_planets_page",
                )
                if isinstance(result, Failure):
                    return result

                page = self._mapper.map_page(result.value)
                if page is None:
                    return self._invalid_payload(
                        url=url,
                        message="Malformed planet catalog page from SWAPI",
                    )

                planets.extend(page.planets)
                self._logger.debug(
                    "swapi_api_page_fetched",
                    url=url,
                    page_size=len(page.planets),
                    reported_count=page.count,
                )
                url = None if page.is_last else page.next_url

        self._logger.info(
            "swapi_api_catalog_fetched",
            pages=len(visited),
            planet_count=len(planets),
        )
        return Success(value=planets)
