"""SWAPI resident resolver.

Turns a planet's resident references into resident names, one GET per
reference.

Fan-out:
    Lookups run concurrently, capped by an asyncio.Semaphore of
    max_concurrency slots. Names are re-assembled in reference order, so
    concurrency never changes the output. Once a lookup fails, lookups that
    have not started yet are skipped and the first failure (in reference
    order) is returned. max_concurrency=1 gives strictly sequential lookups.
    Lookups run inside an asyncio.TaskGroup, so an unexpected exception
    cancels the sibling lookups and surfaces as an ExceptionGroup.

Reference:
    - https://swapi.dev/documentation#people
"""

import asyncio
from collections.abc import Sequence

import httpx

from src.core.constants import (
    RESIDENT_FETCH_CONCURRENCY_DEFAULT,
    UPSTREAM_NAME,
    UPSTREAM_TIMEOUT_DEFAULT,
)
from src.core.result import Failure, Result, Success
from src.domain.errors import UpstreamError
from src.infrastructure.http.base_api_client import BaseUpstreamAPIClient
from src.infrastructure.swapi.mappers.resident_mapper import SwapiResidentMapper


class SwapiResidentsAPI(BaseUpstreamAPIClient):
    """Resolves SWAPI people references into names.

    Implements ResidentResolverProtocol structurally. Holds no cache:
    a resident referenced twice is fetched twice.

    Attributes:
        _max_concurrency: Maximum lookups in flight per call.
        _mapper: JSON to entity mapper.
    """

    def __init__(
        self,
        *,
        timeout: float = UPSTREAM_TIMEOUT_DEFAULT,
        max_concurrency: int = RESIDENT_FETCH_CONCURRENCY_DEFAULT,
        mapper: SwapiResidentMapper | None = None,
    ) -> None:
        """Initialize the resident resolver.

        Args:
            timeout: Per-request timeout in seconds.
            max_concurrency: Maximum lookups in flight (must be >= 1).
            mapper: Resident mapper (defaults to SwapiResidentMapper).

        Raises:
            ValueError: If max_concurrency is less than 1.
        """
        if max_concurrency < 1:
            raise ValueError("max_concurrency must be at least 1")
        super().__init__(upstream_name=UPSTREAM_NAME, timeout=timeout)
        self._max_concurrency = max_concurrency
        self._mapper = mapper or SwapiResidentMapper()

    async def resolve_resident_names(
        self, references: Sequence[str]
    ) -> Result[list[str], UpstreamError]:
        """Resolve each reference to the resident's name.

        Args:
            references: Resident resource URIs, in planet order.

        Returns:
            Success(list[str]): Names in reference order, duplicates kept.
            Failure(UpstreamError): First failed lookup in reference order.

        Raises:
            ExceptionGroup: If a lookup raises instead of returning a Result.
        """
        if not references:
            return Success(value=[])

        semaphore = asyncio.Semaphore(self._max_concurrency)
        failed = asyncio.Event()

        async with self._build_client() as client:

            async def resolve(url: str) -> Result[str, UpstreamError] | None:
                async with semaphore:
                    if failed.is_set():
                        return None
                    outcome = await self._fetch_resident_name(client=client, url=url)
                    if isinstance(outcome, Failure):
                        failed.set()
                    return outcome

            # An unexpected exception cancels the remaining lookups before
            # the client is closed
            async with asyncio.TaskGroup() as group:
                tasks = [group.create_task(resolve(url)) for url in references]

        outcomes = [task.result() for task in tasks]

        for outcome in outcomes:
            if isinstance(outcome, Failure):
                return outcome

        names = [outcome.value for outcome in outcomes if isinstance(outcome, Success)]
        self._logger.debug(
            "swapi_api_residents_resolved",
            resident_count=len(names),
        )
        return Success(value=names)

    async def _fetch_resident_name(
        self,
        *,
        client: httpx.AsyncClient,
        url: str,
    ) -> Result[str, UpstreamError]:
        """Fetch one resident and extract its name.

        Args:
            client: Open httpx client shared by the fan-out.
            url: Resident resource URI.

        Returns:
            Success(str): Resident name.
            Failure(UpstreamError): Transport, status or decode failure.
        """
        result = await self._get_json_object(
            client=client,
            url=url,
            operation="fetch_resident",
        )
        if isinstance(result, Failure):
            return result

        resident = self._mapper.map_resident(result.value)
        if resident is None:
            return self._invalid_payload(
                url=url,
                message="Malformed resident record from SWAPI",
            )
        return Success(value=resident.name)
