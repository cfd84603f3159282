"""Integration tests for SwapiResidentsAPI.

Tests for:
- Name resolution in reference order, duplicates kept
- Bounded concurrent fan-out
- First failure aborts the planet
- Unexpected exceptions cancel sibling lookups

Uses pytest-httpx to mock HTTP responses.
"""

import asyncio

import httpx
import pytest

from src.core.result import Failure, Success
from src.domain.entities.resident import Resident
from src.domain.errors import (
    UpstreamInvalidResponseError,
    UpstreamNotFoundError,
    UpstreamUnavailableError,
)
from src.infrastructure.swapi.residents_api import SwapiResidentsAPI
from tests.utils.swapi_payloads import deeply_nested_json, person_json, person_url


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def residents_api() -> SwapiResidentsAPI:
    """Create SwapiResidentsAPI instance with concurrent lookups."""
    return SwapiResidentsAPI(timeout=5.0, max_concurrency=4)


@pytest.fixture
def sequential_api() -> SwapiResidentsAPI:
    """Create SwapiResidentsAPI instance with one lookup at a time."""
    return SwapiResidentsAPI(timeout=5.0, max_concurrency=1)


# =============================================================================
# Success
# =============================================================================


@pytest.mark.integration
class TestSwapiResidentsAPIResolve:
    """Tests for SwapiResidentsAPI.resolve_resident_names."""

    async def test_names_follow_reference_order(
        self, residents_api: SwapiResidentsAPI, httpx_mock
    ):
        httpx_mock.add_response(url=person_url(1), json=person_json("Luke Skywalker"))
        httpx_mock.add_response(url=person_url(2), json=person_json("C-3PO"))
        httpx_mock.add_response(url=person_url(4), json=person_json("Darth Vader"))

        result = await residents_api.resolve_resident_names(
            [person_url(4), person_url(1), person_url(2)]
        )

        assert isinstance(result, Success)
        assert result.value == ["Darth Vader", "Luke Skywalker", "C-3PO"]

    async def test_duplicate_references_are_fetched_each_time(
        self, residents_api: SwapiResidentsAPI, httpx_mock
    ):
        """No cache: a repeated reference costs one request per occurrence."""
        httpx_mock.add_response(url=person_url(1), json=person_json("Luke Skywalker"))
        httpx_mock.add_response(url=person_url(1), json=person_json("Luke Skywalker"))

        result = await residents_api.resolve_resident_names(
            [person_url(1), person_url(1)]
        )

        assert isinstance(result, Success)
        assert result.value == ["Luke Skywalker", "Luke Skywalker"]
        assert len(httpx_mock.get_requests(url=person_url(1))) == 2

    async def test_empty_references_make_no_requests(
        self, residents_api: SwapiResidentsAPI, httpx_mock
    ):
        result = await residents_api.resolve_resident_names([])

        assert isinstance(result, Success)
        assert result.value == []
        assert httpx_mock.get_requests() == []

    async def test_in_flight_lookups_respect_concurrency_cap(self, httpx_mock):
        """Never more than max_concurrency requests are outstanding."""
        residents_api = SwapiResidentsAPI(max_concurrency=2)
        in_flight = 0
        peak = 0

        async def slow_person(request: httpx.Request) -> httpx.Response:
            nonlocal in_flight, peak
            in_flight += 1
            peak = max(peak, in_flight)
            await asyncio.sleep(0.01)
            in_flight -= 1
            person_id = str(request.url).rstrip("/").rsplit("/", 1)[-1]
            return httpx.Response(200, json=person_json(f"Person {person_id}"))

        references = [person_url(i) for i in range(1, 7)]
        for url in references:
            httpx_mock.add_callback(slow_person, url=url)

        result = await residents_api.resolve_resident_names(references)

        assert isinstance(result, Success)
        assert result.value == [f"Person {i}" for i in range(1, 7)]
        assert peak == 2

    def test_rejects_non_positive_concurrency(self):
        with pytest.raises(ValueError):
            SwapiResidentsAPI(max_concurrency=0)


# =============================================================================
# Failures
# =============================================================================


@pytest.mark.integration
class TestSwapiResidentsAPIFailures:
    """Tests for failing lookups."""

    async def test_failure_stops_remaining_lookups(
        self, sequential_api: SwapiResidentsAPI, httpx_mock
    ):
        """Lookups after the first failure are never sent."""
        httpx_mock.add_response(url=person_url(1), json=person_json("Luke Skywalker"))
        httpx_mock.add_response(url=person_url(2), status_code=500)

        result = await sequential_api.resolve_resident_names(
            [person_url(1), person_url(2), person_url(3)]
        )

        assert isinstance(result, Failure)
        assert isinstance(result.error, UpstreamUnavailableError)
        assert result.error.resource_url == person_url(2)
        assert httpx_mock.get_requests(url=person_url(3)) == []

    async def test_dangling_reference(
        self, sequential_api: SwapiResidentsAPI, httpx_mock
    ):
        httpx_mock.add_response(url=person_url(99), status_code=404)

        result = await sequential_api.resolve_resident_names([person_url(99)])

        assert isinstance(result, Failure)
        assert isinstance(result.error, UpstreamNotFoundError)

    async def test_record_without_name(
        self, sequential_api: SwapiResidentsAPI, httpx_mock
    ):
        httpx_mock.add_response(url=person_url(1), json={"height": "172"})

        result = await sequential_api.resolve_resident_names([person_url(1)])

        assert isinstance(result, Failure)
        assert isinstance(result.error, UpstreamInvalidResponseError)
        assert result.error.message == "Malformed resident record from SWAPI"

    async def test_connection_error(
        self, sequential_api: SwapiResidentsAPI, httpx_mock
    ):
        httpx_mock.add_exception(httpx.ConnectError("refused"), url=person_url(1))

        result = await sequential_api.resolve_resident_names([person_url(1)])

        assert isinstance(result, Failure)
        assert isinstance(result.error, UpstreamUnavailableError)

    async def test_first_failure_in_reference_order_wins(
        self, residents_api: SwapiResidentsAPI, httpx_mock
    ):
        """With several failures in flight, the earliest reference is reported."""

        async def late_not_found(request: httpx.Request) -> httpx.Response:
            await asyncio.sleep(0.02)
            return httpx.Response(404)

        async def early_server_error(request: httpx.Request) -> httpx.Response:
            await asyncio.sleep(0)
            return httpx.Response(503)

        httpx_mock.add_callback(late_not_found, url=person_url(1))
        httpx_mock.add_callback(early_server_error, url=person_url(2))

        result = await residents_api.resolve_resident_names(
            [person_url(1), person_url(2)]
        )

        assert isinstance(result, Failure)
        assert isinstance(result.error, UpstreamNotFoundError)

    async def test_too_deeply_nested_record(
        self, sequential_api: SwapiResidentsAPI, httpx_mock
    ):
        httpx_mock.add_response(url=person_url(1), text=deeply_nested_json())

        result = await sequential_api.resolve_resident_names([person_url(1)])

        assert isinstance(result, Failure)
        assert isinstance(result.error, UpstreamInvalidResponseError)


class ExplodingResidentMapper:
    """Resident mapper that raises for one specific name."""

    def map_resident(self, data: dict) -> Resident | None:
        if data.get("name") == "Boom":
            raise RuntimeError("mapper bug")
        return Resident(name=data["name"])


@pytest.mark.integration
class TestSwapiResidentsAPIUnexpectedErrors:
    """Exceptions that escape a lookup."""

    async def test_unexpected_exception_cancels_sibling_lookups(self, httpx_mock):
        """Lookups still in flight are cancelled before the error propagates."""
        residents_api = SwapiResidentsAPI(
            max_concurrency=2, mapper=ExplodingResidentMapper()
        )
        sibling_cancelled = asyncio.Event()

        async def slow_person(request: httpx.Request) -> httpx.Response:
            try:
                await asyncio.sleep(5)
            except asyncio.CancelledError:
                sibling_cancelled.set()
                raise
            return httpx.Response(200, json=person_json("Too Late"))

        async def exploding_person(request: httpx.Request) -> httpx.Response:
            await asyncio.sleep(0)
            return httpx.Response(200, json=person_json("Boom"))

        httpx_mock.add_callback(slow_person, url=person_url(1))
        httpx_mock.add_callback(exploding_person, url=person_url(2))

        with pytest.raises(ExceptionGroup) as exc_info:
            await residents_api.resolve_resident_names([person_url(1), person_url(2)])

        assert exc_info.group_contains(RuntimeError, match="mapper bug")
        assert sibling_cancelled.is_set()
