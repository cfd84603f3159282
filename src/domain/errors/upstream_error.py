"""Upstream catalog error types.

These errors are part of the PlanetCatalogProtocol and ResidentResolverProtocol
contracts - they define the failure cases an upstream client can return.

Taxonomy:
- Transport failures: UpstreamUnavailableError (timeout, connection, 5xx)
  and UpstreamRateLimitError (429)
- Decode failures: UpstreamInvalidResponseError (malformed JSON, wrong shape,
  unexpected status) and UpstreamNotFoundError (404)
- Pagination guards: PaginationLimitError, PaginationLoopError

Usage:
    from src.domain.errors import UpstreamError, UpstreamUnavailableError
    from src.core.result import Result, Success, Failure

    async def fetch_all_planets(self) -> Result[list[Planet], UpstreamError]:
        if timed_out:
            return Failure(error=UpstreamUnavailableError(...))
        return Success(value=planets)
"""

from dataclasses import dataclass
from typing import Any

from src.core.errors import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class UpstreamError(DomainError):
    """Base upstream API error.

    Attributes:
        code: Domain ErrorCode.
        message: Human-readable message.
        upstream_name: Name of the upstream (swapi).
        resource_url: URI that was being fetched when the error occurred.
        details: Additional context.
    """

    upstream_name: str
    resource_url: str | None = None
    details: dict[str, Any] | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class UpstreamUnavailableError(UpstreamError):
    """Upstream could not be reached or failed server-side.

    Raised when:
    - Connection is refused or DNS resolution fails
    - The request times out
    - Upstream returns a 5xx status

    Attributes:
        status_code: HTTP status for 5xx failures, None for transport errors.
    """

    status_code: int | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class UpstreamRateLimitError(UpstreamError):
    """Upstream returned 429 Too Many Requests.

    Not retried; surfaced to the caller like any other transport failure.

    Attributes:
        retry_after: Seconds suggested by the Retry-After header, if any.
    """

    retry_after: int | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class UpstreamNotFoundError(UpstreamError):
    """Referenced upstream resource does not exist (404)."""

    pass


@dataclass(frozen=True, slots=True, kw_only=True)
class UpstreamInvalidResponseError(UpstreamError):
    """Upstream returned a payload that cannot be decoded.

    Raised when:
    - Response body is not valid JSON
    - JSON does not have the expected shape (missing name, results not a list)
    - Status code is neither success nor a recognised error

    Attributes:
        response_body: Truncated raw response body for debugging.
    """

    response_body: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class PaginationLimitError(UpstreamError):
    """Catalog pagination exceeded the configured page ceiling.

    Attributes:
        max_pages: The ceiling that was exceeded.
    """

    max_pages: int


@dataclass(frozen=True, slots=True, kw_only=True)
class PaginationLoopError(UpstreamError):
    """Catalog pagination pointed back to a page already visited."""

    pass
