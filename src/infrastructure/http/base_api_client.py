"""Base API client for upstream HTTP communication.

This module provides a base class for upstream API clients that handles:
- httpx client construction with an explicit per-call timeout
- HTTP request execution with timeout/connection error handling
- Response status code interpretation
- JSON parsing with error handling
- Structured logging with upstream context

Subclasses only need to:
1. Decide which URLs to request and in what order
2. Map the parsed JSON objects into domain entities

Architecture:
    - Infrastructure layer (adapter for external APIs)
    - Uses httpx for async HTTP
    - Returns Result types (no exceptions for upstream errors)
"""

from typing import Any

import httpx
import structlog

from src.core.constants import RESPONSE_BODY_MAX_LENGTH, UPSTREAM_TIMEOUT_DEFAULT
from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.domain.errors import (
    UpstreamError,
    UpstreamInvalidResponseError,
    UpstreamNotFoundError,
    UpstreamRateLimitError,
    UpstreamUnavailableError,
)


class BaseUpstreamAPIClient:
    """Base class for upstream API clients with shared HTTP handling.

    Requests are made against absolute URLs: the upstream hands out
    fully-qualified links (pagination "next", resident references) and the
    client follows them verbatim.

    Attributes:
        _upstream_name: Upstream identifier for logging and error messages.
        _timeout: HTTP request timeout in seconds.
        _logger: Structured logger with upstream context.

    Example:
        >>> class SwapiFilmsAPI(BaseUpstreamAPIClient):
        ...     async def get_film(self, url: str):
        ...         async with self._build_client() as client:
        ...             return await self._get_json_object(
        ...                 client=client, url=url, operation="get_film"
        ...             )
    """

    def __init__(
        self,
        *,
        upstream_name: str,
        timeout: float = UPSTREAM_TIMEOUT_DEFAULT,
    ) -> None:
        """Initialize base upstream API client.

        Args:
            upstream_name: Upstream identifier (e.g., "swapi").
            timeout: HTTP request timeout in seconds.
        """
        self._upstream_name = upstream_name
        self._timeout = timeout
        self._logger = structlog.get_logger(f"{upstream_name}_api")

    def _build_client(self) -> httpx.AsyncClient:
        """Create an AsyncClient with the configured timeout and JSON headers.

        The caller owns the client and must close it (use `async with`).

        Returns:
            httpx.AsyncClient ready for upstream calls.
        """
        return httpx.AsyncClient(
            timeout=httpx.Timeout(self._timeout),
            follow_redirects=True,
            headers={"Accept": "application/json"},
        )

    async def _execute_request(
        self,
        *,
        client: httpx.AsyncClient,
        url: str,
        operation: str,
    ) -> Result[httpx.Response, UpstreamError]:
        """Execute a GET request with error handling.

        Args:
            client: Open httpx client.
            url: Absolute URL to request.
            operation: Operation name for logging.

        Returns:
            Success(httpx.Response): Raw HTTP response on success.
            Failure(UpstreamUnavailableError): On timeout or connection error.
            Failure(UpstreamInvalidResponseError): On a malformed URL.
        """
        try:
            response = await client.get(url)
            return Success(value=response)

        except httpx.TimeoutException as e:
            self._logger.warning(
                f"{self._upstream_name}_api_timeout",
                operation=operation,
                url=url,
                error=str(e),
            )
            return Failure(
                error=UpstreamUnavailableError(
                    code=ErrorCode.UPSTREAM_UNAVAILABLE,
                    message=f"{self._upstream_name.upper()} request timed out",
                    upstream_name=self._upstream_name,
                    resource_url=url,
                )
            )

        except httpx.RequestError as e:
            self._logger.warning(
                f"{self._upstream_name}_api_connection_error",
                operation=operation,
                url=url,
                error=str(e),
            )
            return Failure(
                error=UpstreamUnavailableError(
                    code=ErrorCode.UPSTREAM_UNAVAILABLE,
                    message=f"Failed to connect to {self._upstream_name.upper()}: {e}",
                    upstream_name=self._upstream_name,
                    resource_url=url,
                )
            )

        except httpx.InvalidURL as e:
            self._logger.warning(
                f"{self._upstream_name}_api_invalid_url",
                operation=operation,
                url=url,
                error=str(e),
            )
            return Failure(
                error=UpstreamInvalidResponseError(
                    code=ErrorCode.UPSTREAM_INVALID_RESPONSE,
                    message=f"Malformed {self._upstream_name.upper()} reference: {url}",
                    upstream_name=self._upstream_name,
                    resource_url=url,
                )
            )

    def _check_error_response(
        self,
        response: httpx.Response,
        *,
        url: str,
        operation: str,
    ) -> Failure[UpstreamError] | None:
        """Check HTTP response for errors and return the matching UpstreamError.

        Args:
            response: HTTP response to check.
            url: URL that produced the response.
            operation: Operation name for logging.

        Returns:
            Failure(UpstreamError) if error detected, None if response is 2xx.
        """
        status = response.status_code

        # Success - no error
        if 200 <= status < 300:
            return None

        # Rate limiting (429)
        if status == 429:
            retry_after = response.headers.get("Retry-After")
            retry_seconds = (
                int(retry_after) if retry_after and retry_after.isdigit() else None
            )
            self._logger.warning(
                f"{self._upstream_name}_api_rate_limited",
                operation=operation,
                url=url,
                retry_after=retry_seconds,
            )
            return Failure(
                error=UpstreamRateLimitError(
                    code=ErrorCode.UPSTREAM_RATE_LIMITED,
                    message=f"{self._upstream_name.upper()} rate limit exceeded",
                    upstream_name=self._upstream_name,
                    resource_url=url,
                    retry_after=retry_seconds,
                )
            )

        # Not found (404)
        if status == 404:
            self._logger.warning(
                f"{self._upstream_name}_api_not_found",
                operation=operation,
                url=url,
            )
            return Failure(
                error=UpstreamNotFoundError(
                    code=ErrorCode.UPSTREAM_RESOURCE_NOT_FOUND,
                    message=f"{self._upstream_name.upper()} resource not found",
                    upstream_name=self._upstream_name,
                    resource_url=url,
                )
            )

        # Server errors (5xx)
        if status >= 500:
            self._logger.warning(
                f"{self._upstream_name}_api_server_error",
                operation=operation,
                url=url,
                status_code=status,
            )
            return Failure(
                error=UpstreamUnavailableError(
                    code=ErrorCode.UPSTREAM_UNAVAILABLE,
                    message=f"{self._upstream_name.upper()} server error: {status}",
                    upstream_name=self._upstream_name,
                    resource_url=url,
                    status_code=status,
                )
            )

        # Unexpected status
        self._logger.warning(
            f"{self._upstream_name}_api_unexpected_status",
            operation=operation,
            url=url,
            status_code=status,
        )
        return Failure(
            error=UpstreamInvalidResponseError(
                code=ErrorCode.UPSTREAM_INVALID_RESPONSE,
                message=f"Unexpected response from {self._upstream_name.upper()}: {status}",
                upstream_name=self._upstream_name,
                resource_url=url,
                response_body=response.text[:RESPONSE_BODY_MAX_LENGTH],
            )
        )

    def _parse_json_object(
        self,
        response: httpx.Response,
        *,
        url: str,
        operation: str,
    ) -> Result[dict[str, Any], UpstreamError]:
        """Parse response as JSON object with error handling.

        Args:
            response: HTTP response to parse.
            url: URL that produced the response.
            operation: Operation name for logging.

        Returns:
            Success(dict): Parsed JSON object.
            Failure(UpstreamError): On HTTP error or invalid JSON.
        """
        # Check for HTTP errors first
        error_result = self._check_error_response(response, url=url, operation=operation)
        if error_result is not None:
            return error_result

        # Parse JSON (RecursionError: nesting deeper than the decoder allows)
        try:
            data = response.json()
        except (ValueError, RecursionError) as e:
            self._logger.error(
                f"{self._upstream_name}_api_invalid_json",
                operation=operation,
                url=url,
                error=str(e),
            )
            return Failure(
                error=UpstreamInvalidResponseError(
                    code=ErrorCode.UPSTREAM_INVALID_RESPONSE,
                    message=f"Invalid JSON response from {self._upstream_name.upper()}",
                    upstream_name=self._upstream_name,
                    resource_url=url,
                    response_body=response.text[:RESPONSE_BODY_MAX_LENGTH],
                )
            )

        # Validate type
        if not isinstance(data, dict):
            self._logger.warning(
                f"{self._upstream_name}_api_unexpected_format",
                operation=operation,
                url=url,
                data_type=type(data).__name__,
            )
            return Failure(
                error=UpstreamInvalidResponseError(
                    code=ErrorCode.UPSTREAM_INVALID_RESPONSE,
                    message=f"Expected object response from {self._upstream_name.upper()}",
                    upstream_name=self._upstream_name,
                    resource_url=url,
                    response_body=response.text[:RESPONSE_BODY_MAX_LENGTH],
                )
            )

        self._logger.debug(
            f"{self._upstream_name}_api_succeeded",
            operation=operation,
            url=url,
        )
        return Success(value=data)

    async def _get_json_object(
        self,
        *,
        client: httpx.AsyncClient,
        url: str,
        operation: str,
    ) -> Result[dict[str, Any], UpstreamError]:
        """GET a URL and parse the response as a JSON object.

        Combines _execute_request and _parse_json_object for convenience.

        Args:
            client: Open httpx client.
            url: Absolute URL to request.
            operation: Operation name for logging.

        Returns:
            Success(dict): Parsed JSON object.
            Failure(UpstreamError): On any error.
        """
        result = await self._execute_request(client=client, url=url, operation=operation)

        if isinstance(result, Failure):
            return result

        return self._parse_json_object(result.value, url=url, operation=operation)

    def _invalid_payload(
        self,
        *,
        url: str,
        message: str,
    ) -> Failure[UpstreamError]:
        """Build the failure returned when a decoded object has the wrong shape.

        Args:
            url: URL that produced the payload.
            message: Human-readable description of the shape problem.

        Returns:
            Failure(UpstreamInvalidResponseError).
        """
        return Failure(
            error=UpstreamInvalidResponseError(
                code=ErrorCode.UPSTREAM_INVALID_RESPONSE,
                message=message,
                upstream_name=self._upstream_name,
                resource_url=url,
            )
        )
