"""Domain errors package.

Exports all domain-level error classes for convenient importing.

Usage:
    from src.domain.errors import UpstreamError, UpstreamUnavailableError
"""

from src.domain.errors.upstream_error import (
    PaginationLimitError,
    PaginationLoopError,
    UpstreamError,
    UpstreamInvalidResponseError,
    UpstreamNotFoundError,
    UpstreamRateLimitError,
    UpstreamUnavailableError,
)

__all__ = [
    "PaginationLimitError",
    "PaginationLoopError",
    "UpstreamError",
    "UpstreamInvalidResponseError",
    "UpstreamNotFoundError",
    "UpstreamRateLimitError",
    "UpstreamUnavailableError",
]
