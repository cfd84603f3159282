"""Application layer error types.

This module defines application-level errors that wrap upstream errors with
a coarse stage label: which step of the residency pipeline failed.

Exports:
    ApplicationErrorCode: Application-level error code enum
    ApplicationError: Application layer error dataclass
"""

from dataclasses import dataclass
from enum import Enum

from src.core.errors.domain_error import DomainError


class ApplicationErrorCode(Enum):
    """Application-level error codes.

    Examples:
        >>> error = ApplicationError(
        ...     code=ApplicationErrorCode.CATALOG_FETCH_FAILED,
        ...     message="catalog fetch failed",
        ...     domain_error=upstream_error,
        ... )
    """

    CATALOG_FETCH_FAILED = "catalog_fetch_failed"
    RESIDENT_RESOLUTION_FAILED = "resident_resolution_failed"

    @property
    def stage(self) -> str:
        """Human-readable pipeline stage label."""
        return _STAGE_LABELS[self]


_STAGE_LABELS = {
    ApplicationErrorCode.CATALOG_FETCH_FAILED: "catalog fetch",
    ApplicationErrorCode.RESIDENT_RESOLUTION_FAILED: "resident resolution",
}


@dataclass(frozen=True, slots=True, kw_only=True)
class ApplicationError:
    """Application layer error.

    The upstream error is carried unchanged in domain_error; the code is the
    only information added on top of it.

    Attributes:
        code: Application error code (pipeline stage)
        message: Human-readable error message
        domain_error: Original upstream error
        details: Additional context as key-value pairs
    """

    code: ApplicationErrorCode
    message: str
    domain_error: DomainError | None = None
    details: dict[str, str] | None = None
