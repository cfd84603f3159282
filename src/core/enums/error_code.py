"""Domain-level error codes (machine-readable).

Error codes follow ENTITY_ACTION_REASON naming convention.
Used with Result types for railway-oriented programming.

Categories:
- Validation errors (INVALID_*)
- Upstream errors (UPSTREAM_*)
- Pagination guard errors (PAGINATION_*)
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable).

    Error codes follow ENTITY_ACTION_REASON naming convention.
    """

    # Validation errors
    INVALID_FILMS_COUNT = "invalid_films_count"

    # Upstream errors
    UPSTREAM_UNAVAILABLE = "upstream_unavailable"
    UPSTREAM_RATE_LIMITED = "upstream_rate_limited"
    UPSTREAM_RESOURCE_NOT_FOUND = "upstream_resource_not_found"
    UPSTREAM_INVALID_RESPONSE = "upstream_invalid_response"

    # Pagination guard errors
    PAGINATION_LIMIT_EXCEEDED = "pagination_limit_exceeded"
    PAGINATION_LOOP_DETECTED = "pagination_loop_detected"
