"""Centralized constants for internal implementation details.

This module contains constants that are internal implementation details,
NOT environment-specific configuration. For environment-specific settings,
use `src/core/config.py` instead.

Categories:
- Upstream: SWAPI defaults used when settings are not overridden
- Timeouts: Default timeouts for outbound calls
- Limits: Pagination guards, fan-out bounds and truncation limits
- Responses: Fixed plain-text bodies returned by the residency endpoint
"""

# =============================================================================
# Upstream
# =============================================================================

SWAPI_PLANETS_URL_DEFAULT: str = "https://swapi.dev/api/planets/"
"""Root of the paginated planet catalog."""

UPSTREAM_NAME: str = "swapi"
"""Upstream identifier used in log event names and error messages."""


# =============================================================================
# Timeouts
# =============================================================================

UPSTREAM_TIMEOUT_DEFAULT: float = 30.0
"""Default timeout for a single upstream call in seconds."""


# =============================================================================
# Limits
# =============================================================================

MAX_CATALOG_PAGES_DEFAULT: int = 100
"""Maximum number of catalog pages followed before failing closed."""

RESIDENT_FETCH_CONCURRENCY_DEFAULT: int = 8
"""Maximum resident lookups in flight for a single planet."""

RESIDENT_FETCH_CONCURRENCY_MAX: int = 64
"""Upper bound accepted for resident_fetch_concurrency."""

RESPONSE_BODY_MAX_LENGTH: int = 500
"""Maximum length for response body in error messages (truncation limit)."""


# =============================================================================
# Responses
# =============================================================================

INVALID_FILMS_COUNT_MESSAGE: str = "Invalid parameter 'filmsCount'"
"""400 body for a missing or non-integer filmsCount."""

CATALOG_FETCH_FAILED_MESSAGE: str = "Unable to get the planets list"
"""500 body when the planet catalog cannot be retrieved."""

RESIDENT_RESOLUTION_FAILED_MESSAGE: str = (
    "Unable to get the residents of the different planets"
)
"""500 body when a resident lookup fails."""

ENCODING_FAILED_MESSAGE: str = "Error encoding JSON"
"""500 body when the response cannot be serialized."""

INTERNAL_ERROR_MESSAGE: str = "Internal Server Error"
"""500 body for unhandled exceptions."""
