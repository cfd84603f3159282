"""Planet residency router.

Endpoints:
    GET /residentsInPlanets?filmsCount=N         - Residents of planets in > N films
    GET /api/v1/residentsInPlanets?filmsCount=N  - Same, versioned path

Responses:
    200 application/json  [{"name": ..., "residents": [...]}, ...]
    400 text/plain        filmsCount missing or not an integer
    500 text/plain        catalog fetch, resident resolution or encoding failure

The failure bodies are fixed strings; the status code alone does not tell
the failure stages apart.
"""

import re
from typing import Annotated

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import PlainTextResponse, Response
from pydantic import ValidationError as PydanticValidationError
from pydantic_core import PydanticSerializationError

from src.application.errors import ApplicationError, ApplicationErrorCode
from src.application.queries.handlers.list_planet_residencies_handler import (
    ListPlanetResidenciesHandler,
)
from src.application.queries.residency_queries import ListPlanetResidencies
from src.core.constants import (
    CATALOG_FETCH_FAILED_MESSAGE,
    ENCODING_FAILED_MESSAGE,
    INVALID_FILMS_COUNT_MESSAGE,
    RESIDENT_RESOLUTION_FAILED_MESSAGE,
)
from src.core.container import get_list_planet_residencies_handler, get_logger
from src.core.enums import ErrorCode
from src.core.errors import ValidationError
from src.core.result import Failure, Result, Success
from src.schemas.residency_schemas import serialize_residencies

router = APIRouter(tags=["Residencies"])

_INTEGER_PATTERN = re.compile(r"([+-]?)0*([0-9]+)")

# Signed 64-bit range accepted for filmsCount
_FILMS_COUNT_MIN = -(2**63)
_FILMS_COUNT_MAX = 2**63 - 1
_FILMS_COUNT_MAX_DIGITS = len(str(_FILMS_COUNT_MAX))


# =============================================================================
# Parameter Parsing
# =============================================================================


def _invalid_films_count() -> Failure[ValidationError]:
    return Failure(
        error=ValidationError(
            code=ErrorCode.INVALID_FILMS_COUNT,
            message="filmsCount must be a decimal integer within the 64-bit range",
            field="filmsCount",
        )
    )


def parse_films_count(raw: str | None) -> Result[int, ValidationError]:
    """Parse the filmsCount query parameter.

    Accepts an optionally signed run of ASCII digits, nothing else (no
    surrounding whitespace, no underscores, no decimal point). Leading zeros
    are ignored. Values outside the signed 64-bit range are rejected.

    Args:
        raw: Raw query parameter value, None when absent.

    Returns:
        Success(int): Parsed threshold.
        Failure(ValidationError): Missing, non-integer or out-of-range value.
    """
    match = _INTEGER_PATTERN.fullmatch(raw) if raw is not None else None
    if match is None:
        return _invalid_films_count()

    sign, digits = match.groups()
    # Length check first: int() refuses very long digit strings
    if len(digits) > _FILMS_COUNT_MAX_DIGITS:
        return _invalid_films_count()

    value = int(sign + digits)
    if not _FILMS_COUNT_MIN <= value <= _FILMS_COUNT_MAX:
        return _invalid_films_count()
    return Success(value=value)


# =============================================================================
# Error Mapping (ApplicationError → plain-text 500)
# =============================================================================


_FAILURE_MESSAGES = {
    ApplicationErrorCode.CATALOG_FETCH_FAILED: CATALOG_FETCH_FAILED_MESSAGE,
    ApplicationErrorCode.RESIDENT_RESOLUTION_FAILED: RESIDENT_RESOLUTION_FAILED_MESSAGE,
}


def _error_response(error: ApplicationError) -> PlainTextResponse:
    """Map a stage-labelled application error to its fixed 500 response.

    Args:
        error: ApplicationError from the query handler.

    Returns:
        PlainTextResponse with the stage's fixed message.
    """
    return PlainTextResponse(
        _FAILURE_MESSAGES[error.code],
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


# =============================================================================
# Residency Endpoint
# =============================================================================


@router.get(
    "/residentsInPlanets",
    summary="List planet residents",
    description="List the residents of every planet appearing in more than "
    "filmsCount films, in catalog order.",
    responses={
        200: {"description": "Planets with their resident names"},
        400: {"description": "filmsCount missing or not an integer"},
        500: {"description": "Upstream catalog or resident lookup failed"},
    },
)
async def list_planet_residencies(
    films_count: Annotated[
        str | None,
        Query(
            alias="filmsCount",
            description="Strict lower bound on the number of films a planet appears in",
        ),
    ] = None,
    handler: ListPlanetResidenciesHandler = Depends(
        get_list_planet_residencies_handler
    ),
) -> Response:
    """List residents of planets appearing in more than filmsCount films.

    GET /residentsInPlanets?filmsCount=2 → 200 OK

    Args:
        films_count: Raw filmsCount query parameter.
        handler: ListPlanetResidencies handler (injected).

    Returns:
        JSON array response on success, plain-text error response otherwise.
    """
    parsed = parse_films_count(films_count)
    if isinstance(parsed, Failure):
        return PlainTextResponse(
            INVALID_FILMS_COUNT_MESSAGE,
            status_code=status.HTTP_400_BAD_REQUEST,
        )

    result = await handler.handle(ListPlanetResidencies(films_count=parsed.value))
    if isinstance(result, Failure):
        return _error_response(result.error)

    try:
        body = serialize_residencies(result.value)
    except (PydanticSerializationError, PydanticValidationError) as e:
        get_logger().error("planet_residencies_encoding_failed", error=e)
        return PlainTextResponse(
            ENCODING_FAILED_MESSAGE,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    return Response(content=body, media_type="application/json")
