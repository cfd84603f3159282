"""Request/response schemas for API endpoints.

All Pydantic models for HTTP response serialization. Schemas are kept
separate from domain entities (HTTP-layer concerns only).

Usage:
    from src.schemas import PlanetResidencyResponse, serialize_residencies
"""

from src.schemas.residency_schemas import (
    PlanetResidencyResponse,
    serialize_residencies,
)

__all__ = [
    "PlanetResidencyResponse",
    "serialize_residencies",
]
