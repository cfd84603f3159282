"""Residency response schemas.

Pydantic schemas for the residency endpoint. Includes:
- Response schema (API → client)
- Entity-to-schema conversion
- JSON serialization of the response array
"""

from collections.abc import Sequence

from pydantic import BaseModel, Field, TypeAdapter

from src.domain.entities.planet_residency import PlanetResidency


# =============================================================================
# Response Schemas
# =============================================================================


class PlanetResidencyResponse(BaseModel):
    """Single planet with its resident names.

    Attributes:
        name: Planet name.
        residents: Resident names in reference order.
    """

    name: str = Field(..., description="Planet name", examples=["Tatooine"])
    residents: list[str] = Field(
        default_factory=list,
        description="Resident names, in the planet's reference order",
        examples=[["Luke Skywalker", "C-3PO"]],
    )

    @classmethod
    def from_entity(cls, residency: PlanetResidency) -> "PlanetResidencyResponse":
        """Convert domain entity to response schema.

        Args:
            residency: PlanetResidency from the query handler.

        Returns:
            PlanetResidencyResponse for API response.
        """
        return cls(name=residency.name, residents=list(residency.residents))


_RESPONSE_LIST = TypeAdapter(list[PlanetResidencyResponse])


def serialize_residencies(residencies: Sequence[PlanetResidency]) -> bytes:
    """Serialize residencies to the JSON array returned by the endpoint.

    Args:
        residencies: Residencies in catalog order.

    Returns:
        UTF-8 JSON bytes: [{"name": ..., "residents": [...]}, ...].

    Raises:
        pydantic_core.PydanticSerializationError: If a value cannot be encoded.
        pydantic.ValidationError: If an entity does not fit the schema.
    """
    payload = [PlanetResidencyResponse.from_entity(r) for r in residencies]
    return _RESPONSE_LIST.dump_json(payload)
