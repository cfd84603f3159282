"""PlanetResidency domain entity.

The joined output of the residency pipeline: a planet name paired with the
names of its residents. Resident order follows the planet's reference
order and duplicates are preserved.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True, kw_only=True)
class PlanetResidency:
    """Planet name with its resolved resident names.

    Attributes:
        name: Planet name.
        residents: Resident names in reference order (may be empty).
    """

    name: str
    residents: tuple[str, ...] = ()
