"""Resident domain entity.

A person record referenced from a planet's residents list. Only the name is
used by the residency pipeline; the remaining attributes are decoded so a
malformed record is caught at the boundary.
"""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True, slots=True, kw_only=True)
class Resident:
    """Resident record from the upstream people resource.

    Attributes:
        name: Display name (the only field used downstream).
        height: Height (opaque string).
        mass: Mass (opaque string).
        hair_color: Hair color.
        skin_color: Skin color.
        eye_color: Eye color.
        birth_year: Birth year in BBY/ABY notation.
        gender: Gender.
        homeworld: URI of the home planet.
        films: Film resource URIs.
        species: Species resource URIs.
        vehicles: Vehicle resource URIs.
        starships: Starship resource URIs.
        created: Upstream creation timestamp.
        edited: Upstream last-edit timestamp.
        url: Canonical URI of this resident.
    """

    name: str
    height: str = ""
    mass: str = ""
    hair_color: str = ""
    skin_color: str = ""
    eye_color: str = ""
    birth_year: str = ""
    gender: str = ""
    homeworld: str = ""
    films: tuple[str, ...] = ()
    species: tuple[str, ...] = ()
    vehicles: tuple[str, ...] = ()
    starships: tuple[str, ...] = ()
    created: datetime | None = None
    edited: datetime | None = None
    url: str = ""
