"""Domain entities for business logic.

Pure business logic entities with no framework dependencies.
"""

from src.domain.entities.catalog_page import CatalogPage
from src.domain.entities.planet import Planet
from src.domain.entities.planet_residency import PlanetResidency
from src.domain.entities.resident import Resident

__all__ = [
    "CatalogPage",
    "Planet",
    "PlanetResidency",
    "Resident",
]
