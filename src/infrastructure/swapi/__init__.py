"""SWAPI upstream integration.

Clients for the Star Wars API planet catalog and people resources.

Exports:
    SwapiPlanetsAPI: Depaginating planet catalog fetcher
    SwapiResidentsAPI: Bounded-concurrency resident name resolver
"""

from src.infrastructure.swapi.planets_api import SwapiPlanetsAPI
from src.infrastructure.swapi.residents_api import SwapiResidentsAPI

__all__ = ["SwapiPlanetsAPI", "SwapiResidentsAPI"]
