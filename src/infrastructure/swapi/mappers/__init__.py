"""SWAPI JSON to domain entity mappers."""

from src.infrastructure.swapi.mappers.planet_mapper import SwapiPlanetMapper
from src.infrastructure.swapi.mappers.resident_mapper import SwapiResidentMapper

__all__ = ["SwapiPlanetMapper", "SwapiResidentMapper"]
