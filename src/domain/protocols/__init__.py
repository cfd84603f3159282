"""Domain protocols (ports) package.

Infrastructure adapters implement these protocols without inheritance.

Usage:
    from src.domain.protocols import PlanetCatalogProtocol, ResidentResolverProtocol
"""

from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.planet_catalog_protocol import PlanetCatalogProtocol
from src.domain.protocols.resident_resolver_protocol import (
    ResidentResolverProtocol,
)

__all__ = [
    "LoggerProtocol",
    "PlanetCatalogProtocol",
    "ResidentResolverProtocol",
]
