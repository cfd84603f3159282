"""Container module - Centralized dependency injection.

This module re-exports all factory functions from submodules:

    from src.core.container import get_logger, get_list_planet_residencies_handler

The container is organized into modules by concern:
- infrastructure: Logging
- residency_handlers: SWAPI clients and the residency query handler
"""

# Infrastructure services
from src.core.container.infrastructure import get_logger

# Residency pipeline
from src.core.container.residency_handlers import (
    get_list_planet_residencies_handler,
    get_planet_catalog,
    get_resident_resolver,
)

__all__ = [
    "get_list_planet_residencies_handler",
    "get_logger",
    "get_planet_catalog",
    "get_resident_resolver",
]
