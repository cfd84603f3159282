"""Infrastructure layer - Adapters and external integrations.

This layer contains implementations of domain protocols (ports):
- http/: Shared httpx plumbing (timeouts, status interpretation, JSON decode)
- swapi/: Planet catalog and resident clients for the SWAPI upstream
- logging/: structlog adapters

The infrastructure layer depends on the domain layer (implements protocols)
but the domain layer does NOT depend on infrastructure.
"""
