"""Domain layer - Pure business logic.

This layer contains the catalog entities, the upstream error taxonomy and
the protocols (ports) the application layer depends on. It has NO
dependencies on any framework or infrastructure - it is pure Python.

Structure:
- entities/: Planet, Resident, CatalogPage, PlanetResidency
- errors/: Upstream and pagination errors
- protocols/: Catalog fetcher, resident resolver and logger ports
"""
