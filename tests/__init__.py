"""Test suite for the planet residency service.

Test structure follows the test pyramid:
- unit/: Pure logic with doubles (entities, mappers, handler, config)
- integration/: SWAPI HTTP clients against a pytest-httpx mocked transport
- api/: Endpoint behavior through FastAPI TestClient
"""
