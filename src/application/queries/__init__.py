"""Queries - Read operations that fetch data.

Queries represent a request for information. They are immutable dataclasses
with question-like names. Each query has a corresponding handler that
fetches and returns the requested data. Queries NEVER change state.
"""

from src.application.queries.residency_queries import ListPlanetResidencies

__all__ = [
    "ListPlanetResidencies",
]
