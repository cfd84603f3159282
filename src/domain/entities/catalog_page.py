"""CatalogPage domain entity.

One unit of the paginated planet catalog: a batch of planets plus the link
to the following page. The last page has no next_url.
"""

from dataclasses import dataclass

from src.domain.entities.planet import Planet


@dataclass(frozen=True, slots=True, kw_only=True)
class CatalogPage:
    """Single page of the planet catalog.

    Attributes:
        planets: Planets on this page, in upstream order.
        next_url: URI of the next page, None on the last page.
        previous_url: URI of the previous page, None on the first page.
        count: Total catalog size reported upstream (informational only).
    """

    planets: tuple[Planet, ...]
    next_url: str | None = None
    previous_url: str | None = None
    count: int | None = None

    @property
    def is_last(self) -> bool:
        """True when there is no page after this one."""
        return not self.next_url
