"""ResidentResolverProtocol - port for turning resident references into names.

Contract:
    - Output order matches input order, duplicates preserved
    - All-or-nothing: a single failed lookup fails the whole resolution
    - No caching: each reference is fetched once per appearance
"""

from collections.abc import Sequence
from typing import Protocol

from src.core.result import Result
from src.domain.errors import UpstreamError


class ResidentResolverProtocol(Protocol):
    """Resolves resident resource URIs into display names."""

    async def resolve_resident_names(
        self, references: Sequence[str]
    ) -> Result[list[str], UpstreamError]:
        """Resolve each reference to the resident's name.

        Args:
            references: Resident resource URIs, in planet order.

        Returns:
            Success(list[str]): Names in reference order.
            Failure(UpstreamError): First lookup failure encountered.
        """
        ...
