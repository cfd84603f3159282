"""Test doubles for the residency pipeline ports."""

from src.core.result import Failure, Result, Success
from src.domain.entities.planet import Planet
from src.domain.errors import UpstreamError


# =============================================================================
# Port doubles
# =============================================================================


class StubCatalog:
    """PlanetCatalogProtocol double returning a fixed result."""

    def __init__(self, result: Result[list[Planet], UpstreamError]) -> None:
        self._result = result
        self.calls = 0

    async def fetch_all_planets(self) -> Result[list[Planet], UpstreamError]:
        self.calls += 1
        return self._result


class StubResolver:
    """ResidentResolverProtocol double backed by a URI → name table.

    URIs listed in `failures` resolve to the given error.
    """

    def __init__(
        self,
        names: dict[str, str] | None = None,
        failures: dict[str, UpstreamError] | None = None,
    ) -> None:
        self._names = names or {}
        self._failures = failures or {}
        self.calls: list[tuple[str, ...]] = []

    async def resolve_resident_names(
        self, references
    ) -> Result[list[str], UpstreamError]:
        self.calls.append(tuple(references))
        resolved = []
        for url in references:
            if url in self._failures:
                return Failure(error=self._failures[url])
            resolved.append(self._names[url])
        return Success(value=resolved)


class RecordingLogger:
    """LoggerProtocol double that records (level, event, context) tuples."""

    def __init__(self) -> None:
        self.records: list[tuple[str, str, dict]] = []

    def _record(self, level: str, message: str, context: dict) -> None:
        self.records.append((level, message, context))

    def debug(self, message, /, **context):
        self._record("debug", message, context)

    def info(self, message, /, **context):
        self._record("info", message, context)

    def warning(self, message, /, **context):
        self._record("warning", message, context)

    def error(self, message, /, *, error=None, **context):
        self._record("error", message, context)

    def critical(self, message, /, *, error=None, **context):
        self._record("critical", message, context)

    def bind(self, **context):
        return self

    def events(self, level: str) -> list[str]:
        return [message for lvl, message, _ in self.records if lvl == level]
