"""LoggerProtocol definition for structured logging.

This protocol standardizes structured logging across the service while
remaining backend-agnostic. Implementations MUST emit key-value context,
never pre-formatted strings.

Log Levels:
    - DEBUG: Per-page and per-resident diagnostics
    - INFO: Normal operational events (request served, server listening)
    - WARNING: Upstream degraded (timeouts, 5xx, rate limits)
    - ERROR: Request failed, service continues
    - CRITICAL: Service cannot start or serve at all

Usage:
    from src.core.container import get_logger

    logger = get_logger()
    logger.info("planet_residencies_listed", films_count=2, planet_count=5)

    request_logger = logger.bind(trace_id=trace_id)
    request_logger.info("catalog_fetch_started")  # trace_id auto-included
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters.

    All logging calls MUST be structured: event name + key-value context.
    """

    def debug(self, message: str, /, **context: Any) -> None:
        """Log a debug-level message."""
        ...

    def info(self, message: str, /, **context: Any) -> None:
        """Log an info-level message."""
        ...

    def warning(self, message: str, /, **context: Any) -> None:
        """Log a warning-level message."""
        ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error-level message with optional exception details.

        Args:
            message: Event name (avoid f-strings; use context).
            error: Optional exception instance; implementation may include
                error_type and error_message fields.
            **context: Structured key-value context fields.
        """
        ...

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log a critical-level message with optional exception details."""
        ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Return new logger with permanently bound context.

        Original logger instance remains unchanged.

        Args:
            **context: Context to bind to all future logs.

        Returns:
            New logger instance with bound context.
        """
        ...
