"""Unit tests for ConsoleAdapter (structured console logging).

Tests cover:
- All LoggerProtocol methods (debug, info, warning, error, critical)
- Exception details folded into error/critical context
- Context binding
- Renderer and level selection

Architecture:
- Unit tests with mocked structlog
"""

import logging
from unittest.mock import MagicMock, patch

import pytest

from src.infrastructure.logging.console_adapter import ConsoleAdapter

STRUCTLOG = "src.infrastructure.logging.console_adapter.structlog"


@pytest.mark.unit
class TestConsoleAdapterLogging:
    """Test ConsoleAdapter logging methods."""

    @pytest.mark.parametrize("level", ["debug", "info", "warning"])
    def test_logs_message_with_context(self, level):
        """Plain levels forward event name and context unchanged."""
        with patch(STRUCTLOG) as mock_structlog:
            mock_logger = MagicMock()
            mock_structlog.get_logger.return_value = mock_logger

            adapter = ConsoleAdapter()
            getattr(adapter, level)("swapi_api_page_fetched", url="u", page_size=10)

            getattr(mock_logger, level).assert_called_once_with(
                "swapi_api_page_fetched", url="u", page_size=10
            )

    @pytest.mark.parametrize("level", ["error", "critical"])
    def test_folds_exception_into_context(self, level):
        """error= becomes error_type and error_message fields."""
        with patch(STRUCTLOG) as mock_structlog:
            mock_logger = MagicMock()
            mock_structlog.get_logger.return_value = mock_logger

            adapter = ConsoleAdapter()
            getattr(adapter, level)(
                "planet_residencies_encoding_failed",
                error=ValueError("bad value"),
                films_count=2,
            )

            getattr(mock_logger, level).assert_called_once_with(
                "planet_residencies_encoding_failed",
                films_count=2,
                error_type="ValueError",
                error_message="bad value",
            )

    def test_error_without_exception(self):
        with patch(STRUCTLOG) as mock_structlog:
            mock_logger = MagicMock()
            mock_structlog.get_logger.return_value = mock_logger

            ConsoleAdapter().error("planet_residencies_failed", stage="catalog fetch")

            mock_logger.error.assert_called_once_with(
                "planet_residencies_failed", stage="catalog fetch"
            )


@pytest.mark.unit
class TestConsoleAdapterBind:
    """Test ConsoleAdapter.bind."""

    def test_bind_returns_new_adapter_with_bound_logger(self):
        with patch(STRUCTLOG) as mock_structlog:
            mock_logger = MagicMock()
            bound_logger = MagicMock()
            mock_logger.bind.return_value = bound_logger
            mock_structlog.get_logger.return_value = mock_logger

            adapter = ConsoleAdapter()
            bound = adapter.bind(films_count=3)
            bound.info("planet_residencies_listed")

            assert bound is not adapter
            mock_logger.bind.assert_called_once_with(films_count=3)
            bound_logger.info.assert_called_once_with("planet_residencies_listed")


@pytest.mark.unit
class TestConsoleAdapterConfiguration:
    """Test structlog configuration choices."""

    def test_json_renderer_when_requested(self):
        with patch(STRUCTLOG) as mock_structlog:
            ConsoleAdapter(use_json=True)

            mock_structlog.processors.JSONRenderer.assert_called_once_with()
            mock_structlog.dev.ConsoleRenderer.assert_not_called()

    def test_console_renderer_by_default(self):
        with patch(STRUCTLOG) as mock_structlog:
            ConsoleAdapter()

            mock_structlog.dev.ConsoleRenderer.assert_called_once_with(colors=True)
            mock_structlog.processors.JSONRenderer.assert_not_called()

    @pytest.mark.parametrize(
        ("name", "expected"),
        [("debug", logging.DEBUG), ("WARNING", logging.WARNING), ("nope", logging.INFO)],
    )
    def test_level_name_is_mapped(self, name, expected):
        with patch(STRUCTLOG) as mock_structlog:
            ConsoleAdapter(level=name)

            mock_structlog.make_filtering_bound_logger.assert_called_once_with(expected)
