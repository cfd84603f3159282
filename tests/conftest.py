"""Pytest configuration and shared fixtures.

This configuration ensures:
1. Settings load in the testing environment (JSON logs)
2. Async tests are collected with the asyncio marker
3. Shared doubles are available as fixtures
"""

import inspect
import os

os.environ.setdefault("ENVIRONMENT", "testing")

import pytest  # noqa: E402

from tests.utils.doubles import RecordingLogger  # noqa: E402


@pytest.fixture
def recording_logger() -> RecordingLogger:
    """Provide a fresh recording logger."""
    return RecordingLogger()


# Pytest markers for different test types
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
    config.addinivalue_line(
        "markers", "integration: HTTP client tests against a mocked transport"
    )
    config.addinivalue_line("markers", "api: Endpoint tests through TestClient")


def pytest_collection_modifyitems(config, items):
    """Automatically add asyncio marker to async test functions."""
    for item in items:
        if inspect.iscoroutinefunction(getattr(item, "function", None)):
            item.add_marker(pytest.mark.asyncio)
