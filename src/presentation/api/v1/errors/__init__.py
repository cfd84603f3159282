"""Error handling for API v1.

Exports:
    register_exception_handlers: Register global exception handlers with FastAPI app
"""

from src.presentation.api.v1.errors.exception_handlers import (
    register_exception_handlers,
)

__all__ = ["register_exception_handlers"]
