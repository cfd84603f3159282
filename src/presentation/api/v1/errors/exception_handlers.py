"""Global exception handlers for FastAPI application.

This module provides the handler that catches unhandled exceptions and
converts them to the service's plain-text 500 response.

Exports:
    register_exception_handlers: Register all exception handlers with FastAPI app
"""

from fastapi import FastAPI, Request, status
from fastapi.responses import PlainTextResponse

from src.core.constants import INTERNAL_ERROR_MESSAGE
from src.core.container import get_logger


async def generic_exception_handler(
    request: Request, exc: Exception
) -> PlainTextResponse:
    """Handle unexpected Python exceptions.

    Logs the exception with the request trace ID and returns a fixed
    plain-text body, so no stack trace or internal detail leaks to clients.

    Args:
        request: FastAPI Request object
        exc: Unhandled exception

    Returns:
        PlainTextResponse (500 Internal Server Error)
    """
    get_logger().error(
        "unhandled_exception",
        error=exc,
        trace_id=getattr(request.state, "trace_id", None),
        request_path=request.url.path,
        request_method=request.method,
    )

    return PlainTextResponse(
        INTERNAL_ERROR_MESSAGE,
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with FastAPI application.

    Args:
        app: FastAPI application instance

    Example:
        >>> from fastapi import FastAPI
        >>> app = FastAPI()
        >>> register_exception_handlers(app)
    """
    app.add_exception_handler(Exception, generic_exception_handler)
