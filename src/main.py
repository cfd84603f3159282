"""
Main FastAPI application entry point.

This module initializes the FastAPI application instance, wires middleware,
exception handlers and routers, and exposes `run()` for the console script.

The residency endpoint is served both at its original root path
(/residentsInPlanets) and under the versioned prefix (/api/v1).
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from src.core.config import settings
from src.core.container import get_logger
from src.presentation.api.middleware.trace_middleware import TraceMiddleware
from src.presentation.api.v1 import residencies_router, v1_router
from src.presentation.api.v1.errors import register_exception_handlers


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan context manager.

    Logs startup and shutdown with the bound address. No resources are held
    between requests, so there is nothing to open or close.

    Args:
        app: FastAPI application instance.

    Yields:
        None during application lifetime.
    """
    logger = get_logger()
    logger.info(
        "server_listening",
        host=settings.host,
        port=settings.port,
        environment=settings.environment.value,
        catalog_url=settings.swapi_planets_url,
    )

    yield

    logger.info("server_stopped")


# Initialize FastAPI application with settings and lifespan
app = FastAPI(
    title=settings.app_name,
    description="Residents of planets appearing in more than N films",
    version=settings.app_version,
    docs_url="/docs",
    redoc_url="/redoc",
    debug=settings.debug,
    lifespan=lifespan,
)

# Wire trace middleware (request correlation)
app.add_middleware(TraceMiddleware)

# Register global exception handlers (plain-text 500)
register_exception_handlers(app)

# Original root path plus the versioned API
app.include_router(residencies_router)
app.include_router(v1_router)


@app.get("/")
async def root() -> dict[str, str]:
    """
    Root endpoint - basic service banner.

    Returns:
        dict: Service name, status and version.
    """
    return {
        "message": settings.app_name,
        "status": "operational",
        "version": settings.app_version,
    }


@app.get("/health")
async def health() -> dict[str, str]:
    """
    Health check endpoint for monitoring and load balancers.

    Returns:
        dict: Health status indicator.
    """
    return {"status": "healthy"}


def run() -> None:
    """Serve the application with uvicorn using the configured host and port."""
    uvicorn.run(
        "src.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
