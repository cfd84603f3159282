"""Presentation layer - API endpoints and HTTP concerns.

This layer contains FastAPI routers and endpoint definitions. The presentation
layer is thin - it parses request parameters, dispatches queries to the
application layer and translates results to HTTP responses.

Structure:
- api/v1/: API version 1 endpoints
- api/middleware/: Request tracing

The presentation layer depends on the application layer (dispatches
queries) but contains NO business logic.
"""
