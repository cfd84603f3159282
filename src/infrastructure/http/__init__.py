"""Shared HTTP client plumbing for upstream APIs."""

from src.infrastructure.http.base_api_client import BaseUpstreamAPIClient

__all__ = ["BaseUpstreamAPIClient"]
