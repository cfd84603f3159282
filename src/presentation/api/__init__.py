"""API module - HTTP endpoints.

This module contains API routers organized by version.
"""
