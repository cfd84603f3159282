"""
Configuration management using Pydantic Settings.

This module provides type-safe, validated configuration loading from environment
variables. Every field has a default so the service starts with no .env at all;
deployments override only what they need.

Architecture:
- Flat Settings structure (no nesting)
- All config loaded from environment variables
- Type validation via Pydantic
- Internal implementation constants live in src/core/constants.py

Usage:
    from src.core.config import settings

    # Access config
    catalog_root = settings.swapi_planets_url
    timeout = settings.upstream_timeout_seconds

    # Environment detection
    if settings.is_development:
        # Dev-specific behavior
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.core.constants import (
    MAX_CATALOG_PAGES_DEFAULT,
    RESIDENT_FETCH_CONCURRENCY_DEFAULT,
    RESIDENT_FETCH_CONCURRENCY_MAX,
    SWAPI_PLANETS_URL_DEFAULT,
    UPSTREAM_TIMEOUT_DEFAULT,
)
from src.core.enums import Environment


class Settings(BaseSettings):
    """
    Main application settings (flat structure).

    Configuration precedence:
        1. Environment variables
        2. .env file in the working directory
        3. Default values

    Returns:
        Settings: Application configuration loaded from environment.
    """

    # Environment detection
    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Application environment (development, testing, ci, production)",
    )

    # Core application settings
    debug: bool = Field(
        default=False,
        description="Enable debug mode (verbose logging, detailed errors)",
    )
    host: str = Field(
        default="0.0.0.0",
        description="Server bind host",
    )
    port: int = Field(
        default=8080,
        description="Server bind port",
    )
    reload: bool = Field(
        default=False,
        description="Enable auto-reload on code changes (development only)",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    # Application metadata
    app_name: str = Field(
        default="Planet Residency API",
        description="Application name",
    )
    app_version: str = Field(
        default="0.1.0",
        description="Application version",
    )
    api_v1_prefix: str = Field(
        default="/api/v1",
        description="API v1 route prefix",
    )

    # Upstream catalog configuration
    swapi_planets_url: str = Field(
        default=SWAPI_PLANETS_URL_DEFAULT,
        description="Root URI of the paginated planet catalog",
    )
    upstream_timeout_seconds: float = Field(
        default=UPSTREAM_TIMEOUT_DEFAULT,
        gt=0,
        description="Timeout applied to every outbound request (seconds)",
    )
    max_catalog_pages: int = Field(
        default=MAX_CATALOG_PAGES_DEFAULT,
        ge=1,
        description="Maximum catalog pages followed before the fetch fails",
    )
    resident_fetch_concurrency: int = Field(
        default=RESIDENT_FETCH_CONCURRENCY_DEFAULT,
        ge=1,
        le=RESIDENT_FETCH_CONCURRENCY_MAX,
        description="Maximum resident lookups in flight per planet (1 = sequential)",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("swapi_planets_url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """
        Strip surrounding whitespace and reject empty catalog URLs.

        The trailing slash is kept: the catalog root is requested verbatim.

        Args:
            v: URL string.

        Returns:
            str: Cleaned URL.

        Raises:
            ValueError: If the URL is empty or not http(s).
        """
        v = v.strip()
        if not v.startswith(("http://", "https://")):
            raise ValueError("swapi_planets_url must be an http(s) URL")
        return v

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """
        Upper-case and validate the log level name.

        Args:
            v: Log level name.

        Returns:
            str: Normalized log level.

        Raises:
            ValueError: If the level is not a standard logging level.
        """
        level = v.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unsupported log_level: {v}")
        return level

    # Convenience properties for environment checks
    @property
    def is_development(self) -> bool:
        """
        Check if running in development environment.

        Returns:
            bool: True if environment is DEVELOPMENT, False otherwise.
        """
        return self.environment == Environment.DEVELOPMENT

    @property
    def is_testing(self) -> bool:
        """
        Check if running in testing environment.

        Returns:
            bool: True if environment is TESTING, False otherwise.
        """
        return self.environment == Environment.TESTING

    @property
    def is_ci(self) -> bool:
        """
        Check if running in CI environment.

        Returns:
            bool: True if environment is CI, False otherwise.
        """
        return self.environment == Environment.CI

    @property
    def is_production(self) -> bool:
        """
        Check if running in production environment.

        Returns:
            bool: True if environment is PRODUCTION, False otherwise.
        """
        return self.environment == Environment.PRODUCTION


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are loaded only once per process.

    Returns:
        Settings: Cached settings instance.
    """
    return Settings()


# Global settings instance (singleton pattern)
settings = get_settings()
