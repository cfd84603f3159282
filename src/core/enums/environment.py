"""Application environment types.

Defines the runtime environments for the residency service.
Used by Settings to pick log rendering and debug behavior.

Environments:
- DEVELOPMENT: Local development with hot reload, colored console logs
- TESTING: Automated test execution, JSON logs
- CI: Continuous integration environment, JSON logs
- PRODUCTION: Production deployment, JSON logs
"""

from enum import Enum


class Environment(str, Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"
