"""Application environment types.

Used by Settings and the container to pick environment-specific adapters
(human-readable console logs in development, JSON logs in testing/CI).
"""

from enum import Enum


class Environment(str, Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"
