"""
Environment-driven settings for the token service.

Every field maps to an upper-case environment variable (SECRET_KEY,
REDIS_URL, TOKEN_DEFAULT_TTL...). The token_default_* fields form the option
mapping each token type starts from; TOKEN_DEFINITIONS (JSON) defines types
at startup.

Usage:
    settings = get_settings()
    registry = TokenTypeRegistry(defaults=settings.token_defaults())
"""

from functools import lru_cache
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from action_tokens.core.constants import DEFAULT_GENERATION_ATTEMPTS
from action_tokens.core.enums import Environment

_PREVIOUS_STRATEGIES = {"remove", "reuse", "keep"}


class Settings(BaseSettings):
    """
    Flat settings model.

    Environment variables win over the defaults below; SECRET_KEY has no
    default and must be provided.
    """

    # Runtime
    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Deployment environment; selects console or JSON log rendering",
    )
    log_level: str = Field(
        default="INFO",
        description="Minimum log level name",
    )

    # Token store
    database_url: str = Field(
        default="sqlite+aiosqlite:///./action_tokens.db",
        description="Async SQLAlchemy URL of the token store",
    )
    db_echo: bool = Field(
        default=False,
        description="Log all SQL queries (useful for debugging)",
    )

    # Cache configuration (Redis) - throttle counters
    redis_url: str = Field(
        default="redis://localhost:6379/0",
        description="Redis connection URL for throttle counters",
    )

    # Generator secret
    secret_key: str = Field(
        description="HMAC key for the random hash token generator (must be kept secure)",
    )

    # Generation
    token_generation_attempts: int = Field(
        default=DEFAULT_GENERATION_ATTEMPTS,
        description="Candidate strings tried before a unique token value is given up on",
    )

    # Token type defaults (overridden per type by token_definitions / define())
    token_default_ttl: int = Field(
        default=43200,
        description="Token lifetime in minutes (default: 30 days)",
    )
    token_default_previous: str = Field(
        default="remove",
        description="Previous token strategy: remove, reuse or keep",
    )
    token_default_generation_throttling: bool = Field(default=True)
    token_default_generation_attempts: int = Field(
        default=3,
        description="Generation attempts per requester within the interval",
    )
    token_default_generation_attempts_interval: int = Field(
        default=10,
        description="Generation throttle window in minutes",
    )
    token_default_usage_throttling: bool = Field(default=True)
    token_default_usage_attempts: int = Field(
        default=5,
        description="Usage attempts per requester within the interval",
    )
    token_default_usage_attempts_interval: int = Field(
        default=10,
        description="Usage throttle window in minutes",
    )
    token_default_generator: str = Field(
        default="random_hash",
        description="Registered generator name (random_hash, short_code)",
    )
    token_definitions: dict[str, dict[str, Any]] = Field(
        default_factory=dict,
        description='Token types defined at startup, JSON: {"password.reset": {"ttl": 60}}',
    )

    model_config = SettingsConfigDict(
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("token_generation_attempts")
    @classmethod
    def validate_generation_attempts(cls, v: int) -> int:
        """
        Validate the unique value budget.

        Args:
            v: Number of generation attempts.

        Returns:
            int: Validated attempts.

        Raises:
            ValueError: If attempts are below 1.
        """
        if v < 1:
            raise ValueError("token_generation_attempts must be at least 1")
        return v

    @field_validator("token_default_previous")
    @classmethod
    def validate_previous(cls, v: str) -> str:
        """
        Validate the default previous token strategy.

        Args:
            v: Strategy name.

        Returns:
            str: Lower-cased strategy name.

        Raises:
            ValueError: If the strategy is unknown.
        """
        v = v.lower()
        if v not in _PREVIOUS_STRATEGIES:
            raise ValueError(
                f"token_default_previous must be one of {sorted(_PREVIOUS_STRATEGIES)}"
            )
        return v

    def token_defaults(self) -> dict[str, Any]:
        """
        Default options for every token type.

        Returns:
            dict[str, Any]: Option name to default value.
        """
        return {
            "ttl": self.token_default_ttl,
            "previous": self.token_default_previous,
            "generation_throttling": self.token_default_generation_throttling,
            "generation_attempts": self.token_default_generation_attempts,
            "generation_attempts_interval": self.token_default_generation_attempts_interval,
            "usage_throttling": self.token_default_usage_throttling,
            "usage_attempts": self.token_default_usage_attempts,
            "usage_attempts_interval": self.token_default_usage_attempts_interval,
            "generator": self.token_default_generator,
        }

    # Environment shortcuts
    @property
    def is_development(self) -> bool:
        """True for the development environment."""
        return self.environment == Environment.DEVELOPMENT

    @property
    def is_testing(self) -> bool:
        """True for the testing environment."""
        return self.environment == Environment.TESTING

    @property
    def is_production(self) -> bool:
        """True for the production environment."""
        return self.environment == Environment.PRODUCTION


@lru_cache
def get_settings() -> Settings:
    """
    Process-wide settings, read from the environment on first call.

    Tests call get_settings.cache_clear() after changing the environment.
    """
    return Settings()  # type: ignore[call-arg]  # Pydantic Settings loads from env
