"""Process-wide infrastructure singletons.

Each factory is lru_cached; tests reset them with ``factory.cache_clear()``.
Imports of adapters happen inside the factories so importing the container
stays cheap.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from action_tokens.core.config import get_settings
from action_tokens.core.enums import Environment

if TYPE_CHECKING:
    from redis.asyncio import Redis

    from action_tokens.domain.protocols import (
        AttemptStorageProtocol,
        LoggerProtocol,
        RateLimiterProtocol,
    )
    from action_tokens.infrastructure.persistence.database import Database


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Shared ConsoleAdapter: console lines in development, JSON elsewhere."""
    from action_tokens.infrastructure.logging.console_adapter import ConsoleAdapter

    settings = get_settings()
    use_json = settings.environment != Environment.DEVELOPMENT
    return ConsoleAdapter(use_json=use_json, level=settings.log_level)


@lru_cache()
def get_database() -> "Database":
    """Token store engine for DATABASE_URL."""
    from action_tokens.infrastructure.persistence.database import Database

    settings = get_settings()
    return Database(database_url=settings.database_url, echo=settings.db_echo)


@lru_cache()
def get_redis() -> "Redis":
    """Get Redis client singleton (app-scoped, pooled connections)."""
    from redis.asyncio import ConnectionPool, Redis

    pool = ConnectionPool.from_url(
        get_settings().redis_url,
        max_connections=20,
        socket_connect_timeout=5,
        socket_timeout=5,
        retry_on_timeout=True,
    )
    return Redis(connection_pool=pool)


@lru_cache()
def get_attempt_storage() -> "AttemptStorageProtocol":
    """Get throttle counter storage singleton (Redis)."""
    from action_tokens.infrastructure.rate_limit.redis_attempt_storage import (
        RedisAttemptStorage,
    )

    return RedisAttemptStorage(redis_client=get_redis())


@lru_cache()
def get_rate_limiter() -> "RateLimiterProtocol":
    """Get throttle limiter singleton.

    Fail-open: Redis outages allow attempts and log warnings.
    """
    from action_tokens.application.services.throttle_limiter import ThrottleLimiter

    return ThrottleLimiter(storage=get_attempt_storage(), logger=get_logger())
