"""Throttle counter storage adapters."""

from action_tokens.infrastructure.rate_limit.redis_attempt_storage import (
    RedisAttemptStorage,
)

__all__ = ["RedisAttemptStorage"]
