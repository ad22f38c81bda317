"""Application services."""

from action_tokens.application.services.throttle_limiter import ThrottleLimiter
from action_tokens.application.services.token_lifecycle_manager import (
    TokenLifecycleManager,
)

__all__ = ["ThrottleLimiter", "TokenLifecycleManager"]
