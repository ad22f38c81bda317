"""Rate limit error types.

Used when throttle counter storage fails (Redis errors, malformed counters).

Usage:
    from action_tokens.domain.errors import RateLimitError
    from action_tokens.core.enums import ErrorCode
    from action_tokens.core.result import Failure

    return Failure(RateLimitError(
        code=ErrorCode.RATE_LIMIT_CHECK_FAILED,
        message="Failed to read attempts: Redis connection lost"
    ))
"""

from dataclasses import dataclass

from action_tokens.core.errors import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class RateLimitError(DomainError):
    """Throttle storage failure.

    Note that a lockout is NOT this error - it is a LockoutError returned
    by the limiter. This error class is for actual storage failures, which
    the limiter handles fail-open.
    """

    pass  # Inherits all fields from DomainError
