"""Rate limiter protocol (port).

Throttles an operation over an opaque (key, max_attempts, window) triple.
The token lifecycle manager depends on this port, never on storage.

Usage:
    match await limiter.attempt(key, 3, 600):
        case Failure(error=LockoutError(unlock_at=unlock_at)):
            ...
"""

from collections.abc import Awaitable, Callable
from typing import Any, Protocol

from action_tokens.core.result import Result
from action_tokens.domain.errors import LockoutError


class RateLimiterProtocol(Protocol):
    """Protocol for attempt throttling."""

    async def attempt(
        self, key: str, max_attempts: int, window_seconds: int
    ) -> Result[None, LockoutError]:
        """Count one attempt, or report a lockout without counting.

        Args:
            key: Throttle key.
            max_attempts: Attempts allowed within the window (>= 1).
            window_seconds: Window length in seconds.

        Returns:
            Success(None) if allowed, Failure(LockoutError) otherwise.
        """
        ...

    async def limit(
        self,
        key: str,
        max_attempts: int,
        window_seconds: int,
        callback: Callable[[], Awaitable[Result[Any, Any]]],
    ) -> Result[Any, Any]:
        """Run ``callback`` under throttling.

        The counter is cleared when the callback returns Success. It stays
        incremented when the callback returns Failure or raises.

        Returns:
            Failure(LockoutError) if locked out, else the callback's result.
        """
        ...

    async def clear(self, key: str) -> None:
        """Reset the counter for ``key``."""
        ...
