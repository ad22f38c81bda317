"""Fixed-window throttle limiter.

Counts attempts per key in an AttemptStorageProtocol and reports lockouts
as Failure(LockoutError). Storage failures fail open: the attempt is allowed
and a warning is logged.

Usage:
    limiter = ThrottleLimiter(storage=RedisAttemptStorage(redis_client=redis), logger=logger)

    match await limiter.attempt("_tok:gen:password.reset:10.0.0.1", 3, 600):
        case Failure(error=LockoutError(unlock_at=unlock_at)):
            ...
"""

from collections.abc import Awaitable, Callable
from datetime import UTC, datetime, timedelta
from typing import Any

from action_tokens.core.result import Failure, Result, Success
from action_tokens.domain.errors import LockoutError
from action_tokens.domain.protocols import AttemptStorageProtocol, LoggerProtocol


class ThrottleLimiter:
    """Rate limiter over (key, max_attempts, window) triples.

    Implements RateLimiterProtocol.
    """

    def __init__(self, storage: AttemptStorageProtocol, logger: LoggerProtocol) -> None:
        self._storage = storage
        self._logger = logger

    async def too_many_attempts(self, key: str, max_attempts: int) -> bool:
        """Whether the counter already reached ``max_attempts`` in the open window."""
        match await self._storage.attempts(key):
            case Success(value=count):
                return count >= max_attempts
            case Failure(error=error):
                self._logger.warning(
                    "throttle_storage_failed",
                    key=key,
                    operation="attempts",
                    error_code=error.code.value,
                    error_message=error.message,
                )
        return False

    async def attempt(
        self, key: str, max_attempts: int, window_seconds: int
    ) -> Result[None, LockoutError]:
        """Count one attempt unless the key is locked out.

        Args:
            key: Throttle key.
            max_attempts: Attempts allowed within the window.
            window_seconds: Window length used when a new window opens.

        Returns:
            Success(None), or Failure(LockoutError) without counting.
        """
        if await self.too_many_attempts(key, max_attempts):
            unlock_at = datetime.now(UTC) + timedelta(
                seconds=await self._available_in(key, window_seconds)
            )
            self._logger.warning(
                "throttle_lockout",
                key=key,
                max_attempts=max_attempts,
                unlock_at=unlock_at.isoformat(),
            )
            return Failure(
                error=LockoutError(
                    message=f"Too many attempts. Retry after {unlock_at.isoformat()}.",
                    unlock_at=unlock_at,
                )
            )

        match await self._storage.hit(key, window_seconds):
            case Failure(error=error):
                self._logger.warning(
                    "throttle_storage_failed",
                    key=key,
                    operation="hit",
                    error_code=error.code.value,
                    error_message=error.message,
                )
        return Success(value=None)

    async def limit(
        self,
        key: str,
        max_attempts: int,
        window_seconds: int,
        callback: Callable[[], Awaitable[Result[Any, Any]]],
    ) -> Result[Any, Any]:
        """Run ``callback`` as one throttled attempt.

        Clears the counter when the callback returns Success. A Failure
        result or a raised exception leaves the attempt counted.
        """
        match await self.attempt(key, max_attempts, window_seconds):
            case Failure() as lockout:
                return lockout

        result = await callback()
        if isinstance(result, Success):
            await self.clear(key)
        return result

    async def clear(self, key: str) -> None:
        match await self._storage.reset(key):
            case Failure(error=error):
                self._logger.warning(
                    "throttle_storage_failed",
                    key=key,
                    operation="reset",
                    error_code=error.code.value,
                    error_message=error.message,
                )

    async def _available_in(self, key: str, fallback: int) -> int:
        match await self._storage.available_in(key):
            case Success(value=seconds):
                return seconds
        return fallback
