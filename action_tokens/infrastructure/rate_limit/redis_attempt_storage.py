"""Redis-backed fixed-window attempt counters.

Key layout (per throttle key):
    {key}        hit counter (integer)
    {key}:timer  unix timestamp at which the window closes

The window close time is checked explicitly against the clock; Redis TTLs
only clean up keys after the window is over. Recording a hit (open a window
or increment) runs as one Lua script (EVALSHA), so concurrent hits never
lose increments.

Error policy:
    Redis errors and malformed values are returned as Failure(RateLimitError).
    The limiter decides what to do with them (it fails open).
"""

from __future__ import annotations

import asyncio
import math
from dataclasses import dataclass
from time import time
from typing import Any

from redis.exceptions import NoScriptError, RedisError

from action_tokens.core.constants import LIMITER_TIMER_SUFFIX
from action_tokens.core.enums import ErrorCode
from action_tokens.core.result import Failure, Result, Success
from action_tokens.domain.errors import RateLimitError

# KEYS: counter, timer. ARGV: now, window seconds. Returns the hit count.
_HIT_SCRIPT = """
local now = tonumber(ARGV[1])
local closes_at = tonumber(redis.call('GET', KEYS[2]))
if closes_at == nil or closes_at <= now then
    redis.call('SET', KEYS[2], tostring(now + tonumber(ARGV[2])), 'EX', ARGV[2])
    redis.call('SET', KEYS[1], 1, 'EX', ARGV[2])
    return 1
end
return redis.call('INCR', KEYS[1])
"""


@dataclass(slots=True)
class _ScriptRefs:
    hit_sha: str | None = None


def _decode(value: Any) -> str | None:
    if value is None:
        return None
    return value.decode("utf-8") if isinstance(value, bytes) else str(value)


class RedisAttemptStorage:
    """Redis implementation of AttemptStorageProtocol.

    Args:
        redis_client: An async Redis client (redis.asyncio.Redis compatible).

    Note: Does NOT inherit from AttemptStorageProtocol (structural typing).
    """

    def __init__(self, *, redis_client: Any) -> None:
        self.redis = redis_client
        self._scripts = _ScriptRefs()
        self._script_lock = asyncio.Lock()

    async def attempts(
        self, key: str, *, now_ts: float | None = None
    ) -> Result[int, RateLimitError]:
        """Hits recorded inside the open window.

        Args:
            key: Counter key.
            now_ts: Override current timestamp in seconds (for testing).

        Returns:
            Result with the hit count (0 when no window is open).
        """
        now = now_ts if now_ts is not None else time()
        try:
            closes_at = await self._window_closes_at(key)
            if closes_at is None or closes_at <= now:
                return Success(value=0)
            count = _decode(await self.redis.get(key))
            return Success(value=int(count) if count is not None else 0)
        except (RedisError, ValueError) as exc:
            return Failure(error=self._error("read attempts", key, exc))

    async def hit(
        self, key: str, decay_seconds: int, *, now_ts: float | None = None
    ) -> Result[int, RateLimitError]:
        """Increment the counter, opening a new window when none is open.

        Args:
            key: Counter key.
            decay_seconds: Window length for a newly opened window.
            now_ts: Override current timestamp in seconds (for testing).

        Returns:
            Result with the hit count after incrementing.
        """
        now = now_ts if now_ts is not None else time()
        decay_seconds = max(1, int(decay_seconds))
        try:
            count = await self._eval_hit(key, decay_seconds, now)
            return Success(value=int(count))
        except (RedisError, ValueError) as exc:
            return Failure(error=self._error("record attempt", key, exc))

    async def available_in(
        self, key: str, *, now_ts: float | None = None
    ) -> Result[int, RateLimitError]:
        """Seconds until the open window closes (rounded up, 0 when closed).

        Args:
            key: Counter key.
            now_ts: Override current timestamp in seconds (for testing).
        """
        now = now_ts if now_ts is not None else time()
        try:
            closes_at = await self._window_closes_at(key)
            if closes_at is None:
                return Success(value=0)
            return Success(value=max(0, math.ceil(closes_at - now)))
        except (RedisError, ValueError) as exc:
            return Failure(error=self._error("read window", key, exc))

    async def reset(self, key: str) -> Result[None, RateLimitError]:
        """Delete the counter and its window timer.

        Unlike reads, reset reports real errors to callers.
        """
        try:
            await self.redis.delete(key, self._timer_key(key))
            return Success(value=None)
        except RedisError as exc:
            return Failure(
                error=RateLimitError(
                    code=ErrorCode.RATE_LIMIT_RESET_FAILED,
                    message=f"Failed to reset attempts for '{key}': {exc}",
                    details={"key": key},
                )
            )

    # ---------------------------------------------------------------------
    # Internal helpers
    # ---------------------------------------------------------------------
    @staticmethod
    def _timer_key(key: str) -> str:
        return f"{key}:{LIMITER_TIMER_SUFFIX}"

    async def _eval_hit(self, key: str, decay_seconds: int, now: float) -> Any:
        keys_and_args = (key, self._timer_key(key), now, decay_seconds)
        sha = await self._ensure_hit_script()
        try:
            return await self.redis.evalsha(sha, 2, *keys_and_args)
        except NoScriptError:
            # Script cache was flushed (server restart, SCRIPT FLUSH)
            self._scripts.hit_sha = None
            sha = await self._ensure_hit_script()
            return await self.redis.evalsha(sha, 2, *keys_and_args)

    async def _ensure_hit_script(self) -> str:
        """Load the hit script once and cache its SHA."""
        if self._scripts.hit_sha:
            return self._scripts.hit_sha
        async with self._script_lock:
            if self._scripts.hit_sha:
                return self._scripts.hit_sha
            sha = _decode(await self.redis.script_load(_HIT_SCRIPT))
            self._scripts.hit_sha = sha
            return sha  # type: ignore[return-value]

    async def _window_closes_at(self, key: str) -> float | None:
        raw = _decode(await self.redis.get(self._timer_key(key)))
        return float(raw) if raw is not None else None

    @staticmethod
    def _error(action: str, key: str, exc: Exception) -> RateLimitError:
        return RateLimitError(
            code=ErrorCode.RATE_LIMIT_CHECK_FAILED,
            message=f"Failed to {action} for '{key}': {exc}",
            details={"key": key, "error_type": type(exc).__name__},
        )
