"""Attempt storage protocol (port) for throttle counters.

A keyed counter with a fixed window: the first hit opens a window of
``decay_seconds``; later hits inside the window increment the counter; once
the window closes the counter is considered zero again.

Fail-open policy:
    Implementations return Failure(RateLimitError) on storage errors. The
    limiter treats such failures as "allowed" and logs a warning.
"""

from typing import Protocol

from action_tokens.core.result import Result
from action_tokens.domain.errors import RateLimitError


class AttemptStorageProtocol(Protocol):
    """Protocol for fixed-window attempt counters."""

    async def attempts(self, key: str) -> Result[int, RateLimitError]:
        """Current hit count inside the open window (0 if none is open)."""
        ...

    async def hit(self, key: str, decay_seconds: int) -> Result[int, RateLimitError]:
        """Increment the counter, opening a window if none is open.

        Args:
            key: Counter key.
            decay_seconds: Window length used when a new window is opened.

        Returns:
            Hit count after incrementing.
        """
        ...

    async def available_in(self, key: str) -> Result[int, RateLimitError]:
        """Seconds until the open window closes (0 if none is open)."""
        ...

    async def reset(self, key: str) -> Result[None, RateLimitError]:
        """Drop the counter and its window."""
        ...
