"""Token type capability protocols.

A token type describes how tokens of one name are issued and consumed.
Capabilities are expressed structurally, so plain classes can act as token
types without registering or inheriting anything:

    class InviteToken:
        name = "team.invite"
        ttl = timedelta(days=7)
        previous = "keep"

        def generate(self) -> str:
            return secrets.token_urlsafe(16)

Throttling capabilities:
    - A type implementing GenerationLimitedProtocol has generation throttling
      turned on, unless it also exposes ``generation_throttling = False``.
    - Same for UsageLimitedProtocol / ``usage_throttling``.
    - Intervals accept positive int minutes, timedelta, or a future datetime.
"""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class TokenTypeProtocol(Protocol):
    """Core token type contract.

    Attributes:
        name: Token type name stored on every token.
        ttl: int minutes, timedelta, or future datetime.
        previous: Previous token strategy (remove, reuse, keep).
    """

    name: str
    ttl: Any
    previous: Any

    def generate(self) -> str:
        """Return a candidate token value."""
        ...


@runtime_checkable
class GenerationLimitedProtocol(Protocol):
    """Token type whose generation is throttled per requester."""

    generation_attempts: int
    generation_attempts_interval: Any

    def generation_limiter_key(self, requester: str) -> str:
        """Throttle key for a requester (e.g. client IP)."""
        ...


@runtime_checkable
class UsageLimitedProtocol(Protocol):
    """Token type whose usage is throttled per requester."""

    usage_attempts: int
    usage_attempts_interval: Any

    def usage_limiter_key(self, requester: str) -> str:
        """Throttle key for a requester (e.g. client IP)."""
        ...
