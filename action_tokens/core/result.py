"""Success / Failure outcome values.

Expected failures of token operations (lockouts, expired tokens, bad type
configuration) come back as ``Failure(error=...)`` rather than exceptions.

Usage:
    match await manager.use(value, "password.reset", reset_password):
        case Success(value=user):
            ...
        case Failure(error=TokenExpiredError(token=token)):
            notify_expired(token.expires_at)
        case Failure(error=error):
            log_failure(error.code)
"""

from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Operation completed; ``value`` holds its output."""

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Operation did not complete; ``error`` says why."""

    error: E


Result: TypeAlias = Success[T] | Failure[E]
