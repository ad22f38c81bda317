"""Expiration and throttle window parsing.

Token type options accept several shapes for durations:

    ttl                       int minutes | timedelta | future datetime
    *_attempts_interval       int minutes | timedelta | future datetime

Anything else is a configuration error naming the token type. Naive
datetimes are interpreted as UTC.
"""

from datetime import UTC, datetime, timedelta
from typing import Any

from action_tokens.core.result import Failure, Result, Success
from action_tokens.domain.enums import PreviousStrategy
from action_tokens.domain.errors import TokenConfigError


def _aware(value: datetime) -> datetime:
    return value.replace(tzinfo=UTC) if value.tzinfo is None else value


def _positive_int(value: Any) -> bool:
    # bool is an int subclass; True must not mean "1 minute"
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def resolve_expiration(
    ttl: Any, token_name: str, *, now: datetime | None = None
) -> Result[datetime, TokenConfigError]:
    """Turn a ttl option into an absolute expiration.

    Args:
        ttl: Positive int minutes, positive timedelta, or future datetime.
        token_name: Token type name (for the error).
        now: Reference time (defaults to current UTC time).

    Returns:
        Success(expires_at) or Failure(TokenConfigError).
    """
    now = now or datetime.now(UTC)
    if _positive_int(ttl):
        return Success(value=now + timedelta(minutes=ttl))
    if isinstance(ttl, timedelta) and ttl > timedelta(0):
        return Success(value=now + ttl)
    if isinstance(ttl, datetime) and _aware(ttl) > now:
        return Success(value=_aware(ttl))
    return Failure(
        error=TokenConfigError(
            message=(
                f"Invalid ttl {ttl!r} for token type '{token_name}': expected "
                "positive minutes, a positive timedelta or a future datetime"
            ),
            token_name=token_name,
        )
    )


def resolve_interval_seconds(
    interval: Any, token_name: str, *, now: datetime | None = None
) -> Result[int, TokenConfigError]:
    """Turn a throttle interval option into a window length in seconds.

    A future datetime means "the window lasts until then".

    Returns:
        Success(seconds >= 1) or Failure(TokenConfigError).
    """
    now = now or datetime.now(UTC)
    delta: timedelta | None = None
    if _positive_int(interval):
        delta = timedelta(minutes=interval)
    elif isinstance(interval, timedelta):
        delta = interval
    elif isinstance(interval, datetime):
        delta = _aware(interval) - now

    if delta is None or delta.total_seconds() < 1:
        return Failure(
            error=TokenConfigError(
                message=(
                    f"Invalid attempts interval {interval!r} for token type "
                    f"'{token_name}': expected positive minutes, a positive "
                    "timedelta or a future datetime"
                ),
                token_name=token_name,
            )
        )
    return Success(value=int(delta.total_seconds()))


def resolve_max_attempts(
    attempts: Any, token_name: str
) -> Result[int, TokenConfigError]:
    """Validate a throttle attempt count (integer >= 1)."""
    if _positive_int(attempts):
        return Success(value=attempts)
    return Failure(
        error=TokenConfigError(
            message=(
                f"Invalid attempts {attempts!r} for token type '{token_name}': "
                "expected an integer of at least 1"
            ),
            token_name=token_name,
        )
    )


def resolve_previous(
    previous: Any, token_name: str
) -> Result[PreviousStrategy, TokenConfigError]:
    """Parse the previous token strategy (case-insensitive name or enum)."""
    if isinstance(previous, PreviousStrategy):
        return Success(value=previous)
    if isinstance(previous, str):
        try:
            return Success(value=PreviousStrategy(previous.lower()))
        except ValueError:
            pass
    return Failure(
        error=TokenConfigError(
            message=(
                f"Unknown previous token strategy {previous!r} for token type "
                f"'{token_name}': expected one of "
                f"{[strategy.value for strategy in PreviousStrategy]}"
            ),
            token_name=token_name,
        )
    )
