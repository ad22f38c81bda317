"""Token lifecycle error types.

Closed set of error variants returned (never raised) by the lifecycle
manager. Each variant carries the payload its caller needs:

    TokenConfigError          token_name
    LockoutError              unlock_at
    InvalidTokenError         -
    TokenNotFoundError        -
    TokenExpiredError         token
    TokenAlreadyUsedError     token
    TokenAccessDeniedError    expected_owner
    GenerationExhaustedError  token_name

Usage:
    match await manager.use(value, "password.reset", callback):
        case Failure(error=LockoutError(unlock_at=unlock_at)):
            retry_after = unlock_at - datetime.now(UTC)
        case Failure(error=TokenExpiredError(token=token)):
            ...
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from action_tokens.core.enums import ErrorCode
from action_tokens.core.errors import DomainError
from action_tokens.domain.entities.action_token import ActionToken


@dataclass(frozen=True, slots=True, kw_only=True)
class TokenError(DomainError):
    """Base class for all token lifecycle errors."""

    pass


@dataclass(frozen=True, slots=True, kw_only=True)
class TokenConfigError(TokenError):
    """Token type misconfiguration (unknown name, bad ttl, strategy, etc.).

    Attributes:
        token_name: Offending token type name (None if unknown at that point).
    """

    code: ErrorCode = ErrorCode.TOKEN_CONFIG_INVALID
    token_name: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class LockoutError(TokenError):
    """Too many generation or usage attempts within the throttle window.

    Attributes:
        unlock_at: When the window closes and attempts are accepted again.
    """

    code: ErrorCode = ErrorCode.TOKEN_LOCKOUT
    message: str = "Too many attempts. Please wait before retrying."
    unlock_at: datetime


@dataclass(frozen=True, slots=True, kw_only=True)
class InvalidTokenError(TokenError):
    """Empty, non-string or oversized token value supplied."""

    code: ErrorCode = ErrorCode.TOKEN_INVALID
    message: str = "Token is not found."


@dataclass(frozen=True, slots=True, kw_only=True)
class TokenNotFoundError(TokenError):
    """No live token matches the given value and name."""

    code: ErrorCode = ErrorCode.TOKEN_NOT_FOUND
    message: str = "Token is not found."


@dataclass(frozen=True, slots=True, kw_only=True)
class TokenExpiredError(TokenError):
    """Matched token's expiration has passed.

    Attributes:
        token: The expired token.
    """

    code: ErrorCode = ErrorCode.TOKEN_EXPIRED
    message: str = "Token is expired."
    token: ActionToken


@dataclass(frozen=True, slots=True, kw_only=True)
class TokenAlreadyUsedError(TokenError):
    """Matched token was already consumed.

    Attributes:
        token: The used token.
    """

    code: ErrorCode = ErrorCode.TOKEN_ALREADY_USED
    message: str = "Token is already used."
    token: ActionToken


@dataclass(frozen=True, slots=True, kw_only=True)
class TokenAccessDeniedError(TokenError):
    """Matched token belongs to a different owner than the expected one.

    Attributes:
        expected_owner: The owner supplied by the caller.
    """

    code: ErrorCode = ErrorCode.TOKEN_ACCESS_DENIED
    message: str = "Token does not belong to the given owner."
    expected_owner: Any


@dataclass(frozen=True, slots=True, kw_only=True)
class GenerationExhaustedError(TokenError):
    """No unique token value found within the attempt budget.

    Attributes:
        token_name: Token type that could not be generated.
    """

    code: ErrorCode = ErrorCode.TOKEN_GENERATION_EXHAUSTED
    token_name: str
