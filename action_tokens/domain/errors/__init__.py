"""Domain errors package.

Usage:
    from action_tokens.domain.errors import TokenError, TokenExpiredError
"""

from action_tokens.domain.errors.rate_limit_error import RateLimitError
from action_tokens.domain.errors.token_error import (
    GenerationExhaustedError,
    InvalidTokenError,
    LockoutError,
    TokenAccessDeniedError,
    TokenAlreadyUsedError,
    TokenConfigError,
    TokenError,
    TokenExpiredError,
    TokenNotFoundError,
)

__all__ = [
    "GenerationExhaustedError",
    "InvalidTokenError",
    "LockoutError",
    "RateLimitError",
    "TokenAccessDeniedError",
    "TokenAlreadyUsedError",
    "TokenConfigError",
    "TokenError",
    "TokenExpiredError",
    "TokenNotFoundError",
]
