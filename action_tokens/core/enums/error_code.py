"""Domain-level error codes (machine-readable).

Error codes follow ENTITY_ACTION_REASON naming convention.
Used with Result types for railway-oriented programming.

Categories:
- Token configuration errors (TOKEN_CONFIG_*)
- Token usage errors (TOKEN_NOT_FOUND, TOKEN_EXPIRED, ...)
- Throttling (TOKEN_LOCKOUT)
- Generation (TOKEN_GENERATION_EXHAUSTED)
- Rate limit infrastructure errors (RATE_LIMIT_*)
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable).

    Error codes follow ENTITY_ACTION_REASON naming convention.
    """

    # Configuration errors
    TOKEN_CONFIG_INVALID = "token_config_invalid"

    # Throttling
    TOKEN_LOCKOUT = "token_lockout"

    # Usage errors
    TOKEN_INVALID = "token_invalid"
    TOKEN_NOT_FOUND = "token_not_found"
    TOKEN_EXPIRED = "token_expired"
    TOKEN_ALREADY_USED = "token_already_used"
    TOKEN_ACCESS_DENIED = "token_access_denied"

    # Generation errors
    TOKEN_GENERATION_EXHAUSTED = "token_generation_exhausted"

    # Rate limit errors
    RATE_LIMIT_CHECK_FAILED = "rate_limit_check_failed"
    RATE_LIMIT_RESET_FAILED = "rate_limit_reset_failed"
