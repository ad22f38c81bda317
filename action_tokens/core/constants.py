"""Centralized constants for internal implementation details.

This module contains constants that are internal implementation details,
NOT environment-specific configuration. For environment-specific settings,
use `action_tokens/core/config.py` instead.

Example:
    >>> from action_tokens.core.constants import TOKEN_VALUE_MAX_LENGTH
    >>> len(value) <= TOKEN_VALUE_MAX_LENGTH
"""

# =============================================================================
# Token Values
# =============================================================================

TOKEN_VALUE_MAX_LENGTH: int = 255
"""Longest token string accepted by usage validation (and the column size)."""

TOKEN_NAME_MAX_LENGTH: int = 100
"""Length of the token type name column."""

TOKEN_LOG_PREFIX_LENGTH: int = 8
"""Number of leading token characters that may appear in logs."""

RANDOM_SOURCE_LENGTH: int = 40
"""Random characters fed into the HMAC random hash generator."""


# =============================================================================
# Generation
# =============================================================================

DEFAULT_GENERATION_ATTEMPTS: int = 10
"""Candidate strings tried before giving up on a unique token value."""


# =============================================================================
# Throttling
# =============================================================================

LIMITER_KEY_PREFIX: str = "_tok"
"""Prefix for all throttle counter keys."""

LIMITER_TIMER_SUFFIX: str = "timer"
"""Suffix of the key holding the window close timestamp."""

UNKNOWN_REQUESTER: str = "unknown"
"""Requester identity used when the caller does not supply one."""
