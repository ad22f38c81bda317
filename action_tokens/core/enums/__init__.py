"""Core enums package.

Usage:
    from action_tokens.core.enums import ErrorCode, Environment
"""

from action_tokens.core.enums.environment import Environment
from action_tokens.core.enums.error_code import ErrorCode

__all__ = ["ErrorCode", "Environment"]
