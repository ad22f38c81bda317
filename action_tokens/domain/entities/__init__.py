"""Domain entities package.

Usage:
    from action_tokens.domain.entities import ActionToken
"""

from action_tokens.domain.entities.action_token import ActionToken

__all__ = ["ActionToken"]
