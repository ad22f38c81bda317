"""Core errors package.

Usage:
    from action_tokens.core.errors import DomainError
"""

from action_tokens.core.errors.domain_error import DomainError

__all__ = ["DomainError"]
