"""Domain enums package.

Usage:
    from action_tokens.domain.enums import PreviousStrategy
"""

from action_tokens.domain.enums.previous_strategy import PreviousStrategy

__all__ = ["PreviousStrategy"]
