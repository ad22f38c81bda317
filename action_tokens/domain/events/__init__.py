"""Domain events package.

Usage:
    from action_tokens.domain.events import TokenCreated, TokenUsed
"""

from action_tokens.domain.events.base_event import DomainEvent
from action_tokens.domain.events.token_events import TokenCreated, TokenUsed

__all__ = ["DomainEvent", "TokenCreated", "TokenUsed"]
