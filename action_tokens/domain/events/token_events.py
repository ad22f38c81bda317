"""Token lifecycle domain events.

Pattern: one event per completed lifecycle step.
- TokenCreated: token issued (fresh record, or reused record with a
  refreshed expiration)
- TokenUsed: token consumed by a callback

Handlers:
- LoggingEventHandler: both events (structured logging)
"""

from dataclasses import dataclass

from action_tokens.domain.entities.action_token import ActionToken
from action_tokens.domain.events.base_event import DomainEvent


@dataclass(frozen=True, kw_only=True)
class TokenCreated(DomainEvent):
    """Token issued to an owner.

    Emitted after the token is persisted, including the reuse path where an
    existing active token got its expiration extended.

    Attributes:
        token: The issued token.
        token_name: Token type name.
    """

    token: ActionToken
    token_name: str


@dataclass(frozen=True, kw_only=True)
class TokenUsed(DomainEvent):
    """Token consumed.

    Emitted after used_at is recorded. Not emitted when the callback
    declines consumption by returning False.

    Attributes:
        token: The consumed token (used_at set).
        token_name: Token type name.
    """

    token: ActionToken
    token_name: str
