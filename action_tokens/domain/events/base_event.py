"""Domain event base.

Events describe completed token lifecycle steps (past tense: TokenCreated,
TokenUsed) and are published only after the store write they describe.
Subclasses are frozen keyword-only dataclasses:

    @dataclass(frozen=True, kw_only=True, slots=True)
    class TokenUsed(DomainEvent):
        token: ActionToken
        token_name: str
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID

from uuid_extensions import uuid7


@dataclass(frozen=True, kw_only=True, slots=True)
class DomainEvent:
    """Common event metadata.

    Attributes:
        event_id: UUID v7, so ids sort by creation time.
        occurred_at: Creation time (UTC).
    """

    event_id: UUID = field(default_factory=uuid7)
    occurred_at: datetime = field(default_factory=lambda: datetime.now(UTC))
