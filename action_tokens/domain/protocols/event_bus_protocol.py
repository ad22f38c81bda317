"""Event bus port.

The lifecycle manager publishes TokenCreated after a token is issued (or
reused) and TokenUsed after it is consumed. Subscribers are async callables
and must not be able to break the operation that published.

Usage:
    async def audit_token_use(event: TokenUsed) -> None:
        ...

    get_event_bus().subscribe(TokenUsed, audit_token_use)
"""

from collections.abc import Awaitable, Callable
from typing import Protocol

from action_tokens.domain.events.base_event import DomainEvent

EventHandler = Callable[[DomainEvent], Awaitable[None]]


class EventBusProtocol(Protocol):
    """Publish/subscribe by exact event class.

    Contract:
        - subscriber exceptions are contained (logged, never re-raised)
        - no delivery order between subscribers of one event
        - publishing with no subscribers does nothing
    """

    def subscribe(self, event_type: type[DomainEvent], handler: EventHandler) -> None:
        ...

    async def publish(self, event: DomainEvent) -> None:
        ...
