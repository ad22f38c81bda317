"""Process-local event bus.

Delivers TokenCreated / TokenUsed to subscribers registered at startup
(core.container.events). Subscribers run concurrently; a subscriber that
raises is logged and skipped, and the token operation that published the
event is unaffected.

Usage:
    bus = InMemoryEventBus(logger=get_logger())
    bus.subscribe(TokenUsed, audit_token_use)
    await bus.publish(TokenUsed(token=token, token_name=token.name))
"""

import asyncio
from collections import defaultdict

from action_tokens.domain.events.base_event import DomainEvent
from action_tokens.domain.protocols.event_bus_protocol import EventHandler
from action_tokens.domain.protocols.logger_protocol import LoggerProtocol


def _handler_name(handler: EventHandler) -> str:
    return getattr(handler, "__qualname__", None) or getattr(
        handler, "__name__", repr(handler)
    )


class InMemoryEventBus:
    """EventBusProtocol adapter keeping subscriptions in a dict.

    Single event loop only; subscriptions are not guarded by locks.
    """

    def __init__(self, logger: LoggerProtocol) -> None:
        self._subscribers: dict[type[DomainEvent], list[EventHandler]] = defaultdict(
            list
        )
        self._logger = logger

    def subscribe(self, event_type: type[DomainEvent], handler: EventHandler) -> None:
        """Call ``handler`` for every published event of exactly ``event_type``.

        Subclasses of ``event_type`` are not delivered. Subscribing the same
        handler twice delivers twice.
        """
        self._subscribers[event_type].append(handler)

    async def publish(self, event: DomainEvent) -> None:
        """Deliver ``event``; never raises on subscriber failure."""
        subscribers = list(self._subscribers.get(type(event), ()))
        if not subscribers:
            return

        kind = type(event).__name__
        self._logger.debug(
            "event_publishing",
            event_type=kind,
            event_id=str(event.event_id),
            handler_count=len(subscribers),
        )

        outcomes = await asyncio.gather(
            *(subscriber(event) for subscriber in subscribers),
            return_exceptions=True,
        )
        for subscriber, outcome in zip(subscribers, outcomes, strict=True):
            if not isinstance(outcome, Exception):
                continue
            self._logger.warning(
                "event_handler_failed",
                event_type=kind,
                event_id=str(event.event_id),
                handler_name=_handler_name(subscriber),
                error_type=type(outcome).__name__,
                error_message=str(outcome),
            )
