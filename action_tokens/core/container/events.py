"""Event bus dependency factory.

Application-scoped singleton for domain event publishing. Handler
subscriptions are wired here at startup.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from action_tokens.domain.protocols import EventBusProtocol


@lru_cache()
def get_event_bus() -> "EventBusProtocol":
    """Get event bus singleton (app-scoped).

    Subscriptions:
        - TokenCreated -> LoggingEventHandler.handle_token_created
        - TokenUsed -> LoggingEventHandler.handle_token_used

    Returns:
        Event bus implementing EventBusProtocol.
    """
    from action_tokens.core.container.infrastructure import get_logger
    from action_tokens.domain.events import TokenCreated, TokenUsed
    from action_tokens.infrastructure.events.handlers.logging_event_handler import (
        LoggingEventHandler,
    )
    from action_tokens.infrastructure.events.in_memory_event_bus import (
        InMemoryEventBus,
    )

    event_bus = InMemoryEventBus(logger=get_logger())
    logging_handler = LoggingEventHandler(logger=get_logger())
    event_bus.subscribe(TokenCreated, logging_handler.handle_token_created)  # type: ignore[arg-type]
    event_bus.subscribe(TokenUsed, logging_handler.handle_token_used)  # type: ignore[arg-type]
    return event_bus
