"""Logging event handler for token lifecycle events.

Log Levels:
    - INFO: TokenCreated, TokenUsed

Structured Fields:
    - event_id: UUID for event correlation
    - occurred_at: ISO 8601 timestamp (UTC)
    - token_name: Token type name
    - token_id: Token primary key
    - owner: "OwnerType:owner_id"
    - token: Truncated token value (never the full value)

Usage:
    >>> handler = LoggingEventHandler(logger=get_logger())
    >>> event_bus.subscribe(TokenCreated, handler.handle_token_created)
    >>> event_bus.subscribe(TokenUsed, handler.handle_token_used)
"""

from action_tokens.core.redaction import truncate_token
from action_tokens.domain.events.token_events import TokenCreated, TokenUsed
from action_tokens.domain.protocols.logger_protocol import LoggerProtocol


class LoggingEventHandler:
    """Event handler for structured logging of token events.

    Attributes:
        _logger: Logger protocol implementation (from container).
    """

    def __init__(self, logger: LoggerProtocol) -> None:
        self._logger = logger

    async def handle_token_created(self, event: TokenCreated) -> None:
        """Log token issuance (INFO level).

        Args:
            event: TokenCreated event.
        """
        self._logger.info(
            "token_created",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            token_name=event.token_name,
            token_id=event.token.id,
            owner=str(event.token.owner),
            token=truncate_token(event.token.value),
            expires_at=event.token.expires_at.isoformat(),
        )

    async def handle_token_used(self, event: TokenUsed) -> None:
        """Log token consumption (INFO level).

        Args:
            event: TokenUsed event.
        """
        self._logger.info(
            "token_used",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            token_name=event.token_name,
            token_id=event.token.id,
            owner=str(event.token.owner),
            token=truncate_token(event.token.value),
        )
