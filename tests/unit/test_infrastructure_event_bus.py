"""Unit tests for InMemoryEventBus and LoggingEventHandler.

Tests cover:
- Subscription and delivery (exact type match only)
- Fail-open: one failing handler does not affect others or the publisher
- Logging handler output (truncated token values only)
"""

from datetime import UTC, datetime, timedelta
from unittest.mock import AsyncMock

import pytest

from action_tokens.domain.entities import ActionToken
from action_tokens.domain.events import TokenCreated, TokenUsed
from action_tokens.domain.value_objects import OwnerRef
from action_tokens.infrastructure.events import InMemoryEventBus
from action_tokens.infrastructure.events.handlers.logging_event_handler import (
    LoggingEventHandler,
)

TOKEN_VALUE = "a3f9c2d1e8b7a6f5c4d3"


def create_token() -> ActionToken:
    return ActionToken(
        id=7,
        value=TOKEN_VALUE,
        name="password.reset",
        owner=OwnerRef("User", "42"),
        expires_at=datetime.now(UTC) + timedelta(hours=1),
    )


def token_created() -> TokenCreated:
    return TokenCreated(token=create_token(), token_name="password.reset")


@pytest.mark.unit
class TestInMemoryEventBus:
    @pytest.mark.asyncio
    async def test_publish_calls_subscribed_handlers(self, mock_logger):
        # Arrange
        bus = InMemoryEventBus(logger=mock_logger)
        first, second = AsyncMock(), AsyncMock()
        bus.subscribe(TokenCreated, first)
        bus.subscribe(TokenCreated, second)
        event = token_created()

        # Act
        await bus.publish(event)

        # Assert
        first.assert_awaited_once_with(event)
        second.assert_awaited_once_with(event)

    @pytest.mark.asyncio
    async def test_other_event_types_not_delivered(self, mock_logger):
        bus = InMemoryEventBus(logger=mock_logger)
        handler = AsyncMock()
        bus.subscribe(TokenUsed, handler)

        await bus.publish(token_created())

        handler.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_no_handlers_is_noop(self, mock_logger):
        bus = InMemoryEventBus(logger=mock_logger)

        await bus.publish(token_created())

        mock_logger.debug.assert_not_called()

    @pytest.mark.asyncio
    async def test_failing_handler_is_logged_and_others_still_run(self, mock_logger):
        # Arrange
        bus = InMemoryEventBus(logger=mock_logger)
        failing = AsyncMock(side_effect=RuntimeError("boom"))
        failing.__name__ = "failing_handler"
        healthy = AsyncMock()
        bus.subscribe(TokenCreated, failing)
        bus.subscribe(TokenCreated, healthy)

        # Act
        await bus.publish(token_created())

        # Assert
        healthy.assert_awaited_once()
        mock_logger.warning.assert_called_once()
        args, kwargs = mock_logger.warning.call_args
        assert args[0] == "event_handler_failed"
        assert kwargs["handler_name"] == "failing_handler"
        assert kwargs["error_type"] == "RuntimeError"
        assert kwargs["error_message"] == "boom"


@pytest.mark.unit
class TestLoggingEventHandler:
    @pytest.mark.asyncio
    async def test_token_created_logged_with_truncated_value(self, mock_logger):
        handler = LoggingEventHandler(logger=mock_logger)
        event = token_created()

        await handler.handle_token_created(event)

        args, kwargs = mock_logger.info.call_args
        assert args[0] == "token_created"
        assert kwargs["token"] == "a3f9c2d1..."
        assert kwargs["token_id"] == 7
        assert kwargs["owner"] == "User:42"
        assert kwargs["event_id"] == str(event.event_id)
        assert TOKEN_VALUE not in str(kwargs)

    @pytest.mark.asyncio
    async def test_token_used_logged(self, mock_logger):
        handler = LoggingEventHandler(logger=mock_logger)

        await handler.handle_token_used(
            TokenUsed(token=create_token(), token_name="password.reset")
        )

        args, kwargs = mock_logger.info.call_args
        assert args[0] == "token_used"
        assert kwargs["token_name"] == "password.reset"
        assert kwargs["token"] == "a3f9c2d1..."

    def test_events_get_unique_ids(self):
        assert token_created().event_id != token_created().event_id
