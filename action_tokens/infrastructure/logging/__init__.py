"""Logging adapters (structlog)."""

from action_tokens.infrastructure.logging.console_adapter import ConsoleAdapter

__all__ = ["ConsoleAdapter"]
