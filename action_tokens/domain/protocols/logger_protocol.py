"""Structured logger port.

The token lifecycle logs events as a snake_case event name plus keyword
fields (token_name, token_id, owner, requester...). Adapters decide how the
record is rendered.

Levels used by this package:
    - DEBUG: event bus dispatch
    - INFO: generation, reuse, removal, usage outcomes, reaping
    - WARNING: lockouts, owner mismatches, fail-open throttle storage
    - ERROR: exhausted generation budget, failed reap job

Token values are bearer credentials: pass them through
core.redaction.truncate_token before logging.

Usage:
    logger = get_logger().bind(token_name="password.reset")
    logger.info("token_generated", token_id=token.id, token=truncate_token(token.value))
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Port implemented by logging adapters (see ConsoleAdapter)."""

    def debug(self, message: str, /, **context: Any) -> None: ...

    def info(self, message: str, /, **context: Any) -> None: ...

    def warning(self, message: str, /, **context: Any) -> None: ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log a failure.

        Args:
            message: Event name.
            error: Exception to flatten into error_type / error_message.
            **context: Extra fields.
        """
        ...

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None: ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Logger that adds ``context`` to every record; self is left as is."""
        ...

    def with_context(self, **context: Any) -> LoggerProtocol: ...
