"""structlog adapter writing one record per line to stdout.

Rendering:
    use_json=False  colored key=value lines (development)
    use_json=True   JSON objects (testing, ci, production; log shippers)

ConsoleAdapter satisfies LoggerProtocol structurally; it does not subclass it.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog


def _processors(use_json: bool) -> list[structlog.types.Processor]:
    renderer: structlog.types.Processor = (
        structlog.processors.JSONRenderer()
        if use_json
        else structlog.dev.ConsoleRenderer(colors=True)
    )
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        renderer,
    ]


def _level_number(level: str) -> int:
    return logging.getLevelNamesMapping().get(level.upper(), logging.INFO)


class ConsoleAdapter:
    """Structured logger for the token lifecycle.

    Args:
        use_json: Render JSON instead of console lines.
        level: Minimum level name; unknown names fall back to INFO.
    """

    def __init__(self, *, use_json: bool = False, level: str = "INFO") -> None:
        # stdout is resolved now so a redirected stream is honored
        structlog.configure(
            processors=_processors(use_json),
            wrapper_class=structlog.make_filtering_bound_logger(_level_number(level)),
            context_class=dict,
            logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
            cache_logger_on_first_use=False,
        )
        self._logger = structlog.get_logger("action_tokens")

    @classmethod
    def _wrap(cls, bound: Any) -> ConsoleAdapter:
        adapter = cls.__new__(cls)
        adapter._logger = bound
        return adapter

    def debug(self, message: str, /, **context: Any) -> None:
        self._logger.debug(message, **context)

    def info(self, message: str, /, **context: Any) -> None:
        self._logger.info(message, **context)

    def warning(self, message: str, /, **context: Any) -> None:
        self._logger.warning(message, **context)

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        self._logger.error(message, **_with_error(context, error))

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        self._logger.critical(message, **_with_error(context, error))

    def bind(self, **context: Any) -> ConsoleAdapter:
        """Adapter whose records all carry ``context``."""
        return self._wrap(self._logger.bind(**context))

    def with_context(self, **context: Any) -> ConsoleAdapter:
        return self.bind(**context)


def _with_error(context: dict[str, Any], error: Exception | None) -> dict[str, Any]:
    """Flatten an exception into error_type / error_message fields."""
    if error is not None:
        context["error_type"] = type(error).__name__
        context["error_message"] = str(error)
    return context
