"""Integration tests for ConsoleAdapter with real structlog.

Tests cover:
- JSON output and context binding
- Level filtering
- Error flattening (error_type / error_message)
- Human-readable mode

Architecture:
- Real structlog (not mocked), stdout captured per test
- Fresh ConsoleAdapter instances per test (bypass container singleton)
"""

import json
import sys
from io import StringIO
from unittest.mock import patch

import pytest

from action_tokens.infrastructure.logging import ConsoleAdapter


def capture(use_json: bool = True, level: str = "DEBUG", log=None) -> str:
    output = StringIO()
    with patch.object(sys, "stdout", output):
        adapter = ConsoleAdapter(use_json=use_json, level=level)
        log(adapter)
    return output.getvalue()


def json_lines(output: str) -> list[dict]:
    return [json.loads(line) for line in output.strip().splitlines()]


@pytest.mark.integration
class TestConsoleAdapterIntegration:
    def test_json_mode_produces_valid_json(self):
        output = capture(log=lambda logger: logger.info("token_generated", token_id=7))

        (entry,) = json_lines(output)
        assert entry["event"] == "token_generated"
        assert entry["token_id"] == 7
        assert entry["level"] == "info"
        assert "timestamp" in entry

    def test_bound_context_is_included(self):
        def log(logger):
            bound = logger.bind(token_name="password.reset")
            bound.with_context(owner="User:42").warning("token_access_denied")

        (entry,) = json_lines(capture(log=log))

        assert entry["token_name"] == "password.reset"
        assert entry["owner"] == "User:42"
        assert entry["level"] == "warning"

    def test_level_filter(self):
        def log(logger):
            logger.debug("hidden")
            logger.info("hidden too")
            logger.warning("shown")

        entries = json_lines(capture(level="WARNING", log=log))

        assert [entry["event"] for entry in entries] == ["shown"]

    def test_error_is_flattened(self):
        error = ValueError("bad value")

        (entry,) = json_lines(
            capture(log=lambda logger: logger.error("token_reap_failed", error=error))
        )

        assert entry["error_type"] == "ValueError"
        assert entry["error_message"] == "bad value"

    def test_all_log_levels_work(self):
        def log(logger):
            logger.debug("debug message")
            logger.info("info message")
            logger.warning("warning message")
            logger.error("error message")
            logger.critical("critical message")

        output = capture(log=log)

        for message in ("debug", "info", "warning", "error", "critical"):
            assert f"{message} message" in output

    def test_console_mode_is_human_readable(self):
        output = capture(
            use_json=False, log=lambda logger: logger.info("token_used", token_id=7)
        )

        assert "token_used" in output
        assert "token_id" in output
        with pytest.raises(json.JSONDecodeError):
            json.loads(output.strip())
