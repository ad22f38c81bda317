"""Unit tests for container factories.

Tests cover:
- Logger adapter configuration per environment
- Singleton pattern (same instance returned)
- Event bus subscriptions
- Registry seeding from settings
- Token manager wiring

Architecture:
- Settings patched per test, lru caches cleared around each test
"""

from unittest.mock import MagicMock, patch

import pytest

from action_tokens.application.services import TokenLifecycleManager
from action_tokens.core.config import Settings
from action_tokens.core.container import (
    get_event_bus,
    get_generator_factories,
    get_logger,
    get_rate_limiter,
    get_token_manager,
    get_token_type_registry,
)
from action_tokens.core.container import infrastructure as infrastructure_module
from action_tokens.core.container import tokens as tokens_module
from action_tokens.core.enums import Environment
from action_tokens.core.result import Success
from action_tokens.domain.events import TokenCreated, TokenUsed
from action_tokens.infrastructure.generators import (
    RandomHashGenerator,
    ShortCodeGenerator,
)

_CACHED = (
    get_logger,
    get_event_bus,
    get_rate_limiter,
    get_token_type_registry,
    infrastructure_module.get_attempt_storage,
    infrastructure_module.get_redis,
    infrastructure_module.get_database,
)


@pytest.fixture(autouse=True)
def clear_container_caches():
    for factory in _CACHED:
        factory.cache_clear()
    yield
    for factory in _CACHED:
        factory.cache_clear()


@pytest.mark.unit
class TestGetLogger:
    @pytest.mark.parametrize(
        ("environment", "use_json"),
        [
            (Environment.DEVELOPMENT, False),
            (Environment.TESTING, True),
            (Environment.PRODUCTION, True),
        ],
    )
    def test_adapter_format_follows_environment(self, environment, use_json):
        settings = Settings(
            secret_key="test-secret-key", environment=environment, log_level="DEBUG"
        )
        with (
            patch.object(infrastructure_module, "get_settings", return_value=settings),
            patch(
                "action_tokens.infrastructure.logging.console_adapter.ConsoleAdapter"
            ) as mock_console,
        ):
            logger = get_logger()

        mock_console.assert_called_once_with(use_json=use_json, level="DEBUG")
        assert logger is mock_console.return_value

    def test_singleton(self):
        assert get_logger() is get_logger()


@pytest.mark.unit
class TestGetEventBus:
    def test_logging_handler_subscribed_to_token_events(self):
        bus = get_event_bus()

        assert len(bus._subscribers[TokenCreated]) == 1
        assert len(bus._subscribers[TokenUsed]) == 1

    def test_singleton(self):
        assert get_event_bus() is get_event_bus()


@pytest.mark.unit
class TestTokenFactories:
    def test_generator_factories(self):
        factories = get_generator_factories()

        assert isinstance(factories["random_hash"](), RandomHashGenerator)
        assert isinstance(factories["short_code"](), ShortCodeGenerator)

    def test_registry_seeded_from_token_definitions(self):
        settings = Settings(
            secret_key="test-secret-key",
            token_definitions={"email.verify": {"generator": "short_code", "ttl": 30}}
        )
        with patch.object(tokens_module, "get_settings", return_value=settings):
            registry = get_token_type_registry()

        assert registry.is_defined("email.verify")
        match registry.resolve("email.verify"):
            case Success(value=token_type):
                assert token_type.ttl == 30
                assert isinstance(token_type.generator, ShortCodeGenerator)
            case failure:
                pytest.fail(f"unexpected {failure}")

    def test_token_manager_wiring(self):
        session = MagicMock()
        with patch.object(
            infrastructure_module, "get_redis", return_value=MagicMock()
        ):
            manager = get_token_manager(session, owner_models={"User": MagicMock})

        assert isinstance(manager, TokenLifecycleManager)
        assert manager._registry is get_token_type_registry()
        assert manager._repository.session is session
        assert manager._owner_loader.models == {"User": MagicMock}

    def test_custom_owner_loader_wins(self):
        loader = MagicMock()
        with patch.object(
            infrastructure_module, "get_redis", return_value=MagicMock()
        ):
            manager = get_token_manager(MagicMock(), owner_loader=loader)

        assert manager._owner_loader is loader
