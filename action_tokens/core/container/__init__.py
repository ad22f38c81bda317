"""Container module - Centralized dependency injection.

Re-exports all factory functions from submodules:

    from action_tokens.core.container import get_logger, get_token_manager

Organized by concern:
- infrastructure: Core services (redis, database, logging, throttling)
- events: Event bus and subscriptions
- tokens: Token type registry and lifecycle manager
"""

# Infrastructure services
from action_tokens.core.container.infrastructure import (
    get_attempt_storage,
    get_database,
    get_logger,
    get_rate_limiter,
    get_redis,
)

# Event bus
from action_tokens.core.container.events import get_event_bus

# Tokens
from action_tokens.core.container.tokens import (
    get_generator_factories,
    get_token_manager,
    get_token_type_registry,
)

__all__ = [
    # Infrastructure
    "get_attempt_storage",
    "get_database",
    "get_logger",
    "get_rate_limiter",
    "get_redis",
    # Events
    "get_event_bus",
    # Tokens
    "get_generator_factories",
    "get_token_manager",
    "get_token_type_registry",
]
