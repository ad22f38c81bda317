"""Domain protocols (ports) package.

Infrastructure adapters implement these protocols without inheritance.

IMPORTANT: Re-exports are ONLY for protocols defined in this package.

Usage:
    from action_tokens.domain.protocols import TokenRepository, LoggerProtocol
"""

# Service protocols
from action_tokens.domain.protocols.attempt_storage_protocol import (
    AttemptStorageProtocol,
)
from action_tokens.domain.protocols.event_bus_protocol import (
    EventBusProtocol,
    EventHandler,
)
from action_tokens.domain.protocols.logger_protocol import LoggerProtocol
from action_tokens.domain.protocols.owner_loader_protocol import OwnerLoaderProtocol
from action_tokens.domain.protocols.rate_limiter_protocol import RateLimiterProtocol
from action_tokens.domain.protocols.token_generator_protocol import (
    TokenGeneratorProtocol,
)
from action_tokens.domain.protocols.token_type_protocol import (
    GenerationLimitedProtocol,
    TokenTypeProtocol,
    UsageLimitedProtocol,
)

# Repository protocols
from action_tokens.domain.protocols.token_repository import TokenRepository

__all__ = [
    # Service protocols
    "AttemptStorageProtocol",
    "EventBusProtocol",
    "EventHandler",
    "GenerationLimitedProtocol",
    "LoggerProtocol",
    "OwnerLoaderProtocol",
    "RateLimiterProtocol",
    "TokenGeneratorProtocol",
    "TokenTypeProtocol",
    "UsageLimitedProtocol",
    # Repository protocols
    "TokenRepository",
]
