"""Token type definitions and option parsing."""

from action_tokens.application.token_types.options_token_type import (
    OptionsTokenType,
)
from action_tokens.application.token_types.parsing import (
    resolve_expiration,
    resolve_interval_seconds,
    resolve_max_attempts,
    resolve_previous,
)
from action_tokens.application.token_types.registry import (
    GeneratorFactory,
    TokenTypeRegistry,
)

__all__ = [
    "GeneratorFactory",
    "OptionsTokenType",
    "TokenTypeRegistry",
    "resolve_expiration",
    "resolve_interval_seconds",
    "resolve_max_attempts",
    "resolve_previous",
]
