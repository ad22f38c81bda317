"""Token string generators.

All generators implement TokenGeneratorProtocol (``generate() -> str``).
Named generators are registered in the container and can be referenced from
token type options by name ("random_hash", "short_code").
"""

from action_tokens.infrastructure.generators.hash_id_generator import HashIdGenerator
from action_tokens.infrastructure.generators.random_hash_generator import (
    RandomHashGenerator,
)
from action_tokens.infrastructure.generators.short_code_generator import (
    ShortCodeGenerator,
)

__all__ = ["HashIdGenerator", "RandomHashGenerator", "ShortCodeGenerator"]
