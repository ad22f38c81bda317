"""Token type built from an options mapping.

Every name defined in the TokenTypeRegistry resolves to an OptionsTokenType
whose options are the registry defaults overridden by the per-name options.
It implements TokenTypeProtocol, GenerationLimitedProtocol and
UsageLimitedProtocol; the *_throttling options switch throttling off.
"""

from collections.abc import Mapping
from typing import Any

from action_tokens.core.constants import LIMITER_KEY_PREFIX
from action_tokens.domain.protocols import TokenGeneratorProtocol


class OptionsTokenType:
    """Token type configured by a merged options mapping.

    Attributes:
        name: Token type name.
        options: Merged options (read-only copy).
    """

    def __init__(
        self,
        name: str,
        options: Mapping[str, Any],
        generator: TokenGeneratorProtocol,
    ) -> None:
        self.name = name
        self.options = dict(options)
        self._generator = generator

    def __repr__(self) -> str:
        return f"OptionsTokenType(name={self.name!r})"

    @property
    def ttl(self) -> Any:
        return self.options.get("ttl")

    @property
    def previous(self) -> Any:
        return self.options.get("previous")

    @property
    def generator(self) -> TokenGeneratorProtocol:
        return self._generator

    def generate(self) -> str:
        return self._generator.generate()

    # Generation throttling
    @property
    def generation_throttling(self) -> bool:
        return bool(self.options.get("generation_throttling", True))

    @property
    def generation_attempts(self) -> Any:
        return self.options.get("generation_attempts")

    @property
    def generation_attempts_interval(self) -> Any:
        return self.options.get("generation_attempts_interval")

    def generation_limiter_key(self, requester: str) -> str:
        return f"{LIMITER_KEY_PREFIX}:gen:{self.name}:{requester}"

    # Usage throttling
    @property
    def usage_throttling(self) -> bool:
        return bool(self.options.get("usage_throttling", True))

    @property
    def usage_attempts(self) -> Any:
        return self.options.get("usage_attempts")

    @property
    def usage_attempts_interval(self) -> Any:
        return self.options.get("usage_attempts_interval")

    def usage_limiter_key(self, requester: str) -> str:
        return f"{LIMITER_KEY_PREFIX}:use:{self.name}:{requester}"
