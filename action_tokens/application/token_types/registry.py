"""Token type registry.

Holds per-name option overrides and resolves names (or token type objects)
into something the lifecycle manager can work with.

Usage:
    registry = TokenTypeRegistry(
        defaults=settings.token_defaults(),
        generators={"random_hash": lambda: RandomHashGenerator(key)},
    )
    registry.define("password.reset", ttl=60, previous="remove")
    registry.define("email.verify", {"generator": "short_code", "ttl": 1440})

    match registry.resolve("password.reset"):
        case Success(value=token_type):
            ...
        case Failure(error=TokenConfigError(message=message)):
            ...
"""

from collections.abc import Callable, Mapping
from typing import Any

from action_tokens.application.token_types.options_token_type import (
    OptionsTokenType,
)
from action_tokens.core.result import Failure, Result, Success
from action_tokens.domain.errors import TokenConfigError
from action_tokens.domain.protocols import TokenGeneratorProtocol, TokenTypeProtocol

GeneratorFactory = Callable[[], TokenGeneratorProtocol]


class TokenTypeRegistry:
    """Registry of named token type definitions.

    Args:
        defaults: Options every definition starts from.
        generators: Named generator factories usable in the generator option.
    """

    def __init__(
        self,
        defaults: Mapping[str, Any],
        generators: Mapping[str, GeneratorFactory] | None = None,
    ) -> None:
        self._defaults = dict(defaults)
        self._generators = dict(generators or {})
        self._definitions: dict[str, dict[str, Any]] = {}

    def define(
        self, name: str, options: Mapping[str, Any] | None = None, **overrides: Any
    ) -> None:
        """Define (or redefine) a token type.

        Options are stored as given; validation happens when the type is used.

        Args:
            name: Token type name.
            options: Option overrides.
            **overrides: More overrides (win over ``options``).

        Raises:
            ValueError: If name is empty.
        """
        if not name:
            raise ValueError("Token type name must not be empty")
        self._definitions[name] = {**(options or {}), **overrides}

    def get_defined(self) -> dict[str, dict[str, Any]]:
        """All definitions (name to override options, copies)."""
        return {name: dict(options) for name, options in self._definitions.items()}

    def is_defined(self, name: str) -> bool:
        return name in self._definitions

    def register_generator(self, name: str, factory: GeneratorFactory) -> None:
        """Make a generator usable by name in the generator option."""
        self._generators[name] = factory

    def resolve(
        self, name_or_type: str | TokenTypeProtocol
    ) -> Result[TokenTypeProtocol, TokenConfigError]:
        """Resolve a token type name or object.

        Objects satisfying TokenTypeProtocol are returned as-is. Names are
        looked up and wrapped in OptionsTokenType with options merged over
        the defaults.

        Returns:
            Success(token type) or Failure(TokenConfigError).
        """
        if not isinstance(name_or_type, str):
            if isinstance(name_or_type, TokenTypeProtocol):
                return Success(value=name_or_type)
            return Failure(
                error=TokenConfigError(
                    message=f"{name_or_type!r} is not a token type",
                )
            )

        name = name_or_type
        if name not in self._definitions:
            return Failure(
                error=TokenConfigError(
                    message=f"Token type '{name}' is not defined",
                    token_name=name,
                )
            )

        options = {**self._defaults, **self._definitions[name]}
        match self.resolve_generator(options.get("generator"), name):
            case Success(value=generator):
                return Success(value=OptionsTokenType(name, options, generator))
            case failure:
                return failure

    def resolve_generator(
        self, reference: Any, token_name: str
    ) -> Result[TokenGeneratorProtocol, TokenConfigError]:
        """Turn a generator option into a generator instance.

        Accepted references: an object with generate(), a zero-argument
        factory or class, or a registered generator name.
        """
        if isinstance(reference, str):
            factory = self._generators.get(reference)
            if factory is None:
                return self._generator_error(
                    f"Unknown generator '{reference}'", token_name
                )
            reference = factory

        if isinstance(reference, type) or (
            callable(reference) and not isinstance(reference, TokenGeneratorProtocol)
        ):
            try:
                reference = reference()
            except (TypeError, ValueError) as exc:
                return self._generator_error(
                    f"Generator factory failed: {exc}", token_name
                )

        if isinstance(reference, TokenGeneratorProtocol):
            return Success(value=reference)
        return self._generator_error(f"Invalid generator {reference!r}", token_name)

    @staticmethod
    def _generator_error(
        reason: str, token_name: str
    ) -> Failure[TokenConfigError]:
        return Failure(
            error=TokenConfigError(
                message=f"{reason} for token type '{token_name}'",
                token_name=token_name,
            )
        )
