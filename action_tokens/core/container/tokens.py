"""Token lifecycle factories.

- get_generator_factories(): named generators usable in token type options
- get_token_type_registry(): app-scoped registry seeded from settings
- get_token_manager(session): session-scoped lifecycle manager

Usage:
    async with get_database().get_session() as session:
        manager = get_token_manager(session, owner_models={"User": UserModel})
        result = await manager.generate_for(user, "password.reset", requester=ip)
"""

from collections.abc import Mapping
from functools import lru_cache
from typing import TYPE_CHECKING, Any

from action_tokens.core.config import get_settings

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

    from action_tokens.application.services.token_lifecycle_manager import (
        TokenLifecycleManager,
    )
    from action_tokens.application.token_types.registry import (
        GeneratorFactory,
        TokenTypeRegistry,
    )
    from action_tokens.domain.protocols import OwnerLoaderProtocol


def get_generator_factories() -> dict[str, "GeneratorFactory"]:
    """Named generator factories.

    Returns:
        "random_hash": HMAC generator keyed with SECRET_KEY
        "short_code": 8 characters from the unambiguous pool
    """
    from action_tokens.infrastructure.generators import (
        RandomHashGenerator,
        ShortCodeGenerator,
    )

    secret_key = get_settings().secret_key
    return {
        "random_hash": lambda: RandomHashGenerator(key=secret_key),
        "short_code": ShortCodeGenerator,
    }


@lru_cache()
def get_token_type_registry() -> "TokenTypeRegistry":
    """Get token type registry singleton, seeded from TOKEN_DEFINITIONS."""
    from action_tokens.application.token_types.registry import TokenTypeRegistry

    settings = get_settings()
    registry = TokenTypeRegistry(
        defaults=settings.token_defaults(),
        generators=get_generator_factories(),
    )
    for name, options in settings.token_definitions.items():
        registry.define(name, options)
    return registry


def get_token_manager(
    session: "AsyncSession",
    *,
    owner_models: Mapping[str, type[Any]] | None = None,
    owner_loader: "OwnerLoaderProtocol | None" = None,
) -> "TokenLifecycleManager":
    """Build a lifecycle manager bound to a database session.

    Args:
        session: Session used by the token repository (and default loader).
        owner_models: owner_type to mapped model, for the default loader.
        owner_loader: Custom owner loader (wins over owner_models).

    Returns:
        TokenLifecycleManager.
    """
    from action_tokens.application.services.token_lifecycle_manager import (
        TokenLifecycleManager,
    )
    from action_tokens.core.container.events import get_event_bus
    from action_tokens.core.container.infrastructure import (
        get_logger,
        get_rate_limiter,
    )
    from action_tokens.infrastructure.persistence.repositories import (
        ActionTokenRepository,
        SqlAlchemyOwnerLoader,
    )

    if owner_loader is None:
        owner_loader = SqlAlchemyOwnerLoader(session=session, models=owner_models or {})

    return TokenLifecycleManager(
        registry=get_token_type_registry(),
        repository=ActionTokenRepository(session=session),
        limiter=get_rate_limiter(),
        owner_loader=owner_loader,
        event_bus=get_event_bus(),
        logger=get_logger(),
        generation_attempts=get_settings().token_generation_attempts,
    )
