"""Repository implementations."""

from action_tokens.infrastructure.persistence.repositories.action_token_repository import (
    ActionTokenRepository,
)
from action_tokens.infrastructure.persistence.repositories.owner_loader import (
    SqlAlchemyOwnerLoader,
)

__all__ = ["ActionTokenRepository", "SqlAlchemyOwnerLoader"]
