"""Database models."""

from action_tokens.infrastructure.persistence.models.action_token import (
    ActionTokenModel,
)

__all__ = ["ActionTokenModel"]
