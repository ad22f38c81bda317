"""ActionToken repository protocol.

Port for token persistence. Each write commits on its own; callers never
manage transactions.

Visibility:
    - Soft-deleted rows are invisible to every lookup unless a method takes
      ``include_deleted=True``.
    - purge_dead() ignores visibility and hard-deletes.

Reference:
    - Implementation: action_tokens/infrastructure/persistence/repositories/
      action_token_repository.py
"""

from datetime import datetime
from typing import Protocol

from action_tokens.domain.entities.action_token import ActionToken
from action_tokens.domain.value_objects.owner_ref import OwnerRef


class TokenRepository(Protocol):
    """Protocol for action token persistence."""

    async def create(
        self,
        owner: OwnerRef,
        name: str,
        value: str,
        expires_at: datetime,
    ) -> ActionToken:
        """Persist a new token and return it with its assigned id.

        Args:
            owner: Owning entity reference.
            name: Token type name.
            value: Token string (unique among live tokens of this name).
            expires_at: Absolute expiration (UTC).

        Returns:
            Persisted token.
        """
        ...

    async def find_by_value_and_name(self, value: str, name: str) -> ActionToken | None:
        """Find the latest (highest id) live token with this value and name.

        Returns:
            Token if found (may be expired or used), None otherwise.
        """
        ...

    async def find_active_for_owner(
        self, owner: OwnerRef, name: str
    ) -> ActionToken | None:
        """Find the latest unused, unexpired, live token for an owner and name.

        Returns:
            Active token if any, None otherwise.
        """
        ...

    async def find_by_id(
        self, token_id: int, *, include_deleted: bool = False
    ) -> ActionToken | None:
        """Find token by id."""
        ...

    async def find_by_owner(
        self,
        owner: OwnerRef,
        name: str | None = None,
        *,
        include_deleted: bool = False,
    ) -> list[ActionToken]:
        """List an owner's tokens, newest first.

        Args:
            owner: Owning entity reference.
            name: Restrict to one token type (all types if None).
            include_deleted: Also return soft-deleted tokens.

        Returns:
            Tokens ordered by id descending.
        """
        ...

    async def soft_delete(self, token_id: int) -> None:
        """Set deleted_at on a token (no-op if already deleted)."""
        ...

    async def mark_as_used(self, token_id: int, at: datetime) -> None:
        """Set used_at on a token (only if not yet used)."""
        ...

    async def extend_expiration(self, token_id: int, at: datetime) -> None:
        """Move a token's expiration to ``at``."""
        ...

    async def purge_dead(self) -> int:
        """Hard-delete every used, expired or soft-deleted token.

        Returns:
            Number of rows removed.
        """
        ...
