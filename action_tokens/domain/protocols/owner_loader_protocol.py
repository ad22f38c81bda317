"""Owner loader protocol.

Tokens store an OwnerRef only. On successful usage the owning entity is
loaded back and handed to the callback.
"""

from typing import Any, Protocol

from action_tokens.domain.value_objects.owner_ref import OwnerRef


class OwnerLoaderProtocol(Protocol):
    """Protocol for polymorphic owner lookup."""

    async def load(self, owner: OwnerRef) -> Any | None:
        """Load the entity referenced by ``owner``.

        Args:
            owner: Reference stored on the token.

        Returns:
            The entity, or None if it no longer exists (or the type is unknown).
        """
        ...
