"""Owner reference value object.

Tokens belong to arbitrary entities (users, teams, invitations). The token
only stores the pair (owner_type, owner_id); loading the entity back is the
job of an OwnerLoaderProtocol implementation.

Usage:
    from action_tokens.domain.value_objects import OwnerRef

    owner = OwnerRef.of(user)          # OwnerRef(owner_type="User", owner_id="42")
    owner == OwnerRef("User", "42")    # True
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class OwnerRef:
    """Polymorphic reference to the entity a token is bound to.

    Attributes:
        owner_type: Entity kind (class name for entities built with of()).
        owner_id: Entity identifier, stored as a string.
    """

    owner_type: str
    owner_id: str

    def __post_init__(self) -> None:
        """Validate reference parts.

        Raises:
            ValueError: If either part is empty.
        """
        if not self.owner_type:
            raise ValueError("owner_type must not be empty")
        if not self.owner_id:
            raise ValueError("owner_id must not be empty")

    @classmethod
    def of(cls, owner: Any) -> "OwnerRef":
        """Build a reference for an entity (or return an existing reference).

        Args:
            owner: OwnerRef, or any object exposing an ``id`` attribute.

        Returns:
            OwnerRef for the entity.

        Raises:
            TypeError: If the object has no ``id`` attribute.
        """
        if isinstance(owner, OwnerRef):
            return owner
        owner_id = getattr(owner, "id", None)
        if owner_id is None:
            raise TypeError(
                f"Cannot reference {type(owner).__name__} as token owner: missing id"
            )
        return cls(owner_type=type(owner).__name__, owner_id=str(owner_id))

    def __str__(self) -> str:
        return f"{self.owner_type}:{self.owner_id}"
