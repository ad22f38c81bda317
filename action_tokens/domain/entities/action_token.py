"""ActionToken domain entity.

Pure business logic, no framework dependencies.

A single-use token (password reset link, email verification code, magic
link) bound to an owning entity.

Business Rules:
    - Active: not used, not soft-deleted, not expired
    - Dead: used, soft-deleted or expired (eligible for reaping)
    - used_at is set once and never changed
    - expires_at only moves forward (reuse strategy)
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime

from action_tokens.domain.value_objects.owner_ref import OwnerRef


@dataclass(slots=True, kw_only=True)
class ActionToken:
    """Action token entity.

    Attributes:
        id: Monotonically increasing identifier (highest id is the latest).
        value: Token string handed out to the owner.
        name: Token type name (e.g. "password.reset").
        owner: Reference to the owning entity.
        expires_at: Absolute expiration timestamp (UTC).
        used_at: When the token was consumed (None until used).
        deleted_at: Soft removal marker (None while live).
        created_at: Creation timestamp.
        updated_at: Last modification timestamp.

    Example:
        >>> token = ActionToken(
        ...     id=1,
        ...     value="AB12CD34",
        ...     name="email.verify",
        ...     owner=OwnerRef("User", "42"),
        ...     expires_at=datetime.now(UTC) + timedelta(hours=1),
        ... )
        >>> token.is_active()
        True
    """

    id: int
    value: str
    name: str
    owner: OwnerRef
    expires_at: datetime
    used_at: datetime | None = None
    deleted_at: datetime | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def is_expired(self, now: datetime | None = None) -> bool:
        """Check whether the expiration time has passed.

        Args:
            now: Reference time (defaults to current UTC time).

        Returns:
            True if expires_at is not in the future.
        """
        return self.expires_at <= (now or datetime.now(UTC))

    def is_used(self) -> bool:
        """Check whether the token was consumed."""
        return self.used_at is not None

    def is_deleted(self) -> bool:
        """Check whether the token was soft-deleted."""
        return self.deleted_at is not None

    def is_active(self, now: datetime | None = None) -> bool:
        """Check whether the token can still be used.

        Args:
            now: Reference time (defaults to current UTC time).

        Returns:
            True if not used, not deleted and not expired.
        """
        return not (self.is_used() or self.is_deleted() or self.is_expired(now))

    def is_dead(self, now: datetime | None = None) -> bool:
        """Check whether the token is used, deleted or expired."""
        return not self.is_active(now)

    def __str__(self) -> str:
        return self.value
