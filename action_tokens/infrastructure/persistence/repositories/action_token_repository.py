"""ActionTokenRepository - SQLAlchemy implementation of TokenRepository.

Every write commits immediately. Soft-deleted rows are filtered out of all
lookups unless a method takes include_deleted=True.
"""

from datetime import UTC, datetime

from sqlalchemy import Select, delete, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from action_tokens.domain.entities.action_token import ActionToken
from action_tokens.domain.value_objects.owner_ref import OwnerRef
from action_tokens.infrastructure.persistence.base import utc_now
from action_tokens.infrastructure.persistence.models.action_token import (
    ActionTokenModel,
)


def _as_utc(value: datetime | None) -> datetime | None:
    """SQLite hands back naive datetimes; they were written as UTC."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def _to_entity(model: ActionTokenModel) -> ActionToken:
    """Convert database model to domain entity."""
    return ActionToken(
        id=model.id,
        value=model.value,
        name=model.name,
        owner=OwnerRef(owner_type=model.owner_type, owner_id=model.owner_id),
        expires_at=_as_utc(model.expires_at),  # type: ignore[arg-type]
        used_at=_as_utc(model.used_at),
        deleted_at=_as_utc(model.deleted_at),
        created_at=_as_utc(model.created_at),  # type: ignore[arg-type]
        updated_at=_as_utc(model.updated_at),  # type: ignore[arg-type]
    )


def _live(stmt: Select[tuple[ActionTokenModel]]) -> Select[tuple[ActionTokenModel]]:
    return stmt.where(ActionTokenModel.deleted_at.is_(None))


class ActionTokenRepository:
    """SQLAlchemy implementation for action token persistence.

    Attributes:
        session: SQLAlchemy async session for database operations.

    Example:
        >>> async with database.get_session() as session:
        ...     repo = ActionTokenRepository(session=session)
        ...     token = await repo.find_by_value_and_name("abc123", "email.verify")
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def create(
        self,
        owner: OwnerRef,
        name: str,
        value: str,
        expires_at: datetime,
    ) -> ActionToken:
        """Create new token in database.

        Args:
            owner: Owning entity reference.
            name: Token type name.
            value: Token string.
            expires_at: Absolute expiration.

        Returns:
            Created ActionToken with its id.
        """
        model = ActionTokenModel(
            value=value,
            name=name,
            owner_type=owner.owner_type,
            owner_id=owner.owner_id,
            expires_at=_as_utc(expires_at),
        )
        self.session.add(model)
        await self.session.commit()
        await self.session.refresh(model)
        return _to_entity(model)

    async def find_by_value_and_name(self, value: str, name: str) -> ActionToken | None:
        """Find the latest live token for a value and name.

        Two live rows can share a value only when concurrent generations
        pass the collision check at the same time; the highest id wins.

        Returns:
            ActionToken if found (any state except soft-deleted), None otherwise.
        """
        stmt = _live(
            select(ActionTokenModel)
            .where(ActionTokenModel.value == value)
            .where(ActionTokenModel.name == name)
        )
        stmt = stmt.order_by(ActionTokenModel.id.desc()).limit(1)
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        return _to_entity(model) if model else None

    async def find_active_for_owner(
        self, owner: OwnerRef, name: str
    ) -> ActionToken | None:
        """Find the latest unused, unexpired, live token of an owner.

        Returns:
            Active ActionToken, or None.
        """
        stmt = _live(
            select(ActionTokenModel)
            .where(ActionTokenModel.owner_type == owner.owner_type)
            .where(ActionTokenModel.owner_id == owner.owner_id)
            .where(ActionTokenModel.name == name)
            .where(ActionTokenModel.used_at.is_(None))
            .where(ActionTokenModel.expires_at > utc_now())
        )
        stmt = stmt.order_by(ActionTokenModel.id.desc()).limit(1)
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        return _to_entity(model) if model else None

    async def find_by_id(
        self, token_id: int, *, include_deleted: bool = False
    ) -> ActionToken | None:
        """Find token by id.

        Args:
            token_id: Token primary key.
            include_deleted: Also match soft-deleted rows.

        Returns:
            ActionToken if found, None otherwise.
        """
        stmt = select(ActionTokenModel).where(ActionTokenModel.id == token_id)
        if not include_deleted:
            stmt = _live(stmt)
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        return _to_entity(model) if model else None

    async def find_by_owner(
        self,
        owner: OwnerRef,
        name: str | None = None,
        *,
        include_deleted: bool = False,
    ) -> list[ActionToken]:
        """Find an owner's tokens, newest first.

        Args:
            owner: Owning entity reference.
            name: Restrict to one token type.
            include_deleted: Also return soft-deleted rows.

        Returns:
            List of ActionToken.
        """
        stmt = (
            select(ActionTokenModel)
            .where(ActionTokenModel.owner_type == owner.owner_type)
            .where(ActionTokenModel.owner_id == owner.owner_id)
        )
        if name is not None:
            stmt = stmt.where(ActionTokenModel.name == name)
        if not include_deleted:
            stmt = _live(stmt)
        result = await self.session.execute(stmt.order_by(ActionTokenModel.id.desc()))
        return [_to_entity(model) for model in result.scalars().all()]

    async def soft_delete(self, token_id: int) -> None:
        """Mark a token as deleted (hidden from lookups)."""
        stmt = (
            update(ActionTokenModel)
            .where(ActionTokenModel.id == token_id)
            .where(ActionTokenModel.deleted_at.is_(None))
            .values(deleted_at=utc_now())
            .execution_options(synchronize_session="fetch")
        )
        await self.session.execute(stmt)
        await self.session.commit()

    async def mark_as_used(self, token_id: int, at: datetime) -> None:
        """Record consumption time; an already used token keeps its first used_at."""
        stmt = (
            update(ActionTokenModel)
            .where(ActionTokenModel.id == token_id)
            .where(ActionTokenModel.used_at.is_(None))
            .values(used_at=_as_utc(at))
            .execution_options(synchronize_session="fetch")
        )
        await self.session.execute(stmt)
        await self.session.commit()

    async def extend_expiration(self, token_id: int, at: datetime) -> None:
        """Move a token's expiration (reuse strategy)."""
        stmt = (
            update(ActionTokenModel)
            .where(ActionTokenModel.id == token_id)
            .values(expires_at=_as_utc(at))
            .execution_options(synchronize_session="fetch")
        )
        await self.session.execute(stmt)
        await self.session.commit()

    async def purge_dead(self) -> int:
        """Hard-delete used, expired and soft-deleted tokens.

        Returns:
            Number of tokens deleted.
        """
        dead = select(ActionTokenModel.id).where(
            or_(
                ActionTokenModel.used_at.is_not(None),
                ActionTokenModel.deleted_at.is_not(None),
                ActionTokenModel.expires_at <= utc_now(),
            )
        )
        ids = list((await self.session.execute(dead)).scalars().all())
        if ids:
            stmt = (
                delete(ActionTokenModel)
                .where(ActionTokenModel.id.in_(ids))
                .execution_options(synchronize_session="fetch")
            )
            await self.session.execute(stmt)
        await self.session.commit()
        return len(ids)
