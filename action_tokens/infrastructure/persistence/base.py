"""Declarative base and column mixins.

    BaseModel           id (integer, ascending), created_at
    TimestampMixin      updated_at
    SoftDeleteMixin     deleted_at
    BaseMutableModel    all of the above (ActionTokenModel)

Host applications may map their owner entities on BaseModel so that
Database.create_all() creates them alongside action_tokens.

Ids must grow monotonically: "latest token wins" lookups order by id.
SQLite only autoincrements INTEGER primary keys, hence the variant.
"""

from datetime import UTC, datetime

from sqlalchemy import BigInteger, DateTime, Integer, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def utc_now() -> datetime:
    """Current time in UTC (aware)."""
    return datetime.now(UTC)


class BaseModel(DeclarativeBase):
    """Root of every mapped class in the package."""

    __abstract__ = True

    id: Mapped[int] = mapped_column(
        BigInteger().with_variant(Integer, "sqlite"),
        primary_key=True,
        autoincrement=True,
    )
    # Python-side default so created_at follows the application clock
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utc_now,
        server_default=func.now(),
    )

    def __repr__(self) -> str:
        return f"<{type(self).__name__} id={self.id}>"


class TimestampMixin:
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utc_now,
        server_default=func.now(),
        onupdate=utc_now,
    )


class SoftDeleteMixin:
    """Rows with deleted_at set are hidden from repository lookups."""

    deleted_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
        default=None,
    )


class BaseMutableModel(SoftDeleteMixin, TimestampMixin, BaseModel):
    __abstract__ = True
