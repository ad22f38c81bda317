"""ActionToken database model.

Table: action_tokens

Indexes:
    - (value, name): usage lookup and collision checks
    - (owner_type, owner_id, name): previous token strategies

Value uniqueness is only required among live (not soft-deleted) rows of the
same name, so there is no unique constraint; the lifecycle manager enforces it.
"""

from datetime import datetime

from sqlalchemy import DateTime, Index, String
from sqlalchemy.orm import Mapped, mapped_column

from action_tokens.core.constants import TOKEN_NAME_MAX_LENGTH, TOKEN_VALUE_MAX_LENGTH
from action_tokens.infrastructure.persistence.base import BaseMutableModel


class ActionTokenModel(BaseMutableModel):
    """Persisted action token.

    Fields:
        id, created_at, updated_at, deleted_at: From BaseMutableModel
        value: Token string
        name: Token type name
        owner_type: Owning entity kind
        owner_id: Owning entity id (string)
        expires_at: Absolute expiration
        used_at: When consumed (None until used)
    """

    __tablename__ = "action_tokens"
    __table_args__ = (
        Index("ix_action_tokens_value_name", "value", "name"),
        Index("ix_action_tokens_owner_name", "owner_type", "owner_id", "name"),
    )

    value: Mapped[str] = mapped_column(String(TOKEN_VALUE_MAX_LENGTH), nullable=False)
    name: Mapped[str] = mapped_column(String(TOKEN_NAME_MAX_LENGTH), nullable=False)
    owner_type: Mapped[str] = mapped_column(String(255), nullable=False)
    owner_id: Mapped[str] = mapped_column(String(255), nullable=False)
    expires_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    used_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True, default=None
    )
