"""SQLAlchemy owner loader.

Resolves an OwnerRef back to its entity by looking up the mapped model
registered under the reference's owner_type.

Usage:
    loader = SqlAlchemyOwnerLoader(session=session, models={"User": UserModel})
    user = await loader.load(OwnerRef("User", "42"))
"""

from collections.abc import Mapping
from typing import Any

from sqlalchemy import inspect
from sqlalchemy.ext.asyncio import AsyncSession

from action_tokens.domain.value_objects.owner_ref import OwnerRef


class SqlAlchemyOwnerLoader:
    """Loads token owners by primary key.

    Owner ids are stored as strings; they are converted to the python type
    of the model's primary key column before the lookup.

    Attributes:
        session: SQLAlchemy async session.
        models: owner_type to mapped model class.
    """

    def __init__(self, session: AsyncSession, models: Mapping[str, type[Any]]) -> None:
        self.session = session
        self.models = dict(models)

    async def load(self, owner: OwnerRef) -> Any | None:
        """Load the entity, or None if the type is unknown or the row is gone."""
        model = self.models.get(owner.owner_type)
        if model is None:
            return None
        pk_column = inspect(model).primary_key[0]
        try:
            python_type = pk_column.type.python_type
        except NotImplementedError:
            python_type = str
        try:
            key = python_type(owner.owner_id)
        except (TypeError, ValueError):
            return None
        return await self.session.get(model, key)
