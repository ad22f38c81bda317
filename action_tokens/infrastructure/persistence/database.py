"""Async SQLAlchemy engine and sessions for the token store.

One Database per process (see core.container.get_database). Repositories
receive an AsyncSession; ActionTokenRepository commits each write itself,
so get_session() mostly matters for callers mixing token calls with their
own unit of work.

Supported URLs:
    postgresql+asyncpg://...   pooled, pre-ping enabled
    sqlite+aiosqlite:///...    default pool (tests, local development)
"""

from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)


class Database:
    """Engine plus session factory.

    Args:
        database_url: SQLAlchemy async URL.
        echo: Echo SQL statements.
        pool_size: Pooled connections (PostgreSQL only).
        max_overflow: Connections allowed above pool_size (PostgreSQL only).

    Example:
        db = Database("sqlite+aiosqlite:///./action_tokens.db")
        await db.create_all()
        async with db.get_session() as session:
            manager = get_token_manager(session)
    """

    def __init__(
        self,
        database_url: str,
        echo: bool = False,
        pool_size: int = 20,
        max_overflow: int = 0,
    ) -> None:
        options: dict[str, Any] = {"echo": echo}
        if not database_url.startswith("sqlite"):
            options.update(
                pool_pre_ping=True,
                pool_size=pool_size,
                max_overflow=max_overflow,
            )

        self.engine: AsyncEngine = create_async_engine(database_url, **options)
        # Entities keep their loaded state after the per-write commits
        self.async_session = async_sessionmaker(
            self.engine, class_=AsyncSession, expire_on_commit=False
        )

    @asynccontextmanager
    async def get_session(self) -> AsyncGenerator[AsyncSession, None]:
        """Session scope: commit on exit, roll back and re-raise on error."""
        async with self.async_session() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    async def create_all(self) -> None:
        """Create the action_tokens table (and any other mapped tables).

        Meant for tests and local setups; deployed schemas are managed by
        the host application's migrations.
        """
        from action_tokens.infrastructure.persistence.base import BaseModel
        from action_tokens.infrastructure.persistence.models import (  # noqa: F401
            ActionTokenModel,
        )

        async with self.engine.begin() as conn:
            await conn.run_sync(BaseModel.metadata.create_all)

    async def drop_all(self) -> None:
        """Drop every mapped table. Destroys data."""
        from action_tokens.infrastructure.persistence.base import BaseModel

        async with self.engine.begin() as conn:
            await conn.run_sync(BaseModel.metadata.drop_all)

    async def close(self) -> None:
        await self.engine.dispose()

    async def check_connection(self) -> bool:
        """True when a trivial query succeeds."""
        try:
            async with self.async_session() as session:
                await session.execute(text("SELECT 1"))
        except SQLAlchemyError:
            return False
        return True
