"""Pytest configuration.

This configuration ensures:
1. Settings load without a real environment (SECRET_KEY, ENVIRONMENT=testing)
2. Each integration test gets its own SQLite database file
3. Redis is replaced by an isolated fakeredis server per test
4. Shared mocks for cross-cutting concerns (logger, event bus)
"""

import os

os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("ENVIRONMENT", "testing")

from unittest.mock import AsyncMock, MagicMock  # noqa: E402

import fakeredis  # noqa: E402
import fakeredis.aioredis  # noqa: E402
import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from sqlalchemy import String  # noqa: E402
from sqlalchemy.orm import Mapped, mapped_column  # noqa: E402

from action_tokens.application.services import (  # noqa: E402
    ThrottleLimiter,
    TokenLifecycleManager,
)
from action_tokens.application.token_types import TokenTypeRegistry  # noqa: E402
from action_tokens.core.config import Settings  # noqa: E402
from action_tokens.infrastructure.events import InMemoryEventBus  # noqa: E402
from action_tokens.infrastructure.generators import (  # noqa: E402
    RandomHashGenerator,
    ShortCodeGenerator,
)
from action_tokens.infrastructure.persistence.base import BaseModel  # noqa: E402
from action_tokens.infrastructure.persistence.database import Database  # noqa: E402
from action_tokens.infrastructure.persistence.repositories import (  # noqa: E402
    ActionTokenRepository,
    SqlAlchemyOwnerLoader,
)
from action_tokens.infrastructure.rate_limit import RedisAttemptStorage  # noqa: E402


class UserModel(BaseModel):
    """Owner entity used by integration tests."""

    __tablename__ = "test_users"

    email: Mapped[str] = mapped_column(String(255), nullable=False)


def make_settings(**overrides) -> Settings:
    """Settings built from explicit values (environment still applies)."""
    return Settings(secret_key="test-secret-key", **overrides)


# =============================================================================
# Mocks
# =============================================================================


@pytest.fixture
def mock_logger():
    """Provide a mock logger; bind() returns the same mock."""
    logger = MagicMock()
    logger.bind.return_value = logger
    logger.with_context.return_value = logger
    return logger


@pytest.fixture
def mock_event_bus():
    """Provide a mock event bus."""
    event_bus = MagicMock()
    event_bus.publish = AsyncMock(return_value=None)
    return event_bus


# =============================================================================
# Database
# =============================================================================


@pytest_asyncio.fixture
async def database(tmp_path):
    """Fresh SQLite database with all tables created."""
    db = Database(database_url=f"sqlite+aiosqlite:///{tmp_path / 'tokens.db'}")
    await db.create_all()
    yield db
    await db.close()


@pytest_asyncio.fixture
async def db_session(database):
    """Session on the test database."""
    async with database.async_session() as session:
        yield session


@pytest_asyncio.fixture
async def token_repository(db_session):
    return ActionTokenRepository(session=db_session)


@pytest_asyncio.fixture
async def user(db_session):
    """Persisted owner entity."""
    user = UserModel(email="alice@example.com")
    db_session.add(user)
    await db_session.commit()
    await db_session.refresh(user)
    return user


@pytest_asyncio.fixture
async def other_user(db_session):
    user = UserModel(email="bob@example.com")
    db_session.add(user)
    await db_session.commit()
    await db_session.refresh(user)
    return user


# =============================================================================
# Redis
# =============================================================================


@pytest_asyncio.fixture
async def redis_client():
    """Fake Redis client on its own server (no state shared between tests)."""
    client = fakeredis.aioredis.FakeRedis(server=fakeredis.FakeServer())
    yield client
    await client.aclose()


@pytest_asyncio.fixture
async def attempt_storage(redis_client):
    return RedisAttemptStorage(redis_client=redis_client)


# =============================================================================
# Token lifecycle
# =============================================================================


@pytest.fixture
def registry():
    """Registry with the production defaults and both named generators."""
    return TokenTypeRegistry(
        defaults=make_settings().token_defaults(),
        generators={
            "random_hash": lambda: RandomHashGenerator(key="test-secret-key"),
            "short_code": ShortCodeGenerator,
        },
    )


@pytest.fixture
def owner_models():
    """owner_type to mapped model for the SQLAlchemy owner loader."""
    return {"UserModel": UserModel}


@pytest_asyncio.fixture
async def event_bus(mock_logger):
    return InMemoryEventBus(logger=mock_logger)


@pytest_asyncio.fixture
async def manager(
    registry,
    token_repository,
    attempt_storage,
    db_session,
    owner_models,
    event_bus,
    mock_logger,
):
    """Lifecycle manager wired to SQLite, fakeredis and an in-memory bus."""
    return TokenLifecycleManager(
        registry=registry,
        repository=token_repository,
        limiter=ThrottleLimiter(storage=attempt_storage, logger=mock_logger),
        owner_loader=SqlAlchemyOwnerLoader(session=db_session, models=owner_models),
        event_bus=event_bus,
        logger=mock_logger,
    )
