"""Unit test fixtures.

Repository and service tests run against an in-memory SQLite database with
foreign keys switched on, so key and cascade rules behave as in PostgreSQL.
"""

from collections.abc import AsyncIterator

import pytest
import pytest_asyncio
from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

import iam.infrastructure.models  # noqa: F401  registers tables on Base.metadata
from iam.domain.aggregates import Group, GroupLevel, Permission, User
from iam.infrastructure.group_level_repository import GroupLevelRepository
from iam.infrastructure.group_repository import GroupRepository
from iam.infrastructure.permission_repository import PermissionRepository
from iam.infrastructure.user_repository import UserRepository
from infrastructure.database.models import Base


@pytest_asyncio.fixture
async def db_engine() -> AsyncIterator[AsyncEngine]:
    """Create a fresh in-memory database with the full schema."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
    )

    @event.listens_for(engine.sync_engine, "connect")
    def _enable_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def session(db_engine: AsyncEngine) -> AsyncIterator[AsyncSession]:
    """Provide a session configured like the application's sessionmaker."""
    maker = async_sessionmaker(db_engine, expire_on_commit=False, class_=AsyncSession)
    async with maker() as session:
        yield session


@pytest.fixture
def user_repository(session: AsyncSession) -> UserRepository:
    return UserRepository(session=session)


@pytest.fixture
def group_repository(session: AsyncSession) -> GroupRepository:
    return GroupRepository(session=session)


@pytest.fixture
def group_level_repository(session: AsyncSession) -> GroupLevelRepository:
    return GroupLevelRepository(session=session)


@pytest.fixture
def permission_repository(session: AsyncSession) -> PermissionRepository:
    return PermissionRepository(session=session)


@pytest_asyncio.fixture
async def seeded(
    session: AsyncSession,
    user_repository: UserRepository,
    group_repository: GroupRepository,
    group_level_repository: GroupLevelRepository,
    permission_repository: PermissionRepository,
) -> dict[str, object]:
    """Seed one user holding admin/superadmin.

    Also creates an unassigned admin/viewer level and a second user without
    grants.
    """
    async with session.begin():
        alice = await user_repository.save(
            User(
                subject=123456,
                full_name="Alice Rossi",
                email="alice@example.com",
                picture="https://example.com/alice.jpg",
            )
        )
        bob = await user_repository.save(
            User(subject=654321, full_name="Bob Verdi", email="bob@example.com")
        )
        admin = await group_repository.save(Group(group_name="admin"))
        superadmin = await group_level_repository.save(
            GroupLevel(group_name="admin", level_name="superadmin")
        )
        viewer = await group_level_repository.save(
            GroupLevel(group_name="admin", level_name="viewer")
        )
        permission = await permission_repository.save(
            Permission(subject=123456, group_name="admin", level_name="superadmin")
        )

    return {
        "alice": alice,
        "bob": bob,
        "admin": admin,
        "superadmin": superadmin,
        "viewer": viewer,
        "permission": permission,
    }
