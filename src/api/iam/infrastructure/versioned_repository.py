"""Shared SQLAlchemy implementation of the IAM CRUD repository contract.

Every IAM table is keyed by natural (possibly composite) keys and carries a
version counter. Writes go through Core INSERT/UPDATE/DELETE statements so
the database, not the session's identity map, decides about key conflicts,
foreign keys and stale versions:

- INSERT relies on primary and foreign keys; IntegrityError becomes
  ConstraintViolationError.
- UPDATE is a single `UPDATE ... WHERE <key> AND version = :expected`;
  zero affected rows becomes ConcurrencyConflictError.
- DELETE relies on ON DELETE CASCADE foreign keys for dependent rows.

Repositories never commit. The calling service owns the transaction, so a
failed write rolls back together with everything else in the use case.
"""

from __future__ import annotations

from typing import Any, ClassVar, Generic, Protocol, Sequence, TypeVar

from sqlalchemy import Column, and_, delete, insert, inspect, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql.elements import ColumnElement

from iam.infrastructure.observability import DefaultRepositoryProbe, RepositoryProbe
from iam.ports.exceptions import ConcurrencyConflictError, ConstraintViolationError
from infrastructure.database.models import Base, utc_now


class _Versioned(Protocol):
    version: int | None


EntityT = TypeVar("EntityT", bound=_Versioned)
KeyT = TypeVar("KeyT")
ModelT = TypeVar("ModelT", bound=Base)


class VersionedRepository(Generic[EntityT, KeyT, ModelT]):
    """Base class for repositories of versioned, naturally keyed aggregates.

    Subclasses declare the ORM model and entity name, and map between the
    domain aggregate and column values.
    """

    model: ClassVar[type[Any]]
    entity_name: ClassVar[str]

    def __init__(
        self, session: AsyncSession, probe: RepositoryProbe | None = None
    ) -> None:
        """Initialize repository with database session and probe.

        Args:
            session: AsyncSession from FastAPI dependency injection
            probe: Optional domain probe for observability
        """
        self._session = session
        self._probe = (probe or DefaultRepositoryProbe()).for_entity(self.entity_name)

    # -- mapping hooks -----------------------------------------------------

    def _key_of(self, entity: EntityT) -> KeyT:
        raise NotImplementedError

    def _key_values(self, key: KeyT) -> tuple[Any, ...]:
        """Key values in primary-key column order."""
        raise NotImplementedError

    def _column_values(self, entity: EntityT) -> dict[str, Any]:
        """Business column values, key columns included."""
        raise NotImplementedError

    def _to_domain(self, model: ModelT) -> EntityT:
        raise NotImplementedError

    # -- helpers -------------------------------------------------------------

    @classmethod
    def _primary_key(cls) -> tuple[Column[Any], ...]:
        return tuple(inspect(cls.model).primary_key)

    def _key_clause(self, key: KeyT) -> ColumnElement[bool]:
        values = self._key_values(key)
        return and_(*(col == value for col, value in zip(self._primary_key(), values)))

    async def _fetch(self, key: KeyT) -> ModelT | None:
        stmt = (
            select(self.model)
            .where(self._key_clause(key))
            .execution_options(populate_existing=True)
        )
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    async def _reload(self, key: KeyT) -> EntityT:
        model = await self._fetch(key)
        assert model is not None
        return self._to_domain(model)

    # -- CRUD ------------------------------------------------------------------

    async def save(self, entity: EntityT) -> EntityT:
        """Insert a new entity or update an existing one.

        Args:
            entity: The aggregate to persist; version None means new

        Returns:
            The stored aggregate with refreshed version and timestamps

        Raises:
            ConstraintViolationError: If a key or reference constraint fails
            ConcurrencyConflictError: If the entity's version is stale
        """
        key = self._key_of(entity)
        expected_version = entity.version

        try:
            if expected_version is None:
                await self._insert(entity)
            else:
                await self._update(entity, key, expected_version)
        except IntegrityError as e:
            self._probe.constraint_violated(str(key), str(e.orig))
            raise ConstraintViolationError(
                f"{self.entity_name} {key} violates a database constraint"
            ) from e

        saved = await self._reload(key)
        self._probe.entity_saved(
            str(key),
            version=saved.version or 0,
            created=expected_version is None,
        )
        return saved

    async def _insert(self, entity: EntityT) -> None:
        stmt = insert(self.model).values(**self._column_values(entity))
        await self._session.execute(stmt)

    async def _update(self, entity: EntityT, key: KeyT, expected_version: int) -> None:
        key_names = {col.key for col in self._primary_key()}
        changes = {
            name: value
            for name, value in self._column_values(entity).items()
            if name not in key_names
        }
        stmt = (
            update(self.model)
            .where(self._key_clause(key), self.model.version == expected_version)
            .values(**changes, version=self.model.version + 1, updated_at=utc_now())
            .execution_options(synchronize_session=False)
        )
        result = await self._session.execute(stmt)

        if result.rowcount != 1:
            self._probe.concurrency_conflict(str(key), expected_version)
            raise ConcurrencyConflictError(self.entity_name, key, expected_version)

    async def find_by_id(self, key: KeyT) -> EntityT | None:
        """Retrieve an aggregate by key.

        Returns:
            The aggregate, or None if not found
        """
        model = await self._fetch(key)

        if model is None:
            self._probe.entity_not_found(str(key))
            return None

        self._probe.entity_retrieved(str(key))
        return self._to_domain(model)

    async def find_all(self) -> list[EntityT]:
        """Retrieve every aggregate, ordered by key."""
        stmt = select(self.model).order_by(*self._primary_key())
        result = await self._session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def delete(self, entity: EntityT) -> bool:
        """Delete an aggregate; dependents go with it via ON DELETE CASCADE.

        Returns:
            True if deleted, False if not found
        """
        key = self._key_of(entity)
        stmt = (
            delete(self.model)
            .where(self._key_clause(key))
            .execution_options(synchronize_session=False)
        )
        result = await self._session.execute(stmt)

        if result.rowcount == 0:
            self._probe.entity_not_found(str(key))
            return False

        self._probe.entity_deleted(str(key))
        return True

    async def delete_all(self, entities: Sequence[EntityT]) -> int:
        """Delete several aggregates.

        Returns:
            Number of aggregates actually deleted
        """
        deleted = 0
        for entity in entities:
            if await self.delete(entity):
                deleted += 1
        return deleted
