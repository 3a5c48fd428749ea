"""Repository protocols (ports) for IAM bounded context.

Repository protocols define the interface for persisting and retrieving
aggregates. Every repository offers the same CRUD surface; implementations
run inside a transaction owned by the caller and never commit themselves.
"""

from __future__ import annotations

from typing import Protocol, Sequence, TypeVar, runtime_checkable

from iam.domain.aggregates import Group, GroupLevel, Permission, User
from iam.domain.value_objects import GroupLevelId, PermissionId

EntityT = TypeVar("EntityT")
KeyT = TypeVar("KeyT", contravariant=True)


@runtime_checkable
class ICrudRepository(Protocol[EntityT, KeyT]):
    """CRUD operations shared by every IAM repository."""

    async def save(self, entity: EntityT) -> EntityT:
        """Insert a new entity or update an existing one.

        An entity whose version is None is inserted. Otherwise the stored row
        is updated only if its version still equals the entity's version.

        Args:
            entity: The aggregate to persist

        Returns:
            The stored aggregate with its new version and timestamps

        Raises:
            ConstraintViolationError: If a key or reference constraint fails
            ConcurrencyConflictError: If the entity's version is stale
        """
        ...

    async def find_by_id(self, key: KeyT) -> EntityT | None:
        """Retrieve an aggregate by key, or None if it does not exist."""
        ...

    async def find_all(self) -> list[EntityT]:
        """Retrieve every aggregate, ordered by key."""
        ...

    async def delete(self, entity: EntityT) -> bool:
        """Delete an aggregate and everything that cascades from it.

        Returns:
            True if deleted, False if not found
        """
        ...

    async def delete_all(self, entities: Sequence[EntityT]) -> int:
        """Delete several aggregates.

        Returns:
            Number of aggregates actually deleted
        """
        ...


@runtime_checkable
class IUserRepository(ICrudRepository[User, int], Protocol):
    """Repository for users keyed by identity-provider subject."""


@runtime_checkable
class IGroupRepository(ICrudRepository[Group, str], Protocol):
    """Repository for groups keyed by name.

    Deleting a group removes its levels and their permissions.
    """


@runtime_checkable
class IGroupLevelRepository(ICrudRepository[GroupLevel, GroupLevelId], Protocol):
    """Repository for group levels keyed by (group name, level name)."""

    async def find_by_group_name(self, group_name: str) -> list[GroupLevel]:
        """List every level of a group (empty if the group has none)."""
        ...


@runtime_checkable
class IPermissionRepository(ICrudRepository[Permission, PermissionId], Protocol):
    """Repository for permissions keyed by (subject, group name, level name)."""

    async def find_by_subject(self, subject: int) -> list[Permission]:
        """List every permission held by a user."""
        ...
