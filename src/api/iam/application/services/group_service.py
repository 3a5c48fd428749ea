"""Group application service for IAM bounded context.

Manages groups and the levels inside them.
"""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from iam.application.observability import DefaultGroupServiceProbe, GroupServiceProbe
from iam.domain.aggregates import Group, GroupLevel
from iam.domain.value_objects import GroupLevelId
from iam.ports.repositories import IGroupLevelRepository, IGroupRepository


class GroupService:
    """Application service for group and group level management.

    Deletions rely on the cascading foreign keys: removing a group removes
    its levels and their permissions, removing a level removes its
    permissions, all inside the use case's transaction.
    """

    def __init__(
        self,
        group_repository: IGroupRepository,
        group_level_repository: IGroupLevelRepository,
        session: AsyncSession,
        probe: GroupServiceProbe | None = None,
    ):
        """Initialize GroupService with dependencies.

        Args:
            group_repository: Repository for group persistence
            group_level_repository: Repository for group level persistence
            session: Database session for transaction management
            probe: Optional domain probe for observability
        """
        self._group_repository = group_repository
        self._group_level_repository = group_level_repository
        self._session = session
        self._probe = probe or DefaultGroupServiceProbe()

    async def create_group(self, group_name: str) -> Group:
        """Create a new group.

        Raises:
            ValueError: If the name is empty
            ConstraintViolationError: If the group already exists
        """
        async with self._session.begin():
            group = await self._group_repository.save(Group(group_name=group_name))

        self._probe.group_created(group_name)
        return group

    async def delete_group(self, group_name: str) -> bool:
        """Delete a group with all its levels and their permissions.

        Returns:
            True if deleted, False if the group did not exist
        """
        async with self._session.begin():
            group = await self._group_repository.find_by_id(group_name)
            if group is None:
                return False
            await self._group_repository.delete(group)

        self._probe.group_deleted(group_name)
        return True

    async def create_level(self, group_name: str, level_name: str) -> GroupLevel:
        """Add a level to an existing group.

        Raises:
            ValueError: If the level name is empty
            ConstraintViolationError: If the group does not exist or the
                level is already defined
        """
        async with self._session.begin():
            level = await self._group_level_repository.save(
                GroupLevel(group_name=group_name, level_name=level_name)
            )

        self._probe.level_created(group_name, level_name)
        return level

    async def delete_level(self, group_name: str, level_name: str) -> bool:
        """Remove a level and every permission granting it.

        Returns:
            True if deleted, False if the level did not exist
        """
        key = GroupLevelId(group_name=group_name, level_name=level_name)
        async with self._session.begin():
            level = await self._group_level_repository.find_by_id(key)
            if level is None:
                return False
            await self._group_level_repository.delete(level)

        self._probe.level_deleted(group_name, level_name)
        return True

    async def list_levels(self, group_name: str) -> list[GroupLevel]:
        """List the levels defined for a group."""
        async with self._session.begin():
            levels = await self._group_level_repository.find_by_group_name(group_name)

        self._probe.levels_listed(group_name, count=len(levels))
        return levels
