"""PostgreSQL implementation of IGroupLevelRepository."""

from __future__ import annotations

from typing import Any

from sqlalchemy import select

from iam.domain.aggregates import GroupLevel
from iam.domain.value_objects import GroupLevelId
from iam.infrastructure.models import GroupLevelModel
from iam.infrastructure.versioned_repository import VersionedRepository
from iam.ports.repositories import IGroupLevelRepository


class GroupLevelRepository(
    VersionedRepository[GroupLevel, GroupLevelId, GroupLevelModel],
    IGroupLevelRepository,
):
    """PostgreSQL-backed repository for GroupLevel aggregates.

    Saving a level whose group does not exist fails on the
    fk_group_level_group foreign key.
    """

    model = GroupLevelModel
    entity_name = "group_level"

    def _key_of(self, entity: GroupLevel) -> GroupLevelId:
        return entity.id

    def _key_values(self, key: GroupLevelId) -> tuple[Any, ...]:
        return (key.group_name, key.level_name)

    def _column_values(self, entity: GroupLevel) -> dict[str, Any]:
        return {"group_name": entity.group_name, "level_name": entity.level_name}

    def _to_domain(self, model: GroupLevelModel) -> GroupLevel:
        return GroupLevel(
            group_name=model.group_name,
            level_name=model.level_name,
            version=model.version,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    async def find_by_group_name(self, group_name: str) -> list[GroupLevel]:
        """List every level of a group.

        Args:
            group_name: The group to list levels for

        Returns:
            Levels ordered by name; empty if the group has none or is unknown
        """
        stmt = (
            select(GroupLevelModel)
            .where(GroupLevelModel.group_name == group_name)
            .order_by(GroupLevelModel.level_name)
        )
        result = await self._session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]
