"""PostgreSQL implementation of IGroupRepository.

Deleting a group row cascades to its levels and, through the levels, to
every permission granting them. Both cascades are foreign-key actions, so
they commit or roll back with the delete itself.
"""

from __future__ import annotations

from typing import Any

from iam.domain.aggregates import Group
from iam.infrastructure.models import GroupModel
from iam.infrastructure.versioned_repository import VersionedRepository
from iam.ports.repositories import IGroupRepository


class GroupRepository(VersionedRepository[Group, str, GroupModel], IGroupRepository):
    """PostgreSQL-backed repository for Group aggregates."""

    model = GroupModel
    entity_name = "group"

    def _key_of(self, entity: Group) -> str:
        return entity.group_name

    def _key_values(self, key: str) -> tuple[Any, ...]:
        return (key,)

    def _column_values(self, entity: Group) -> dict[str, Any]:
        return {"group_name": entity.group_name}

    def _to_domain(self, model: GroupModel) -> Group:
        return Group(
            group_name=model.group_name,
            version=model.version,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
