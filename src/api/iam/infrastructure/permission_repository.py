"""PostgreSQL implementation of IPermissionRepository."""

from __future__ import annotations

from typing import Any

from sqlalchemy import select

from iam.domain.aggregates import Permission
from iam.domain.value_objects import PermissionId
from iam.infrastructure.models import PermissionModel
from iam.infrastructure.versioned_repository import VersionedRepository
from iam.ports.repositories import IPermissionRepository


class PermissionRepository(
    VersionedRepository[Permission, PermissionId, PermissionModel],
    IPermissionRepository,
):
    """PostgreSQL-backed repository for Permission aggregates.

    A permission can only be stored when both its user and its group level
    exist (fk_permission_user, fk_permission_group_level).
    """

    model = PermissionModel
    entity_name = "permission"

    def _key_of(self, entity: Permission) -> PermissionId:
        return entity.id

    def _key_values(self, key: PermissionId) -> tuple[Any, ...]:
        return (key.subject, key.group_name, key.level_name)

    def _column_values(self, entity: Permission) -> dict[str, Any]:
        return {
            "subject": entity.subject,
            "group_name": entity.group_name,
            "level_name": entity.level_name,
        }

    def _to_domain(self, model: PermissionModel) -> Permission:
        return Permission(
            subject=model.subject,
            group_name=model.group_name,
            level_name=model.level_name,
            version=model.version,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    async def find_by_subject(self, subject: int) -> list[Permission]:
        """List every permission held by a user, ordered by group and level."""
        stmt = (
            select(PermissionModel)
            .where(PermissionModel.subject == subject)
            .order_by(PermissionModel.group_name, PermissionModel.level_name)
        )
        result = await self._session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]
