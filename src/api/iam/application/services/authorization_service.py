"""Authorization service for IAM bounded context.

A read projection over permission rows plus the use cases that create and
remove them. There is no rule engine: a user holds a grant exactly when a
matching permission row exists.
"""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from iam.application.observability import (
    AuthorizationServiceProbe,
    DefaultAuthorizationServiceProbe,
)
from iam.domain.aggregates import Permission
from iam.domain.value_objects import Grant, PermissionId
from iam.ports.repositories import IPermissionRepository


class AuthorizationService:
    """Application service answering "which (group, level) pairs does a user hold"."""

    def __init__(
        self,
        permission_repository: IPermissionRepository,
        session: AsyncSession,
        probe: AuthorizationServiceProbe | None = None,
    ):
        """Initialize AuthorizationService with dependencies.

        Args:
            permission_repository: Repository for permission persistence
            session: Database session for transaction management
            probe: Optional domain probe for observability
        """
        self._permission_repository = permission_repository
        self._session = session
        self._probe = probe or DefaultAuthorizationServiceProbe()

    async def grant(self, subject: int, group_name: str, level_name: str) -> Permission:
        """Give a user a (group, level) grant.

        Raises:
            ConstraintViolationError: If the user or the group level does not
                exist, or the grant is already present
        """
        async with self._session.begin():
            permission = await self._permission_repository.save(
                Permission(subject=subject, group_name=group_name, level_name=level_name)
            )

        self._probe.permission_granted(subject, group_name, level_name)
        return permission

    async def revoke(self, subject: int, group_name: str, level_name: str) -> bool:
        """Remove a (group, level) grant from a user.

        Returns:
            True if revoked, False if the user did not hold it
        """
        key = PermissionId(subject=subject, group_name=group_name, level_name=level_name)
        async with self._session.begin():
            permission = await self._permission_repository.find_by_id(key)
            if permission is None:
                return False
            await self._permission_repository.delete(permission)

        self._probe.permission_revoked(subject, group_name, level_name)
        return True

    async def grants_for_user(self, subject: int) -> frozenset[Grant]:
        """Return every (group, level) pair the user holds.

        Unknown users simply hold no grants.
        """
        async with self._session.begin():
            permissions = await self._permission_repository.find_by_subject(subject)

        return frozenset(permission.grant for permission in permissions)

    async def has_grant(self, subject: int, group_name: str, level_name: str) -> bool:
        """Check whether the user holds a specific (group, level) grant."""
        key = PermissionId(subject=subject, group_name=group_name, level_name=level_name)
        async with self._session.begin():
            allowed = await self._permission_repository.find_by_id(key) is not None

        self._probe.grant_checked(subject, group_name, level_name, allowed=allowed)
        return allowed
