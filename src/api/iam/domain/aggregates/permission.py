"""Permission aggregate for IAM context."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from iam.domain.value_objects import Grant, PermissionId


@dataclass
class Permission:
    """Grants a user one level of one group.

    The permission disappears when either the user or the group level it
    points to is deleted.
    """

    subject: int
    group_name: str
    level_name: str
    version: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def id(self) -> PermissionId:
        return PermissionId(
            subject=self.subject,
            group_name=self.group_name,
            level_name=self.level_name,
        )

    @property
    def grant(self) -> Grant:
        """The (group, level) pair this permission confers."""
        return Grant(group_name=self.group_name, level_name=self.level_name)
