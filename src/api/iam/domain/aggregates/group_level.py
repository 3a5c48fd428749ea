"""GroupLevel aggregate for IAM context."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from iam.domain.value_objects import GroupLevelId


@dataclass
class GroupLevel:
    """A level inside a group, e.g. ("admin", "superadmin").

    The group must exist before a level can be stored in it.
    """

    group_name: str
    level_name: str
    version: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        if not self.level_name or not self.level_name.strip():
            raise ValueError("Level name must not be empty")

    @property
    def id(self) -> GroupLevelId:
        return GroupLevelId(group_name=self.group_name, level_name=self.level_name)
