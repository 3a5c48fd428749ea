"""Value objects for IAM domain.

Value objects are immutable descriptors that provide type safety and
domain semantics for identifiers and domain concepts. The composite keys
hash structurally, so they can be used directly as mapping keys.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple


@dataclass(frozen=True)
class GroupLevelId:
    """Composite identifier of a GroupLevel: the group and the level name."""

    group_name: str
    level_name: str

    def __str__(self) -> str:
        """Return string representation."""
        return f"{self.group_name}/{self.level_name}"


@dataclass(frozen=True)
class PermissionId:
    """Composite identifier of a Permission.

    A permission is keyed by the user's subject and the (group, level) pair
    it grants.
    """

    subject: int
    group_name: str
    level_name: str

    def __str__(self) -> str:
        """Return string representation."""
        return f"{self.subject}@{self.group_name}/{self.level_name}"

    @property
    def group_level_id(self) -> GroupLevelId:
        """The GroupLevel this permission refers to."""
        return GroupLevelId(group_name=self.group_name, level_name=self.level_name)


class Grant(NamedTuple):
    """A (group, level) pair held by a user.

    Compares equal to the plain tuple ``(group_name, level_name)``.
    """

    group_name: str
    level_name: str
