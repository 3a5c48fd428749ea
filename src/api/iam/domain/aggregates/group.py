"""Group aggregate for IAM context."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Group:
    """A named group that owns a set of levels.

    Deleting a group deletes its levels and, through them, every permission
    granting one of those levels.
    """

    group_name: str
    version: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        if not self.group_name or not self.group_name.strip():
            raise ValueError("Group name must not be empty")

    @property
    def id(self) -> str:
        """The group's key (its name)."""
        return self.group_name
