"""Protocol for group application service observability.

Defines the interface for domain probes that capture application-level
domain events for group and group level management.
"""

from __future__ import annotations

from typing import Protocol

import structlog


class GroupServiceProbe(Protocol):
    """Domain probe for group application service operations."""

    def group_created(self, group_name: str) -> None:
        ...

    def group_deleted(self, group_name: str) -> None:
        ...

    def level_created(self, group_name: str, level_name: str) -> None:
        ...

    def level_deleted(self, group_name: str, level_name: str) -> None:
        ...

    def levels_listed(self, group_name: str, count: int) -> None:
        ...


class DefaultGroupServiceProbe:
    """Default implementation of GroupServiceProbe using structlog."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None):
        self._logger = logger or structlog.get_logger()

    def group_created(self, group_name: str) -> None:
        """Record that a group was created."""
        self._logger.info("group_created", group_name=group_name)

    def group_deleted(self, group_name: str) -> None:
        """Record that a group was deleted along with its levels and permissions."""
        self._logger.info("group_deleted", group_name=group_name)

    def level_created(self, group_name: str, level_name: str) -> None:
        """Record that a level was added to a group."""
        self._logger.info(
            "group_level_created", group_name=group_name, level_name=level_name
        )

    def level_deleted(self, group_name: str, level_name: str) -> None:
        """Record that a level was removed along with its permissions."""
        self._logger.info(
            "group_level_deleted", group_name=group_name, level_name=level_name
        )

    def levels_listed(self, group_name: str, count: int) -> None:
        """Record that the levels of a group were listed."""
        self._logger.debug("group_levels_listed", group_name=group_name, count=count)
