"""Protocol for authorization service observability.

Captures grant and revoke operations as well as grant checks.
"""

from __future__ import annotations

from typing import Protocol

import structlog


class AuthorizationServiceProbe(Protocol):
    """Domain probe for authorization service operations."""

    def permission_granted(self, subject: int, group_name: str, level_name: str) -> None:
        ...

    def permission_revoked(self, subject: int, group_name: str, level_name: str) -> None:
        ...

    def grant_checked(
        self, subject: int, group_name: str, level_name: str, allowed: bool
    ) -> None:
        ...


class DefaultAuthorizationServiceProbe:
    """Default implementation of AuthorizationServiceProbe using structlog."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None):
        self._logger = logger or structlog.get_logger()

    def permission_granted(self, subject: int, group_name: str, level_name: str) -> None:
        """Record that a user received a (group, level) grant."""
        self._logger.info(
            "permission_granted",
            subject=subject,
            group_name=group_name,
            level_name=level_name,
        )

    def permission_revoked(self, subject: int, group_name: str, level_name: str) -> None:
        """Record that a user lost a (group, level) grant."""
        self._logger.info(
            "permission_revoked",
            subject=subject,
            group_name=group_name,
            level_name=level_name,
        )

    def grant_checked(
        self, subject: int, group_name: str, level_name: str, allowed: bool
    ) -> None:
        """Record the outcome of a grant check."""
        self._logger.debug(
            "grant_checked",
            subject=subject,
            group_name=group_name,
            level_name=level_name,
            allowed=allowed,
        )
