"""Protocol for user application service observability.

Defines the interface for domain probes that capture application-level
domain events for user service operations.
"""

from __future__ import annotations

from typing import Protocol

import structlog


class UserServiceProbe(Protocol):
    """Domain probe for user application service operations."""

    def user_ensured(self, subject: int, was_created: bool, was_updated: bool) -> None:
        """Record that a user was ensured to exist (found, created or updated)."""
        ...

    def user_provision_failed(self, subject: int, error: str) -> None:
        """Record that user provisioning failed."""
        ...

    def user_deleted(self, subject: int) -> None:
        """Record that a user and their permissions were deleted."""
        ...


class DefaultUserServiceProbe:
    """Default implementation of UserServiceProbe using structlog."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None):
        self._logger = logger or structlog.get_logger()

    def user_ensured(self, subject: int, was_created: bool, was_updated: bool) -> None:
        """Record that a user was ensured to exist (found, created or updated)."""
        self._logger.info(
            "user_ensured",
            subject=subject,
            was_created=was_created,
            was_updated=was_updated,
        )

    def user_provision_failed(self, subject: int, error: str) -> None:
        """Record that user provisioning failed."""
        self._logger.error("user_provision_failed", subject=subject, error=error)

    def user_deleted(self, subject: int) -> None:
        """Record that a user and their permissions were deleted."""
        self._logger.info("user_deleted", subject=subject)
