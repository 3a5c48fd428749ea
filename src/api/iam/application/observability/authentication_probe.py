"""Protocol for authentication observability.

Defines the interface for domain probes that capture session gate events
for the get_session_identity dependency.
"""

from __future__ import annotations

from typing import Protocol

import structlog


class AuthenticationProbe(Protocol):
    """Domain probe for authentication operations."""

    def session_authenticated(self, subject: int) -> None:
        """Record that a request carried a valid session."""
        ...

    def authentication_failed(self, reason: str) -> None:
        """Record that a request was rejected by the session gate."""
        ...

    def grant_denied(self, subject: int, group_name: str, level_name: str) -> None:
        """Record that an authenticated user lacked a required grant."""
        ...


class DefaultAuthenticationProbe:
    """Default implementation of AuthenticationProbe using structlog."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None):
        self._logger = logger or structlog.get_logger()

    def session_authenticated(self, subject: int) -> None:
        """Record that a request carried a valid session."""
        self._logger.debug("session_authenticated", subject=subject)

    def authentication_failed(self, reason: str) -> None:
        """Record that a request was rejected by the session gate."""
        self._logger.info("authentication_failed", reason=reason)

    def grant_denied(self, subject: int, group_name: str, level_name: str) -> None:
        """Record that an authenticated user lacked a required grant."""
        self._logger.warning(
            "grant_denied",
            subject=subject,
            group_name=group_name,
            level_name=level_name,
        )
