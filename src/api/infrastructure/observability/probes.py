"""Domain probes for infrastructure observability.

Domain probes provide a high-level instrumentation API oriented around
domain semantics, keeping infrastructure code clean and testable.
"""

from __future__ import annotations

from typing import Protocol

import structlog


class ConnectionProbe(Protocol):
    """Domain probe for database engine lifecycle events."""

    def engine_created(self, url: str) -> None:
        """Record that the async engine was created."""
        ...

    def pool_closed(self) -> None:
        """Record that the connection pool was disposed."""
        ...


class DefaultConnectionProbe:
    """Default implementation of ConnectionProbe using structlog."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None):
        self._logger = logger or structlog.get_logger()

    def engine_created(self, url: str) -> None:
        """Record that the async engine was created.

        The URL must not contain credentials.
        """
        self._logger.info("database_engine_created", url=url)

    def pool_closed(self) -> None:
        """Record that the connection pool was disposed."""
        self._logger.info("connection_pool_closed")


class StartupProbe(Protocol):
    """Domain probe for application startup and shutdown."""

    def application_started(self, version: str, allowed_origin: str) -> None:
        ...

    def oidc_client_not_configured(self) -> None:
        ...

    def application_stopped(self) -> None:
        ...


class DefaultStartupProbe:
    """Default implementation of StartupProbe using structlog."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None):
        self._logger = logger or structlog.get_logger()

    def application_started(self, version: str, allowed_origin: str) -> None:
        """Record that the application finished starting."""
        self._logger.info(
            "application_started",
            version=version,
            allowed_origin=allowed_origin,
        )

    def oidc_client_not_configured(self) -> None:
        """Record that no OIDC client ID is set, so logins will fail."""
        self._logger.warning(
            "oidc_client_not_configured",
            hint="set TRICORE_OIDC_CLIENT_ID and TRICORE_OIDC_CLIENT_SECRET",
        )

    def application_stopped(self) -> None:
        """Record that the application shut down."""
        self._logger.info("application_stopped")


class RequestErrorProbe(Protocol):
    """Domain probe for errors translated into HTTP problem responses."""

    def request_rejected(self, path: str, status: int, error: str) -> None:
        ...

    def unhandled_exception(self, path: str, error: Exception) -> None:
        ...


class DefaultRequestErrorProbe:
    """Default implementation of RequestErrorProbe using structlog."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None):
        self._logger = logger or structlog.get_logger()

    def request_rejected(self, path: str, status: int, error: str) -> None:
        """Record a client or conflict error returned as a problem document."""
        self._logger.info("request_rejected", path=path, status=status, error=error)

    def unhandled_exception(self, path: str, error: Exception) -> None:
        """Record an unexpected exception, including its traceback."""
        self._logger.error(
            "unhandled_exception",
            path=path,
            error_type=type(error).__name__,
            exc_info=error,
        )
