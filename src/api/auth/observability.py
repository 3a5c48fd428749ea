"""Domain-oriented observability for the sign-in flow.

Follows the Domain Oriented Observability pattern from Martin Fowler.
"""

from typing import Protocol

import structlog


class AuthFlowProbe(Protocol):
    """Observability probe for the Google sign-in flow."""

    def login_initiated(self) -> None:
        """Called when a login flow is initiated."""
        ...

    def callback_received(self, state: str) -> None:
        """Called when an OAuth2 callback is received."""
        ...

    def invalid_state(self, state: str) -> None:
        """Called when the callback state does not match the login cookie."""
        ...

    def discovery_failed(self, error: str) -> None:
        """Called when OIDC discovery fails."""
        ...

    def token_exchange_failed(self, error: str) -> None:
        """Called when the authorization code cannot be exchanged."""
        ...

    def login_succeeded(self, subject: int) -> None:
        """Called when a user completed sign-in."""
        ...

    def login_failed(self, reason: str) -> None:
        """Called when sign-in ends on the failure page."""
        ...

    def logged_out(self) -> None:
        """Called when a session is terminated."""
        ...


class DefaultAuthFlowProbe:
    """Default implementation of AuthFlowProbe using structlog."""

    def __init__(self) -> None:
        self._logger = structlog.get_logger(__name__)

    def login_initiated(self) -> None:
        self._logger.info("oidc_login_initiated")

    def callback_received(self, state: str) -> None:
        self._logger.info(
            "oidc_callback_received",
            state_prefix=state[:8],
        )

    def invalid_state(self, state: str) -> None:
        self._logger.warning(
            "oidc_invalid_state",
            state_prefix=state[:8],
        )

    def discovery_failed(self, error: str) -> None:
        self._logger.error("oidc_discovery_failed", error=error)

    def token_exchange_failed(self, error: str) -> None:
        self._logger.warning("oidc_token_exchange_failed", error=error)

    def login_succeeded(self, subject: int) -> None:
        self._logger.info("oidc_login_succeeded", subject=subject)

    def login_failed(self, reason: str) -> None:
        self._logger.warning("oidc_login_failed", reason=reason)

    def logged_out(self) -> None:
        self._logger.info("session_logged_out")
