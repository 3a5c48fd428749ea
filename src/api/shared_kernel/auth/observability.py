"""Domain probe for ID token validation.

Following Domain-Oriented Observability patterns, this probe captures
domain-significant events of token validation and JWKS retrieval.

See: https://martinfowler.com/articles/domain-oriented-observability.html
"""

from __future__ import annotations

from typing import Protocol

import structlog


class JWTValidatorProbe(Protocol):
    """Domain probe for ID token validation."""

    def token_validated(self, user_id: str) -> None:
        """Record that a token was successfully validated."""
        ...

    def token_validation_failed(self, reason: str) -> None:
        """Record that token validation failed."""
        ...

    def jwks_fetched(self, key_count: int) -> None:
        """Record that JWKS was fetched from the issuer."""
        ...

    def jwks_cache_hit(self) -> None:
        """Record that JWKS was served from cache."""
        ...

    def jwks_fetch_failed(self, error: str) -> None:
        """Record that JWKS fetch failed."""
        ...


class DefaultJWTValidatorProbe:
    """Default implementation of JWTValidatorProbe using structlog."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None):
        self._logger = logger or structlog.get_logger()

    def token_validated(self, user_id: str) -> None:
        self._logger.debug("id_token_validated", user_id=user_id)

    def token_validation_failed(self, reason: str) -> None:
        self._logger.warning("id_token_validation_failed", reason=reason)

    def jwks_fetched(self, key_count: int) -> None:
        self._logger.info("jwks_fetched", key_count=key_count)

    def jwks_cache_hit(self) -> None:
        self._logger.debug("jwks_cache_hit")

    def jwks_fetch_failed(self, error: str) -> None:
        self._logger.error("jwks_fetch_failed", error=error)
