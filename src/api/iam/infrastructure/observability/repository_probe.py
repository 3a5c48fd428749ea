"""Domain probe for IAM repository operations.

Following Domain-Oriented Observability patterns, this probe captures
domain-significant events from the user, group, group level and permission
repositories. Each repository binds its entity name once so every event
carries it.
"""

from __future__ import annotations

from typing import Protocol

import structlog


class RepositoryProbe(Protocol):
    """Domain probe for repository operations."""

    def entity_saved(self, key: str, version: int, created: bool) -> None:
        """Record that an entity was inserted or updated."""
        ...

    def entity_retrieved(self, key: str) -> None:
        """Record that an entity was retrieved."""
        ...

    def entity_not_found(self, key: str) -> None:
        """Record that a lookup by key found nothing."""
        ...

    def entity_deleted(self, key: str) -> None:
        """Record that an entity (and its cascade) was deleted."""
        ...

    def constraint_violated(self, key: str, error: str) -> None:
        """Record that a write was rejected by a database constraint."""
        ...

    def concurrency_conflict(self, key: str, expected_version: int) -> None:
        """Record that a write carried a stale version."""
        ...

    def for_entity(self, entity: str) -> RepositoryProbe:
        """Create a new probe bound to an entity name."""
        ...


class DefaultRepositoryProbe:
    """Default implementation of RepositoryProbe using structlog."""

    def __init__(
        self,
        logger: structlog.stdlib.BoundLogger | None = None,
        entity: str | None = None,
    ):
        self._logger = logger or structlog.get_logger()
        self._entity = entity

    def for_entity(self, entity: str) -> DefaultRepositoryProbe:
        """Create a new probe bound to an entity name."""
        return DefaultRepositoryProbe(logger=self._logger, entity=entity)

    def entity_saved(self, key: str, version: int, created: bool) -> None:
        """Record that an entity was inserted or updated."""
        self._logger.info(
            "entity_saved",
            entity=self._entity,
            key=key,
            version=version,
            created=created,
        )

    def entity_retrieved(self, key: str) -> None:
        """Record that an entity was retrieved."""
        self._logger.debug("entity_retrieved", entity=self._entity, key=key)

    def entity_not_found(self, key: str) -> None:
        """Record that a lookup by key found nothing."""
        self._logger.debug("entity_not_found", entity=self._entity, key=key)

    def entity_deleted(self, key: str) -> None:
        """Record that an entity (and its cascade) was deleted."""
        self._logger.info("entity_deleted", entity=self._entity, key=key)

    def constraint_violated(self, key: str, error: str) -> None:
        """Record that a write was rejected by a database constraint."""
        self._logger.warning(
            "entity_constraint_violated",
            entity=self._entity,
            key=key,
            error=error,
        )

    def concurrency_conflict(self, key: str, expected_version: int) -> None:
        """Record that a write carried a stale version."""
        self._logger.warning(
            "entity_concurrency_conflict",
            entity=self._entity,
            key=key,
            expected_version=expected_version,
        )
