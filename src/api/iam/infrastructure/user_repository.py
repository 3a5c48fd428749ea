"""PostgreSQL implementation of IUserRepository.

Users are provisioned from Google sign-in; the repository stores their
profile and lets ON DELETE CASCADE drop their permissions.
"""

from __future__ import annotations

from typing import Any

from iam.domain.aggregates import User
from iam.infrastructure.models import UserModel
from iam.infrastructure.versioned_repository import VersionedRepository
from iam.ports.repositories import IUserRepository


class UserRepository(VersionedRepository[User, int, UserModel], IUserRepository):
    """PostgreSQL-backed repository for User aggregates."""

    model = UserModel
    entity_name = "user"

    def _key_of(self, entity: User) -> int:
        return entity.subject

    def _key_values(self, key: int) -> tuple[Any, ...]:
        return (key,)

    def _column_values(self, entity: User) -> dict[str, Any]:
        return {
            "subject": entity.subject,
            "fullname": entity.full_name,
            "email": entity.email,
            "picture": entity.picture,
        }

    def _to_domain(self, model: UserModel) -> User:
        return User(
            subject=model.subject,
            full_name=model.fullname,
            email=model.email,
            picture=model.picture,
            version=model.version,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
