"""User application service for IAM bounded context.

Handles user provisioning from Google sign-in with JIT (just-in-time) creation.
"""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from iam.application.observability import DefaultUserServiceProbe, UserServiceProbe
from iam.application.value_objects import SessionIdentity
from iam.domain.aggregates import User
from iam.ports.exceptions import ConstraintViolationError
from iam.ports.repositories import IUserRepository


class UserService:
    """Application service for user management.

    Each use case runs in its own transaction.
    """

    def __init__(
        self,
        user_repository: IUserRepository,
        session: AsyncSession,
        probe: UserServiceProbe | None = None,
    ):
        """Initialize UserService with dependencies.

        Args:
            user_repository: Repository for user persistence
            session: Database session for transaction management
            probe: Optional domain probe for observability
        """
        self._user_repository = user_repository
        self._probe = probe or DefaultUserServiceProbe()
        self._session = session

    async def ensure_user(self, identity: SessionIdentity) -> User:
        """Ensure the signed-in user exists (find-or-create pattern).

        Creates the user on first login and syncs the profile fields when
        Google reports different values. The update carries the version read
        in the same transaction, so a concurrent login for the same user
        surfaces as ConcurrencyConflictError instead of a lost update.

        Two simultaneous first logins race on the insert; the loser re-reads
        once and continues with the row the winner created.

        Args:
            identity: Verified identity from the ID token

        Returns:
            The User aggregate (existing, updated or newly created)

        Raises:
            ValueError: If the identity has no valid email address
            ConcurrencyConflictError: If another writer updated the user first
        """
        if not identity.email:
            raise ValueError("Identity provider did not return an email address")
        full_name = identity.full_name or identity.email

        try:
            try:
                return await self._provision(identity, full_name, identity.email)
            except ConstraintViolationError:
                return await self._provision(identity, full_name, identity.email)
        except Exception as e:
            self._probe.user_provision_failed(identity.subject, error=str(e))
            raise

    async def _provision(
        self, identity: SessionIdentity, full_name: str, email: str
    ) -> User:
        async with self._session.begin():
            existing = await self._user_repository.find_by_id(identity.subject)

            if existing is None:
                user = User(
                    subject=identity.subject,
                    full_name=full_name,
                    email=email,
                    picture=identity.picture,
                )
                user = await self._user_repository.save(user)
                self._probe.user_ensured(
                    identity.subject, was_created=True, was_updated=False
                )
                return user

            if existing.update_profile(full_name, email, identity.picture):
                existing = await self._user_repository.save(existing)
                self._probe.user_ensured(
                    identity.subject, was_created=False, was_updated=True
                )
                return existing

            self._probe.user_ensured(
                identity.subject, was_created=False, was_updated=False
            )
            return existing

    async def get_user(self, subject: int) -> User | None:
        """Look up a user by subject."""
        async with self._session.begin():
            return await self._user_repository.find_by_id(subject)

    async def delete_user(self, subject: int) -> bool:
        """Delete a user together with every permission they hold.

        Returns:
            True if deleted, False if the user did not exist
        """
        async with self._session.begin():
            user = await self._user_repository.find_by_id(subject)
            if user is None:
                return False
            await self._user_repository.delete(user)

        self._probe.user_deleted(subject)
        return True
