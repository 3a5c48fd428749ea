from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from iam.application.observability import (
    AuthorizationServiceProbe,
    DefaultAuthorizationServiceProbe,
)
from iam.application.services import AuthorizationService
from iam.infrastructure.permission_repository import PermissionRepository
from infrastructure.database.dependencies import get_session


def get_authorization_service_probe() -> AuthorizationServiceProbe:
    """Get AuthorizationServiceProbe instance."""
    return DefaultAuthorizationServiceProbe()


def get_permission_repository(
    session: Annotated[AsyncSession, Depends(get_session)],
) -> PermissionRepository:
    """Get PermissionRepository instance bound to the request session."""
    return PermissionRepository(session=session)


def get_authorization_service(
    permission_repo: Annotated[PermissionRepository, Depends(get_permission_repository)],
    session: Annotated[AsyncSession, Depends(get_session)],
    probe: Annotated[
        AuthorizationServiceProbe, Depends(get_authorization_service_probe)
    ],
) -> AuthorizationService:
    """Get AuthorizationService instance.

    Args:
        permission_repo: Permission repository (shares session via FastAPI dependency caching)
        session: Database session for transaction management
        probe: Authorization service probe for observability

    Returns:
        AuthorizationService instance
    """
    return AuthorizationService(
        permission_repository=permission_repo,
        session=session,
        probe=probe,
    )
