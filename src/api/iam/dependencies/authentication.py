"""Session gate dependencies.

Every protected route depends on ``get_session_identity``; routes that need
a specific (group, level) grant additionally depend on ``require_grant``.
"""

from collections.abc import Awaitable, Callable
from functools import lru_cache
from typing import Annotated

from fastapi import Depends, Request

from iam.application.observability import (
    AuthenticationProbe,
    DefaultAuthenticationProbe,
)
from iam.application.services import AuthorizationService
from iam.application.value_objects import SessionIdentity
from iam.dependencies.authorization import get_authorization_service
from iam.ports.exceptions import InsufficientGrantError, NotAuthenticatedError
from infrastructure.settings import OIDCSettings, get_oidc_settings
from shared_kernel.auth import (
    GOOGLE_ISSUERS,
    DefaultJWTValidatorProbe,
    InvalidTokenError,
    JWTValidator,
)


@lru_cache
def get_jwt_validator() -> JWTValidator:
    """Get cached ID token validator.

    Uses lru_cache so a single instance, and therefore a single JWKS cache,
    is shared across requests.
    """
    settings = get_oidc_settings()
    accepted_issuers = (
        GOOGLE_ISSUERS if settings.issuer_url.rstrip("/") in GOOGLE_ISSUERS else None
    )
    return JWTValidator(
        issuer_url=settings.issuer_url,
        audience=settings.client_id,
        probe=DefaultJWTValidatorProbe(),
        accepted_issuers=accepted_issuers,
    )


def get_authentication_probe() -> AuthenticationProbe:
    """Get AuthenticationProbe instance."""
    return DefaultAuthenticationProbe()


async def get_session_identity(
    request: Request,
    settings: Annotated[OIDCSettings, Depends(get_oidc_settings)],
    validator: Annotated[JWTValidator, Depends(get_jwt_validator)],
    probe: Annotated[AuthenticationProbe, Depends(get_authentication_probe)],
) -> SessionIdentity:
    """Resolve the identity of the request from its session cookie.

    Raises:
        NotAuthenticatedError: If the cookie is missing, or the ID token it
            carries is invalid or expired
    """
    token = request.cookies.get(settings.session_cookie_name)
    if not token:
        probe.authentication_failed(reason="Missing session cookie")
        raise NotAuthenticatedError("Not authenticated")

    try:
        identity = SessionIdentity.from_claims(await validator.validate_token(token))
    except InvalidTokenError as e:
        probe.authentication_failed(reason=str(e))
        raise NotAuthenticatedError(str(e)) from e
    except ValueError as e:
        probe.authentication_failed(reason="Non-numeric subject")
        raise NotAuthenticatedError("Invalid subject") from e

    probe.session_authenticated(identity.subject)
    return identity


def require_grant(
    group_name: str, level_name: str
) -> Callable[..., Awaitable[SessionIdentity]]:
    """Build a dependency that admits only users holding (group, level).

    Usage:

        @router.get("/admin", dependencies=[Depends(require_grant("admin", "superadmin"))])

    Raises:
        InsufficientGrantError: From the built dependency, if the user does
            not hold the grant
    """

    async def _require_grant(
        identity: Annotated[SessionIdentity, Depends(get_session_identity)],
        service: Annotated[AuthorizationService, Depends(get_authorization_service)],
        probe: Annotated[AuthenticationProbe, Depends(get_authentication_probe)],
    ) -> SessionIdentity:
        if not await service.has_grant(identity.subject, group_name, level_name):
            probe.grant_denied(identity.subject, group_name, level_name)
            raise InsufficientGrantError(identity.subject, group_name, level_name)
        return identity

    return _require_grant
