"""HTTP routes for IAM bounded context.

Both endpoints answer from the verified session and never touch the
database.
"""

from __future__ import annotations

from typing import Annotated, Any

from fastapi import APIRouter, Depends

from iam.application.value_objects import SessionIdentity
from iam.dependencies.authentication import get_session_identity
from iam.presentation.models import UserInfoResponse

router = APIRouter(tags=["user"])


@router.get("/user-info", response_model_by_alias=True)
async def get_user_info(
    identity: Annotated[SessionIdentity, Depends(get_session_identity)],
) -> UserInfoResponse:
    """Return name, email and picture of the signed-in user.

    Responds 401 with an empty body when there is no valid session.
    """
    return UserInfoResponse.from_identity(identity)


@router.get("/user/claims")
async def get_user_claims(
    identity: Annotated[SessionIdentity, Depends(get_session_identity)],
) -> dict[str, Any]:
    """Return every claim of the ID token backing the session."""
    return identity.claims
