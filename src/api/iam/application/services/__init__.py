"""Application services for IAM bounded context.

Services orchestrate repositories and own the transaction of each use case.
"""

from iam.application.services.authorization_service import AuthorizationService
from iam.application.services.group_service import GroupService
from iam.application.services.user_service import UserService

__all__ = [
    "AuthorizationService",
    "GroupService",
    "UserService",
]
