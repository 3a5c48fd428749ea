"""SQLAlchemy ORM models for IAM bounded context.

These models map to database tables and are used by repository implementations.
"""

from iam.infrastructure.models.group import GroupModel
from iam.infrastructure.models.group_level import GroupLevelModel
from iam.infrastructure.models.permission import PermissionModel
from iam.infrastructure.models.user import UserModel

__all__ = [
    "GroupLevelModel",
    "GroupModel",
    "PermissionModel",
    "UserModel",
]
