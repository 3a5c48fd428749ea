"""Ports (interfaces) for IAM bounded context.

Ports define the contracts for repositories and domain services without
specifying implementation details. This allows for dependency inversion
and makes the domain layer independent of infrastructure.
"""

from iam.ports.exceptions import (
    ConcurrencyConflictError,
    ConstraintViolationError,
    InsufficientGrantError,
    NotAuthenticatedError,
)
from iam.ports.repositories import (
    ICrudRepository,
    IGroupLevelRepository,
    IGroupRepository,
    IPermissionRepository,
    IUserRepository,
)

__all__ = [
    "ConcurrencyConflictError",
    "ConstraintViolationError",
    "ICrudRepository",
    "IGroupLevelRepository",
    "IGroupRepository",
    "IPermissionRepository",
    "IUserRepository",
    "InsufficientGrantError",
    "NotAuthenticatedError",
]
