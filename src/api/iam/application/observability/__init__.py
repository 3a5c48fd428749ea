"""Domain-Oriented Observability for IAM application layer.

Probes for application service operations following Domain-Oriented Observability patterns.
"""

from iam.application.observability.authentication_probe import (
    AuthenticationProbe,
    DefaultAuthenticationProbe,
)
from iam.application.observability.authorization_service_probe import (
    AuthorizationServiceProbe,
    DefaultAuthorizationServiceProbe,
)
from iam.application.observability.group_service_probe import (
    DefaultGroupServiceProbe,
    GroupServiceProbe,
)
from iam.application.observability.user_service_probe import (
    DefaultUserServiceProbe,
    UserServiceProbe,
)

__all__ = [
    "AuthenticationProbe",
    "DefaultAuthenticationProbe",
    "AuthorizationServiceProbe",
    "DefaultAuthorizationServiceProbe",
    "GroupServiceProbe",
    "DefaultGroupServiceProbe",
    "UserServiceProbe",
    "DefaultUserServiceProbe",
]
