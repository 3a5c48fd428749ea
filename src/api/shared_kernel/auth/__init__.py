"""Authentication shared kernel module."""

from shared_kernel.auth.jwt_validator import (
    GOOGLE_ISSUERS,
    IdentityClaims,
    InvalidTokenError,
    JWTValidator,
)
from shared_kernel.auth.observability import (
    DefaultJWTValidatorProbe,
    JWTValidatorProbe,
)

__all__ = [
    "GOOGLE_ISSUERS",
    "IdentityClaims",
    "InvalidTokenError",
    "JWTValidator",
    "JWTValidatorProbe",
    "DefaultJWTValidatorProbe",
]
