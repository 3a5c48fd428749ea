"""Application-layer value objects for IAM bounded context.

These are value objects specific to the application layer, representing
cross-cutting concerns like the authenticated session of a request.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from shared_kernel.auth import IdentityClaims


@dataclass(frozen=True)
class SessionIdentity:
    """The identity attached to an authenticated request.

    Built from the verified ID token stored in the session cookie. This is
    an application-layer concept (not domain) because it represents the
    authentication context of the request, not a persisted entity.
    """

    subject: int
    full_name: str | None
    email: str | None
    picture: str | None
    claims: dict[str, Any] = field(default_factory=dict, compare=False)

    @classmethod
    def from_claims(cls, claims: IdentityClaims) -> SessionIdentity:
        """Build the identity from validated ID token claims.

        Raises:
            ValueError: If the subject is not a decimal number
        """
        return cls(
            subject=int(claims.sub),
            full_name=claims.name,
            email=claims.email,
            picture=claims.picture,
            claims=claims.raw_claims,
        )
