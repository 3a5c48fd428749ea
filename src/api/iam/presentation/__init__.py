"""IAM presentation layer.

Exposes the authenticated user's own profile and claims.
"""

from iam.presentation.routes import router

__all__ = ["router"]
