"""Pydantic models for IAM API responses."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from iam.application.value_objects import SessionIdentity


class UserInfoResponse(BaseModel):
    """Profile of the signed-in user as reported by the identity provider."""

    model_config = ConfigDict(populate_by_name=True)

    full_name: str | None = Field(
        default=None, alias="fullName", description="Display name"
    )
    email: str | None = Field(default=None, description="Email address")
    picture_url: str | None = Field(
        default=None, alias="pictureUrl", description="Profile picture URL"
    )

    @classmethod
    def from_identity(cls, identity: SessionIdentity) -> UserInfoResponse:
        return cls(
            full_name=identity.full_name,
            email=identity.email,
            picture_url=identity.picture,
        )
