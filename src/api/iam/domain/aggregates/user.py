"""User aggregate for IAM context."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from email_validator import EmailNotValidError, validate_email


@dataclass
class User:
    """User aggregate representing a person signed in through Google.

    Users are keyed by the subject the identity provider assigns, which
    never changes once the user exists. Profile fields (full name, email,
    picture) are refreshed from the provider on every login.

    version, created_at and updated_at are managed by the repository; a
    version of None marks a user that has not been persisted yet.
    """

    subject: int
    full_name: str
    email: str
    picture: str | None = None
    version: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        try:
            validate_email(self.email, check_deliverability=False)
        except EmailNotValidError as e:
            raise ValueError(f"Invalid email address: {self.email!r}") from e

    @property
    def id(self) -> int:
        """The user's key (the identity-provider subject)."""
        return self.subject

    def update_profile(
        self, full_name: str, email: str, picture: str | None
    ) -> bool:
        """Apply profile data from the identity provider.

        Args:
            full_name: Display name from the provider
            email: Email address from the provider
            picture: Picture URL from the provider

        Returns:
            True if any field changed

        Raises:
            ValueError: If the email address is not syntactically valid
        """
        if (self.full_name, self.email, self.picture) == (full_name, email, picture):
            return False

        try:
            validate_email(email, check_deliverability=False)
        except EmailNotValidError as e:
            raise ValueError(f"Invalid email address: {email!r}") from e

        self.full_name = full_name
        self.email = email
        self.picture = picture
        return True

    def __str__(self) -> str:
        """Return string representation."""
        return f"User({self.subject})"
