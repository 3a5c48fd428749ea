"""SQLAlchemy ORM model for the users table.

Stores the profile Google returns for each signed-in user.
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from infrastructure.database.models import (
    Base,
    SubjectType,
    TimestampMixin,
    VersionMixin,
)


class UserModel(Base, TimestampMixin, VersionMixin):
    """ORM model for users table.

    Note: subject is NUMERIC(32, 0) because Google subjects exceed BIGINT.
    Permissions referencing a user are removed by ON DELETE CASCADE on
    permissions.subject.
    """

    __tablename__ = "users"

    subject: Mapped[int] = mapped_column(SubjectType(), primary_key=True)
    fullname: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(320), nullable=False)
    picture: Mapped[str | None] = mapped_column(String(2048), nullable=True)

    def __repr__(self) -> str:
        """Return string representation."""
        return f"<UserModel(subject={self.subject}, version={self.version})>"
