"""SQLAlchemy ORM model for the permissions table."""

from sqlalchemy import ForeignKey, ForeignKeyConstraint, Index, String
from sqlalchemy.orm import Mapped, mapped_column

from infrastructure.database.models import (
    Base,
    SubjectType,
    TimestampMixin,
    VersionMixin,
)


class PermissionModel(Base, TimestampMixin, VersionMixin):
    """ORM model for permissions table.

    Foreign Key Constraints:
    - subject references users.subject with CASCADE delete
    - (group_name, level_name) references group_levels with CASCADE delete

    Either parent disappearing removes the permission in the same
    transaction as the parent delete.
    """

    __tablename__ = "permissions"
    __table_args__ = (
        ForeignKeyConstraint(
            ["group_name", "level_name"],
            ["group_levels.group_name", "group_levels.level_name"],
            name="fk_permission_group_level",
            ondelete="CASCADE",
        ),
        Index("ix_permissions_group_level", "group_name", "level_name"),
    )

    subject: Mapped[int] = mapped_column(
        SubjectType(),
        ForeignKey("users.subject", name="fk_permission_user", ondelete="CASCADE"),
        primary_key=True,
    )
    group_name: Mapped[str] = mapped_column(String(255), primary_key=True)
    level_name: Mapped[str] = mapped_column(String(255), primary_key=True)

    def __repr__(self) -> str:
        """Return string representation."""
        return (
            f"<PermissionModel(subject={self.subject}, group_name={self.group_name}, "
            f"level_name={self.level_name}, version={self.version})>"
        )
