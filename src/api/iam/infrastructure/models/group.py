"""SQLAlchemy ORM model for the groups table."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from infrastructure.database.models import Base, TimestampMixin, VersionMixin


class GroupModel(Base, TimestampMixin, VersionMixin):
    """ORM model for groups table.

    Group names are globally unique and serve as the primary key. Levels
    reference the group through group_levels.group_name with ON DELETE
    CASCADE, so deleting a group row removes its levels in the same
    statement.
    """

    __tablename__ = "groups"

    group_name: Mapped[str] = mapped_column(String(255), primary_key=True)

    def __repr__(self) -> str:
        """Return string representation."""
        return f"<GroupModel(group_name={self.group_name}, version={self.version})>"
