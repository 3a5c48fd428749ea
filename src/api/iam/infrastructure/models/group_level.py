"""SQLAlchemy ORM model for the group_levels table."""

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from infrastructure.database.models import Base, TimestampMixin, VersionMixin


class GroupLevelModel(Base, TimestampMixin, VersionMixin):
    """ORM model for group_levels table.

    Foreign Key Constraint:
    - group_name references groups.group_name with CASCADE delete
    - permissions reference (group_name, level_name) with CASCADE delete
    """

    __tablename__ = "group_levels"

    group_name: Mapped[str] = mapped_column(
        String(255),
        ForeignKey(
            "groups.group_name",
            name="fk_group_level_group",
            ondelete="CASCADE",
        ),
        primary_key=True,
    )
    level_name: Mapped[str] = mapped_column(String(255), primary_key=True)

    def __repr__(self) -> str:
        """Return string representation."""
        return (
            f"<GroupLevelModel(group_name={self.group_name}, "
            f"level_name={self.level_name}, version={self.version})>"
        )
