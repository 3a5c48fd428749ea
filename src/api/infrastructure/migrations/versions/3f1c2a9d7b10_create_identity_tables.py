"""create identity tables

Create users, groups, group_levels and permissions. Every child table
references its parent with ON DELETE CASCADE so that removing a user,
group or level removes everything that depends on it.

Revision ID: 3f1c2a9d7b10
Revises:
Create Date: 2026-10-18 09:12:44.318207

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op


# revision identifiers, used by Alembic.
revision: str = "3f1c2a9d7b10"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _audit_columns() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("version", sa.BigInteger(), nullable=False),
    ]


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "users",
        # Google subjects exceed the BIGINT range
        sa.Column("subject", sa.Numeric(precision=32, scale=0), nullable=False),
        sa.Column("fullname", sa.String(length=255), nullable=False),
        sa.Column("email", sa.String(length=320), nullable=False),
        sa.Column("picture", sa.String(length=2048), nullable=True),
        *_audit_columns(),
        sa.PrimaryKeyConstraint("subject"),
    )

    op.create_table(
        "groups",
        sa.Column("group_name", sa.String(length=255), nullable=False),
        *_audit_columns(),
        sa.PrimaryKeyConstraint("group_name"),
    )

    op.create_table(
        "group_levels",
        sa.Column("group_name", sa.String(length=255), nullable=False),
        sa.Column("level_name", sa.String(length=255), nullable=False),
        *_audit_columns(),
        sa.ForeignKeyConstraint(
            ["group_name"],
            ["groups.group_name"],
            name="fk_group_level_group",
            ondelete="CASCADE",
        ),
        sa.PrimaryKeyConstraint("group_name", "level_name"),
    )

    op.create_table(
        "permissions",
        sa.Column("subject", sa.Numeric(precision=32, scale=0), nullable=False),
        sa.Column("group_name", sa.String(length=255), nullable=False),
        sa.Column("level_name", sa.String(length=255), nullable=False),
        *_audit_columns(),
        sa.ForeignKeyConstraint(
            ["subject"],
            ["users.subject"],
            name="fk_permission_user",
            ondelete="CASCADE",
        ),
        sa.ForeignKeyConstraint(
            ["group_name", "level_name"],
            ["group_levels.group_name", "group_levels.level_name"],
            name="fk_permission_group_level",
            ondelete="CASCADE",
        ),
        sa.PrimaryKeyConstraint("subject", "group_name", "level_name"),
    )
    op.create_index(
        "ix_permissions_group_level",
        "permissions",
        ["group_name", "level_name"],
        unique=False,
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("ix_permissions_group_level", table_name="permissions")
    op.drop_table("permissions")
    op.drop_table("group_levels")
    op.drop_table("groups")
    op.drop_table("users")
