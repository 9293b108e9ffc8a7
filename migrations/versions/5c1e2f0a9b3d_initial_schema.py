"""initial schema: classes, users, activities, signups

Revision ID: 5c1e2f0a9b3d
Revises:
Create Date: 2026-10-19 09:12:41.318204

"""
from __future__ import annotations

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "5c1e2f0a9b3d"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create the four core tables."""
    op.create_table(
        "classes",
        sa.Column("class_id", sa.String(length=20), nullable=False),
        sa.Column("class_name", sa.String(length=50), nullable=False),
        sa.Column("grade", sa.String(length=4), nullable=True),
        sa.Column("major", sa.String(length=50), nullable=True),
        sa.Column("counselor_id", sa.String(length=20), nullable=True),
        sa.Column("member_count", sa.Integer(), nullable=False, server_default="0"),
        sa.CheckConstraint("member_count >= 0", name="ck_classes_member_count"),
        sa.PrimaryKeyConstraint("class_id"),
    )
    op.create_table(
        "users",
        sa.Column("user_id", sa.String(length=26), nullable=False),
        sa.Column("school_num", sa.String(length=20), nullable=True),
        sa.Column("name", sa.String(length=20), nullable=False),
        sa.Column("password", sa.String(length=128), nullable=False),
        sa.Column("phone", sa.String(length=20), nullable=True),
        sa.Column("email", sa.String(length=50), nullable=True),
        sa.Column("status", sa.Integer(), nullable=False, server_default="1"),
        sa.Column("role", sa.String(length=20), nullable=True),
        sa.Column("class_id", sa.String(length=20), nullable=True),
        sa.Column(
            "create_time",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
        sa.ForeignKeyConstraint(["class_id"], ["classes.class_id"]),
        sa.PrimaryKeyConstraint("user_id"),
    )
    op.create_index("ix_users_class_id", "users", ["class_id"])

    op.create_table(
        "activities",
        sa.Column("activity_id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("location", sa.String(length=100), nullable=True),
        sa.Column("start_time", sa.DateTime(timezone=True), nullable=False),
        sa.Column("end_time", sa.DateTime(timezone=True), nullable=False),
        sa.Column("signup_start", sa.DateTime(timezone=True), nullable=True),
        sa.Column("signup_end", sa.DateTime(timezone=True), nullable=True),
        sa.Column("budget", sa.Numeric(10, 2), nullable=True),
        sa.Column("leader_id", sa.String(length=26), nullable=True),
        sa.Column("status", sa.String(length=20), nullable=False, server_default="active"),
        sa.Column("max_people", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("deleted_at", sa.DateTime(timezone=True), nullable=True),
        sa.CheckConstraint("max_people >= 0", name="ck_activities_max_people"),
        sa.ForeignKeyConstraint(["leader_id"], ["users.user_id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("activity_id"),
    )
    op.create_index("ix_activities_deleted_at", "activities", ["deleted_at"])

    op.create_table(
        "signups",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("activity_id", sa.Integer(), nullable=False),
        sa.Column("user_id", sa.String(length=26), nullable=False),
        sa.Column("status", sa.String(length=20), nullable=False, server_default="signed"),
        sa.Column("signup_time", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(["activity_id"], ["activities.activity_id"]),
        sa.ForeignKeyConstraint(["user_id"], ["users.user_id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("activity_id", "user_id", name="uq_signups_activity_user"),
    )
    op.create_index("ix_signups_activity_id", "signups", ["activity_id"])
    op.create_index("ix_signups_user_id", "signups", ["user_id"])


def downgrade() -> None:
    """Drop the four core tables."""
    op.drop_index("ix_signups_user_id", table_name="signups")
    op.drop_index("ix_signups_activity_id", table_name="signups")
    op.drop_table("signups")
    op.drop_index("ix_activities_deleted_at", table_name="activities")
    op.drop_table("activities")
    op.drop_index("ix_users_class_id", table_name="users")
    op.drop_table("users")
    op.drop_table("classes")
