"""initial_resume_schema

Revision ID: 5e1f0c2a9b37
Revises:
Create Date: 2026-10-19 00:01:00.000000

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op


# revision identifiers, used by Alembic.
revision: str = "5e1f0c2a9b37"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _id_and_timestamps() -> list[sa.Column]:
    return [
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
    ]


def upgrade() -> None:
    """Upgrade database schema."""
    # Create users table
    op.create_table(
        "users",
        sa.Column("external_id", sa.String(length=128), nullable=False),
        *_id_and_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_users_id"), "users", ["id"], unique=False)
    op.create_index(op.f("ix_users_external_id"), "users", ["external_id"], unique=True)

    # Create permissions table
    op.create_table(
        "permissions",
        sa.Column("user_id", sa.Uuid(), nullable=False),
        sa.Column("resource", sa.String(length=100), nullable=False),
        sa.Column("resource_id", sa.String(length=100), nullable=True),
        sa.Column("scope", sa.String(length=20), nullable=False),
        *_id_and_timestamps(),
        sa.CheckConstraint(
            "(scope = 'All' AND resource_id IS NULL)"
            " OR (scope = 'Specific' AND resource_id IS NOT NULL)",
            name="ck_permission_scope_resource_id",
        ),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_permissions_id"), "permissions", ["id"], unique=False)
    op.create_index(op.f("ix_permissions_user_id"), "permissions", ["user_id"], unique=False)
    op.create_index(
        "ix_permission_resource_lookup",
        "permissions",
        ["resource", "resource_id", "scope"],
        unique=False,
    )

    # Create developers table
    op.create_table(
        "developers",
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("image_url", sa.String(length=2048), nullable=False),
        sa.Column("greeting_title", sa.String(length=255), nullable=False),
        sa.Column("greeting_message", sa.String(length=350), nullable=False),
        sa.Column("mission_title", sa.String(length=255), nullable=False),
        sa.Column("mission_description", sa.String(length=350), nullable=False),
        sa.Column("it_experience_start_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("work_experience_start_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("created_by_id", sa.String(length=128), nullable=False),
        *_id_and_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_developers_id"), "developers", ["id"], unique=False)
    op.create_index(
        op.f("ix_developers_created_by_id"), "developers", ["created_by_id"], unique=False
    )

    # Create developer_skills table
    op.create_table(
        "developer_skills",
        sa.Column("developer_id", sa.Uuid(), nullable=False),
        sa.Column("technology_name", sa.String(length=255), nullable=False),
        sa.Column("proficiency_level", sa.Float(), nullable=False),
        *_id_and_timestamps(),
        sa.ForeignKeyConstraint(["developer_id"], ["developers.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_developer_skills_id"), "developer_skills", ["id"], unique=False)
    op.create_index(
        op.f("ix_developer_skills_developer_id"),
        "developer_skills",
        ["developer_id"],
        unique=False,
    )

    # Create experiences table
    op.create_table(
        "experiences",
        sa.Column("developer_id", sa.Uuid(), nullable=False),
        sa.Column("experience_type", sa.String(length=20), nullable=False),
        sa.Column("title", sa.String(length=255), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("location_name", sa.String(length=255), nullable=False),
        sa.Column("start_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("end_date", sa.DateTime(timezone=True), nullable=True),
        *_id_and_timestamps(),
        sa.ForeignKeyConstraint(["developer_id"], ["developers.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_experiences_id"), "experiences", ["id"], unique=False)
    op.create_index(
        op.f("ix_experiences_developer_id"), "experiences", ["developer_id"], unique=False
    )

    # Create projects table
    op.create_table(
        "projects",
        sa.Column("title", sa.String(length=255), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("image_url", sa.String(length=2048), nullable=False),
        *_id_and_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_projects_id"), "projects", ["id"], unique=False)

    # Create developer_skill_projects junction table
    op.create_table(
        "developer_skill_projects",
        sa.Column("developer_skill_id", sa.Uuid(), nullable=False),
        sa.Column("project_id", sa.Uuid(), nullable=False),
        sa.ForeignKeyConstraint(
            ["developer_skill_id"], ["developer_skills.id"], ondelete="CASCADE"
        ),
        sa.ForeignKeyConstraint(["project_id"], ["projects.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("developer_skill_id", "project_id"),
    )

    # Create social_media_links table
    op.create_table(
        "social_media_links",
        sa.Column("developer_id", sa.Uuid(), nullable=False),
        sa.Column("url", sa.String(length=2048), nullable=False),
        sa.Column("network", sa.String(length=20), nullable=False),
        *_id_and_timestamps(),
        sa.ForeignKeyConstraint(["developer_id"], ["developers.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        op.f("ix_social_media_links_id"), "social_media_links", ["id"], unique=False
    )
    op.create_index(
        op.f("ix_social_media_links_developer_id"),
        "social_media_links",
        ["developer_id"],
        unique=False,
    )


def downgrade() -> None:
    """Downgrade database schema."""
    op.drop_index(op.f("ix_social_media_links_developer_id"), table_name="social_media_links")
    op.drop_index(op.f("ix_social_media_links_id"), table_name="social_media_links")
    op.drop_table("social_media_links")

    op.drop_table("developer_skill_projects")

    op.drop_index(op.f("ix_projects_id"), table_name="projects")
    op.drop_table("projects")

    op.drop_index(op.f("ix_experiences_developer_id"), table_name="experiences")
    op.drop_index(op.f("ix_experiences_id"), table_name="experiences")
    op.drop_table("experiences")

    op.drop_index(op.f("ix_developer_skills_developer_id"), table_name="developer_skills")
    op.drop_index(op.f("ix_developer_skills_id"), table_name="developer_skills")
    op.drop_table("developer_skills")

    op.drop_index(op.f("ix_developers_created_by_id"), table_name="developers")
    op.drop_index(op.f("ix_developers_id"), table_name="developers")
    op.drop_table("developers")

    op.drop_index("ix_permission_resource_lookup", table_name="permissions")
    op.drop_index(op.f("ix_permissions_user_id"), table_name="permissions")
    op.drop_index(op.f("ix_permissions_id"), table_name="permissions")
    op.drop_table("permissions")

    op.drop_index(op.f("ix_users_external_id"), table_name="users")
    op.drop_index(op.f("ix_users_id"), table_name="users")
    op.drop_table("users")
