"""projects, ideas, likes, subscriptions and feed items

Revision ID: community_0001
Revises:
Create Date: 2026-10-19
"""
from __future__ import annotations

from alembic import op
import sqlalchemy as sa


revision = "community_0001"
down_revision = None
branch_labels = None
depends_on = None


def _resource_columns():
    return [
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("title", sa.String(length=255), nullable=False),
        sa.Column("summary", sa.Text(), nullable=False),
        sa.Column("authors", sa.Text(), nullable=False),
        sa.Column("location", sa.String(length=255), nullable=True),
        sa.Column("pitch_deck", sa.String(length=1024), nullable=True),
        sa.Column("estimated_resources", sa.Text(), nullable=True),
        sa.Column("author_id", sa.String(length=64), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    ]


def _relation_table(name: str) -> None:
    op.create_table(
        name,
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("project_id", sa.Integer(), sa.ForeignKey("projects.id", ondelete="CASCADE"), nullable=False),
        sa.Column("user_id", sa.String(length=64), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.UniqueConstraint("project_id", "user_id", name=f"uq_{name}_project_user"),
    )
    op.create_index(f"ix_{name}_project_id", name, ["project_id"], unique=False)


def upgrade() -> None:
    op.create_table("projects", *_resource_columns())
    op.create_index("idx_projects_created_at", "projects", [sa.text("created_at DESC")], unique=False)
    op.create_index("idx_projects_author_id", "projects", ["author_id"], unique=False)

    op.create_table("project_ideas", *_resource_columns())
    op.create_index("idx_project_ideas_created_at", "project_ideas", [sa.text("created_at DESC")], unique=False)
    op.create_index("idx_project_ideas_author_id", "project_ideas", ["author_id"], unique=False)

    _relation_table("project_likes")
    _relation_table("project_subscriptions")

    op.create_table(
        "project_feed_items",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("project_id", sa.Integer(), sa.ForeignKey("projects.id", ondelete="CASCADE"), nullable=False),
        sa.Column("author_id", sa.String(length=64), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index(
        "idx_project_feed_items_project_created_at",
        "project_feed_items",
        ["project_id", sa.text("created_at DESC")],
        unique=False,
    )


def downgrade() -> None:
    op.drop_index("idx_project_feed_items_project_created_at", table_name="project_feed_items")
    op.drop_table("project_feed_items")
    for name in ("project_subscriptions", "project_likes"):
        op.drop_index(f"ix_{name}_project_id", table_name=name)
        op.drop_table(name)
    op.drop_index("idx_project_ideas_author_id", table_name="project_ideas")
    op.drop_index("idx_project_ideas_created_at", table_name="project_ideas")
    op.drop_table("project_ideas")
    op.drop_index("idx_projects_author_id", table_name="projects")
    op.drop_index("idx_projects_created_at", table_name="projects")
    op.drop_table("projects")
