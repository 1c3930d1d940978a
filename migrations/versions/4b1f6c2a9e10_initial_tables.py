"""initial_tables

Revision ID: 4b1f6c2a9e10
Revises:
Create Date: 2026-10-19 10:12:41.208331

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

from seodex.infrastructure.persistence.tables import UTCDateTime

# revision identifiers, used by Alembic.
revision: str = "4b1f6c2a9e10"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # OPTIONS
    op.create_table(
        "options",
        sa.Column("name", sa.String(191), nullable=False),
        sa.Column("value", sa.JSON(), nullable=True),
        sa.Column("updated_at", UTCDateTime(), nullable=False),
        sa.PrimaryKeyConstraint("name"),
    )

    # TRANSIENTS
    op.create_table(
        "transients",
        sa.Column("key", sa.String(191), nullable=False),
        sa.Column("value", sa.JSON(), nullable=True),
        sa.Column("expires_at", UTCDateTime(), nullable=True),
        sa.PrimaryKeyConstraint("key"),
    )
    op.create_index("idx_transients_expires_at", "transients", ["expires_at"])

    # NOTIFICATIONS
    op.create_table(
        "notifications",
        sa.Column("id", sa.String(191), nullable=False),
        sa.Column("message", sa.Text(), nullable=False),
        sa.Column("type", sa.String(16), nullable=False),
        sa.Column("capabilities", sa.JSON(), nullable=False),
        sa.Column("priority", sa.Float(), nullable=False),
        sa.Column("created_at", UTCDateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )

    # SCHEDULED JOBS
    op.create_table(
        "scheduled_jobs",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("hook", sa.String(191), nullable=False),
        sa.Column("run_at", UTCDateTime(), nullable=False),
        sa.Column("status", sa.String(16), nullable=False, server_default=sa.text("'pending'")),
        sa.Column("created_at", UTCDateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "uq_scheduled_jobs_pending_hook",
        "scheduled_jobs",
        ["hook"],
        unique=True,
        sqlite_where=sa.text("status = 'pending'"),
        postgresql_where=sa.text("status = 'pending'"),
    )
    op.create_index("idx_scheduled_jobs_run_at", "scheduled_jobs", ["run_at"])

    # TAXONOMIES
    op.create_table(
        "taxonomies",
        sa.Column("name", sa.String(32), nullable=False),
        sa.Column("label", sa.String(191), nullable=False),
        sa.Column("public", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.PrimaryKeyConstraint("name"),
    )

    # USERS
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("user_login", sa.String(60), nullable=False),
        sa.Column("user_nicename", sa.String(50), nullable=False),
        sa.Column("user_email", sa.String(100), nullable=False, server_default=sa.text("''")),
        sa.Column("display_name", sa.String(250), nullable=False, server_default=sa.text("''")),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("user_login"),
    )

    op.create_table(
        "user_meta",
        sa.Column("umeta_id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("meta_key", sa.String(191), nullable=False),
        sa.Column("meta_value", sa.Text(), nullable=True),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"]),
        sa.PrimaryKeyConstraint("umeta_id"),
    )
    op.create_index("idx_user_meta_user_key", "user_meta", ["user_id", "meta_key"])

    # POSTS
    op.create_table(
        "posts",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("post_author", sa.Integer(), nullable=False),
        sa.Column("post_type", sa.String(20), nullable=False, server_default=sa.text("'post'")),
        sa.Column(
            "post_status", sa.String(20), nullable=False, server_default=sa.text("'publish'")
        ),
        sa.Column("post_password", sa.String(255), nullable=False, server_default=sa.text("''")),
        sa.Column("post_title", sa.Text(), nullable=False, server_default=sa.text("''")),
        sa.Column("post_date_gmt", UTCDateTime(), nullable=False),
        sa.Column("post_modified_gmt", UTCDateTime(), nullable=False),
        sa.ForeignKeyConstraint(["post_author"], ["users.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_posts_author_status", "posts", ["post_author", "post_status"])

    # INDEXABLES
    op.create_table(
        "indexables",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("object_id", sa.Integer(), nullable=True),
        sa.Column("object_type", sa.String(32), nullable=False),
        sa.Column("object_sub_type", sa.String(32), nullable=True),
        sa.Column("permalink", sa.Text(), nullable=True),
        sa.Column("title", sa.Text(), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("is_cornerstone", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("is_robots_noindex", sa.Boolean(), nullable=True),
        sa.Column("is_robots_nofollow", sa.Boolean(), nullable=True),
        sa.Column("is_robots_noarchive", sa.Boolean(), nullable=True),
        sa.Column("is_robots_noimageindex", sa.Boolean(), nullable=True),
        sa.Column("is_robots_nosnippet", sa.Boolean(), nullable=True),
        sa.Column("is_public", sa.Boolean(), nullable=True),
        sa.Column("has_public_posts", sa.Boolean(), nullable=True),
        sa.Column("blog_id", sa.Integer(), nullable=False, server_default=sa.text("1")),
        sa.Column("open_graph_image", sa.Text(), nullable=True),
        sa.Column("open_graph_image_id", sa.Integer(), nullable=True),
        sa.Column("open_graph_image_source", sa.Text(), nullable=True),
        sa.Column("open_graph_image_meta", sa.JSON(), nullable=True),
        sa.Column("twitter_image", sa.Text(), nullable=True),
        sa.Column("twitter_image_id", sa.Integer(), nullable=True),
        sa.Column("twitter_image_source", sa.Text(), nullable=True),
        sa.Column("object_published_at", UTCDateTime(), nullable=True),
        sa.Column("object_last_modified", UTCDateTime(), nullable=True),
        sa.Column("version", sa.Integer(), nullable=True),
        sa.Column("created_at", UTCDateTime(), nullable=False),
        sa.Column("updated_at", UTCDateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("object_type", "object_id", name="uq_indexables_object"),
    )
    op.create_index("idx_indexables_type_version", "indexables", ["object_type", "version"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_indexables_type_version", table_name="indexables")
    op.drop_table("indexables")
    op.drop_index("idx_posts_author_status", table_name="posts")
    op.drop_table("posts")
    op.drop_index("idx_user_meta_user_key", table_name="user_meta")
    op.drop_table("user_meta")
    op.drop_table("users")
    op.drop_table("taxonomies")
    op.drop_index("idx_scheduled_jobs_run_at", table_name="scheduled_jobs")
    op.drop_index("uq_scheduled_jobs_pending_hook", table_name="scheduled_jobs")
    op.drop_table("scheduled_jobs")
    op.drop_table("notifications")
    op.drop_index("idx_transients_expires_at", table_name="transients")
    op.drop_table("transients")
    op.drop_table("options")
