"""SQLAlchemy table definitions - dialect-agnostic (works with SQLite and PostgreSQL)."""

from datetime import UTC, datetime
from typing import Any

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    Float,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
    false,
    text,
    true,
)
from sqlalchemy.engine import Dialect
from sqlalchemy.types import JSON, TypeDecorator

# Metadata object for all tables
metadata = MetaData()


class UTCDateTime(TypeDecorator[datetime]):
    """Timezone-aware timestamps stored as UTC.

    SQLite keeps the wall-clock time of a datetime and drops its offset, so
    values are converted to UTC before binding and read back as UTC.
    Naive datetimes are taken to be UTC already.
    """

    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value: datetime | None, dialect: Dialect) -> datetime | None:
        if value is None:
            return None
        if value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value.astimezone(UTC)

    def process_result_value(self, value: Any, dialect: Dialect) -> datetime | None:
        if value is None:
            return None
        if isinstance(value, str):
            value = datetime.fromisoformat(value)
        if value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value.astimezone(UTC)


# ============================================================================
# OPTIONS TABLE (site-wide key/value settings)
# ============================================================================
options_table = Table(
    "options",
    metadata,
    Column("name", String(191), primary_key=True),
    Column("value", JSON, nullable=True),
    Column("updated_at", UTCDateTime(), nullable=False),
)


# ============================================================================
# TRANSIENTS TABLE (cached values with optional expiry)
# ============================================================================
transients_table = Table(
    "transients",
    metadata,
    Column("key", String(191), primary_key=True),
    Column("value", JSON, nullable=True),
    Column("expires_at", UTCDateTime(), nullable=True),  # NULL = never
)

Index("idx_transients_expires_at", transients_table.c.expires_at)


# ============================================================================
# NOTIFICATIONS TABLE
# ============================================================================
notifications_table = Table(
    "notifications",
    metadata,
    Column("id", String(191), primary_key=True),
    Column("message", Text, nullable=False),
    Column("type", String(16), nullable=False),  # NotificationType as string
    Column("capabilities", JSON, nullable=False),
    Column("priority", Float, nullable=False),
    Column("created_at", UTCDateTime(), nullable=False),
)


# ============================================================================
# SCHEDULED JOBS TABLE (one-off deferred jobs)
# ============================================================================
scheduled_jobs_table = Table(
    "scheduled_jobs",
    metadata,
    Column("id", String, primary_key=True),
    Column("hook", String(191), nullable=False),
    Column("run_at", UTCDateTime(), nullable=False),
    Column("status", String(16), nullable=False, server_default=text("'pending'")),
    Column("created_at", UTCDateTime(), nullable=False),
)

# At most one pending run per hook
Index(
    "uq_scheduled_jobs_pending_hook",
    scheduled_jobs_table.c.hook,
    unique=True,
    sqlite_where=text("status = 'pending'"),
    postgresql_where=text("status = 'pending'"),
)
Index("idx_scheduled_jobs_run_at", scheduled_jobs_table.c.run_at)


# ============================================================================
# TAXONOMIES TABLE (taxonomy registry)
# ============================================================================
taxonomies_table = Table(
    "taxonomies",
    metadata,
    Column("name", String(32), primary_key=True),
    Column("label", String(191), nullable=False),
    Column("public", Boolean, nullable=False, server_default=true()),
)


# ============================================================================
# USERS / USER META TABLES
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", Integer, primary_key=True),
    Column("user_login", String(60), nullable=False, unique=True),
    Column("user_nicename", String(50), nullable=False),
    Column("user_email", String(100), nullable=False, server_default=text("''")),
    Column("display_name", String(250), nullable=False, server_default=text("''")),
)

user_meta_table = Table(
    "user_meta",
    metadata,
    Column("umeta_id", Integer, primary_key=True, autoincrement=True),
    Column("user_id", Integer, ForeignKey("users.id"), nullable=False),
    Column("meta_key", String(191), nullable=False),
    Column("meta_value", Text, nullable=True),
)

Index("idx_user_meta_user_key", user_meta_table.c.user_id, user_meta_table.c.meta_key)


# ============================================================================
# POSTS TABLE
# ============================================================================
posts_table = Table(
    "posts",
    metadata,
    Column("id", Integer, primary_key=True),
    Column("post_author", Integer, ForeignKey("users.id"), nullable=False),
    Column("post_type", String(20), nullable=False, server_default=text("'post'")),
    Column("post_status", String(20), nullable=False, server_default=text("'publish'")),
    Column("post_password", String(255), nullable=False, server_default=text("''")),
    Column("post_title", Text, nullable=False, server_default=text("''")),
    Column("post_date_gmt", UTCDateTime(), nullable=False),
    Column("post_modified_gmt", UTCDateTime(), nullable=False),
)

Index(
    "idx_posts_author_status",
    posts_table.c.post_author,
    posts_table.c.post_status,
)


# ============================================================================
# INDEXABLES TABLE
# ============================================================================
indexables_table = Table(
    "indexables",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("object_id", Integer, nullable=True),
    Column("object_type", String(32), nullable=False),  # ObjectType as string
    Column("object_sub_type", String(32), nullable=True),
    Column("permalink", Text, nullable=True),
    Column("title", Text, nullable=True),
    Column("description", Text, nullable=True),
    Column("is_cornerstone", Boolean, nullable=False, server_default=false()),
    Column("is_robots_noindex", Boolean, nullable=True),
    Column("is_robots_nofollow", Boolean, nullable=True),
    Column("is_robots_noarchive", Boolean, nullable=True),
    Column("is_robots_noimageindex", Boolean, nullable=True),
    Column("is_robots_nosnippet", Boolean, nullable=True),
    Column("is_public", Boolean, nullable=True),
    Column("has_public_posts", Boolean, nullable=True),
    Column("blog_id", Integer, nullable=False, server_default=text("1")),
    Column("open_graph_image", Text, nullable=True),
    Column("open_graph_image_id", Integer, nullable=True),
    Column("open_graph_image_source", Text, nullable=True),
    Column("open_graph_image_meta", JSON, nullable=True),
    Column("twitter_image", Text, nullable=True),
    Column("twitter_image_id", Integer, nullable=True),
    Column("twitter_image_source", Text, nullable=True),
    Column("object_published_at", UTCDateTime(), nullable=True),
    Column("object_last_modified", UTCDateTime(), nullable=True),
    Column("version", Integer, nullable=True),
    Column("created_at", UTCDateTime(), nullable=False),
    Column("updated_at", UTCDateTime(), nullable=False),
    UniqueConstraint("object_type", "object_id", name="uq_indexables_object"),
)

Index("idx_indexables_type_version", indexables_table.c.object_type, indexables_table.c.version)
