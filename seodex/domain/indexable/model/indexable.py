"""Indexable - denormalized SEO metadata for one entity."""

from datetime import datetime
from typing import Any

from seodex.domain.indexable.model.value import ObjectType
from seodex.domain.shared.model.entity import Entity


class Indexable(Entity):
    """A cached summary row keyed by (object_type, object_id).

    Builders populate a fresh instance and hand it back; persistence is the
    caller's responsibility.
    """

    id: int | None = None
    object_id: int | None = None
    object_type: ObjectType | None = None
    object_sub_type: str | None = None
    permalink: str | None = None
    title: str | None = None
    description: str | None = None
    is_cornerstone: bool = False

    is_robots_noindex: bool | None = None
    is_robots_nofollow: bool | None = None
    is_robots_noarchive: bool | None = None
    is_robots_noimageindex: bool | None = None
    is_robots_nosnippet: bool | None = None

    # None means "defer to the general policy for this object type"
    is_public: bool | None = None
    has_public_posts: bool | None = None
    blog_id: int = 1

    open_graph_image: str | None = None
    open_graph_image_id: int | None = None
    open_graph_image_source: str | None = None
    open_graph_image_meta: dict[str, Any] | None = None
    twitter_image: str | None = None
    twitter_image_id: int | None = None
    twitter_image_source: str | None = None

    object_published_at: datetime | None = None
    object_last_modified: datetime | None = None

    version: int | None = None
