"""Indexable domain value objects."""

from datetime import datetime
from enum import StrEnum

from seodex.domain.shared.model.value import ValueObject


class ObjectType(StrEnum):
    """The kinds of entity an indexable can summarize."""

    POST = "post"
    TERM = "term"
    USER = "user"
    HOME_PAGE = "home-page"
    DATE_ARCHIVE = "date-archive"
    POST_TYPE_ARCHIVE = "post-type-archive"
    SYSTEM_PAGE = "system-page"


class ObjectTimestamps(ValueObject):
    """Earliest publication and latest modification among an object's posts.

    Both are None when no post qualifies.
    """

    published_at: datetime | None = None
    last_modified: datetime | None = None


class AlternativeImage(ValueObject):
    """An image found when nothing was set explicitly, tagged with where it came from."""

    image: str
    source: str
