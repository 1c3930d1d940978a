"""Adapters reading the users and user_meta tables."""

import hashlib
from typing import Literal
from urllib.parse import quote, urlencode

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from seodex.domain.indexable.port.avatar import AvatarService
from seodex.domain.indexable.port.urls import AuthorUrlBuilder
from seodex.domain.indexable.port.user_meta import UserMetaReader
from seodex.domain.shared.error import NotFoundError
from seodex.infrastructure.persistence.tables import user_meta_table, users_table

GRAVATAR_HOSTS = {
    "http": "http://0.gravatar.com/avatar",
    "https": "https://secure.gravatar.com/avatar",
}


class SQLAlchemyUserMetaReader(UserMetaReader):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get(self, user_id: int, key: str) -> str | None:
        # First row wins when a key is stored more than once
        stmt = (
            select(user_meta_table.c.meta_value)
            .where(
                user_meta_table.c.user_id == user_id,
                user_meta_table.c.meta_key == key,
            )
            .order_by(user_meta_table.c.umeta_id)
            .limit(1)
        )
        return (await self.session.execute(stmt)).scalar_one_or_none()


class SQLAlchemyAuthorUrlBuilder(AuthorUrlBuilder):
    """Builds pretty author archive URLs: {home_url}/{author_base}/{nicename}/."""

    def __init__(self, session: AsyncSession, home_url: str, author_base: str = "author") -> None:
        self.session = session
        self.home_url = home_url.rstrip("/")
        self.author_base = author_base.strip("/")

    async def get_author_posts_url(self, user_id: int) -> str:
        stmt = select(users_table.c.user_nicename).where(users_table.c.id == user_id)
        nicename = (await self.session.execute(stmt)).scalar_one_or_none()
        if nicename is None:
            raise NotFoundError(f"User not found: {user_id}")
        return f"{self.home_url}/{self.author_base}/{quote(nicename)}/"


class GravatarAvatarService(AvatarService):
    """Gravatar URLs from the user's email hash; users without an email get None."""

    def __init__(self, session: AsyncSession, default: str = "mm", rating: str = "g") -> None:
        self.session = session
        self.default = default
        self.rating = rating

    async def get_avatar_url(
        self,
        user_id: int,
        size: int = 96,
        scheme: Literal["http", "https"] = "https",
    ) -> str | None:
        stmt = select(users_table.c.user_email).where(users_table.c.id == user_id)
        email = (await self.session.execute(stmt)).scalar_one_or_none()
        if not email:
            return None

        digest = hashlib.md5(email.strip().lower().encode()).hexdigest()
        query = urlencode({"s": size, "d": self.default, "r": self.rating})
        return f"{GRAVATAR_HOSTS[scheme]}/{digest}?{query}"
