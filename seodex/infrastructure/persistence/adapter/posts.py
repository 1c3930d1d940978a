"""Adapters answering author questions from the posts table."""

from typing import Sequence

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from seodex.domain.indexable.model.value import ObjectTimestamps
from seodex.domain.indexable.port.author_archive import AuthorArchive
from seodex.domain.indexable.port.post_timestamps import PostTimestampReader
from seodex.domain.shared.port.options import OptionStore
from seodex.infrastructure.persistence.tables import posts_table

DISABLE_AUTHOR_OPTION = "disable-author"


class SQLAlchemyPostTimestampReader(PostTimestampReader):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get_author_timestamps(
        self, author_id: int, post_statuses: Sequence[str]
    ) -> ObjectTimestamps:
        stmt = select(
            func.max(posts_table.c.post_modified_gmt).label("last_modified"),
            func.min(posts_table.c.post_date_gmt).label("published_at"),
        ).where(
            posts_table.c.post_status.in_(list(post_statuses)),
            posts_table.c.post_password == "",
            posts_table.c.post_author == author_id,
        )
        row = (await self.session.execute(stmt)).one()
        return ObjectTimestamps(
            published_at=row.published_at,
            last_modified=row.last_modified,
        )


class SQLAlchemyAuthorArchive(AuthorArchive):
    """Author archive settings come from the option store, post ownership from posts."""

    def __init__(
        self,
        session: AsyncSession,
        options: OptionStore,
        public_post_statuses: Sequence[str] = ("publish",),
    ) -> None:
        self.session = session
        self.options = options
        self.public_post_statuses = list(public_post_statuses)

    async def are_disabled(self) -> bool:
        return bool(await self.options.get(DISABLE_AUTHOR_OPTION, False))

    async def author_has_public_posts(self, user_id: int) -> bool | None:
        stmt = (
            select(posts_table.c.id)
            .where(
                posts_table.c.post_author == user_id,
                posts_table.c.post_status.in_(self.public_post_statuses),
                posts_table.c.post_password == "",
            )
            .limit(1)
        )
        return (await self.session.execute(stmt)).first() is not None
