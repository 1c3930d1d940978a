"""Row builders shared by the adapter tests."""

from datetime import UTC, datetime

from sqlalchemy import insert
from sqlalchemy.ext.asyncio import AsyncSession

from seodex.infrastructure.persistence.tables import posts_table, users_table


async def add_user(
    session: AsyncSession, user_id: int, nicename: str, email: str = ""
) -> None:
    await session.execute(
        insert(users_table).values(
            id=user_id,
            user_login=nicename,
            user_nicename=nicename,
            user_email=email,
            display_name=nicename.title(),
        )
    )


async def add_post(
    session: AsyncSession,
    post_id: int,
    author: int,
    date: datetime,
    modified: datetime | None = None,
    status: str = "publish",
    password: str = "",
) -> None:
    await session.execute(
        insert(posts_table).values(
            id=post_id,
            post_author=author,
            post_status=status,
            post_password=password,
            post_date_gmt=date,
            post_modified_gmt=modified or date,
        )
    )


def utc(*args: int) -> datetime:
    return datetime(*args, tzinfo=UTC)
