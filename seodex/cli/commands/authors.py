"""Author indexable commands."""

import sys

import cyclopts
from dishka import AsyncContainer

from seodex.cli.console import Console
from seodex.cli.util import run_in_uow
from seodex.domain.indexable.model.indexable import Indexable
from seodex.domain.indexable.model.value import ObjectType
from seodex.domain.indexable.model.versions import IndexableBuilderVersions
from seodex.domain.indexable.port.repository import IndexableRepository
from seodex.domain.indexable.service.indexable import IndexableService
from seodex.domain.shared.error import SeodexError

app = cyclopts.App(name="authors", help="Author indexables")


@app.command
def build(user_id: int, /) -> None:
    """Build and store the indexable for an author.

    Args:
        user_id: The author's user id.
    """

    async def _build(uow: AsyncContainer) -> Indexable | None:
        service = await uow.get(IndexableService)
        return await service.build_author(user_id)

    console = Console()
    try:
        indexable = run_in_uow(_build)
    except SeodexError as e:
        console.error(e.message)
        sys.exit(1)

    if indexable is None:
        console.warning(f"Author {user_id} is not eligible for an indexable")
        return
    console.success(f"Built indexable {indexable.id} for author {user_id}")
    console.indexable_detail(indexable)


@app.command
def show(user_id: int, /) -> None:
    """Show the stored indexable of an author.

    Args:
        user_id: The author's user id.
    """

    async def _show(uow: AsyncContainer) -> Indexable:
        service = await uow.get(IndexableService)
        return await service.get_author(user_id)

    console = Console()
    try:
        indexable = run_in_uow(_show)
    except SeodexError as e:
        console.error(e.message, hint=f"Run: seodex authors build {user_id}")
        sys.exit(1)
    console.indexable_detail(indexable)


@app.command
def outdated() -> None:
    """Count author indexables built by an older builder version."""

    async def _count(uow: AsyncContainer) -> int:
        repo = await uow.get(IndexableRepository)
        versions = await uow.get(IndexableBuilderVersions)
        return await repo.count_outdated(
            ObjectType.USER, versions.get_latest_version_for_type(ObjectType.USER)
        )

    count = run_in_uow(_count)
    Console().print(f"{count} outdated author indexable{'s' if count != 1 else ''}")
