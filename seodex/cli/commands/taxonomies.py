"""Taxonomy visibility commands."""

from datetime import datetime

import cyclopts
from dishka import AsyncContainer

from seodex.cli.console import Console
from seodex.cli.util import run_in_uow
from seodex.domain.indexable.model.indexing import IndexingReason
from seodex.domain.indexable.service.indexing import IndexingHelper
from seodex.domain.shared.port.scheduler import JobScheduler
from seodex.domain.taxonomy.model.value import CLEANUP_START_HOOK, TaxonomyChangeResult
from seodex.domain.taxonomy.service.change_watcher import TaxonomyChangeWatcher

app = cyclopts.App(name="taxonomies", help="Taxonomy visibility")


@app.command
def check() -> None:
    """Compare public taxonomies with the last known snapshot and react to changes."""

    async def _check(uow: AsyncContainer) -> TaxonomyChangeResult | None:
        watcher = await uow.get(TaxonomyChangeWatcher)
        return await watcher.check_taxonomy_public_availability()

    result = run_in_uow(_check)
    console = Console()

    if result is None:
        console.info("Skipped: not a navigational request")
    elif result.baseline:
        console.success("Recorded the current public taxonomies")
    elif not result.changed:
        console.info("No taxonomy visibility changes")
    else:
        if result.added:
            console.warning(f"Made public: {', '.join(sorted(result.added))}")
        if result.removed:
            console.warning(f"Made private: {', '.join(sorted(result.removed))}")


@app.command
def status() -> None:
    """Show the recorded indexing reason and the pending indexable cleanup."""

    async def _status(uow: AsyncContainer) -> tuple[IndexingReason | None, datetime | None]:
        indexing = await uow.get(IndexingHelper)
        scheduler = await uow.get(JobScheduler)
        return await indexing.get_reason(), await scheduler.next_scheduled(CLEANUP_START_HOOK)

    reason, cleanup_at = run_in_uow(_status)
    console = Console()
    console.print(f"Indexing reason: {reason or 'none'}")
    if cleanup_at is None:
        console.print("Indexable cleanup: not scheduled")
    else:
        console.print(f"Indexable cleanup: scheduled for {cleanup_at.isoformat()}")
