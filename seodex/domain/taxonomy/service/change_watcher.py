"""TaxonomyChangeWatcher - reacts to taxonomies becoming public or private."""

import logging
from dataclasses import field
from datetime import UTC, datetime, timedelta
from typing import Callable

import logfire

from seodex.domain.indexable.model.indexing import (
    UNINDEXED_TERMS_COUNT,
    UNINDEXED_TERMS_LIMITED_COUNT,
    IndexingReason,
)
from seodex.domain.indexable.service.indexing import IndexingHelper
from seodex.domain.shared.model.notification import Notification, NotificationType
from seodex.domain.shared.port.notifications import NotificationCenter
from seodex.domain.shared.port.options import OptionStore
from seodex.domain.shared.port.scheduler import JobScheduler
from seodex.domain.shared.port.transients import TransientCache
from seodex.domain.shared.service import Service
from seodex.domain.taxonomy.model.value import (
    CLEANUP_START_HOOK,
    LAST_KNOWN_PUBLIC_TAXONOMIES,
    TAXONOMIES_MADE_PUBLIC_NOTIFICATION,
    TaxonomyChangeResult,
)
from seodex.domain.taxonomy.port.request_context import RequestContext
from seodex.domain.taxonomy.port.taxonomies import TaxonomyLister

logger = logging.getLogger(__name__)

NOTIFICATION_MESSAGE = (
    "It looks like you've added a new taxonomy to your website. "
    "We recommend that you review your Search appearance settings."
)


def _utc_now() -> datetime:
    return datetime.now(UTC)


class TaxonomyChangeWatcher(Service):
    """Compares the public taxonomies with the last known snapshot.

    Newly public taxonomies invalidate the unindexed term counts, set the
    indexing reason and raise an admin notification. Taxonomies made private
    schedule the indexable cleanup job.
    """

    options: OptionStore
    taxonomies: TaxonomyLister
    request: RequestContext
    transients: TransientCache
    indexing: IndexingHelper
    notifications: NotificationCenter
    scheduler: JobScheduler
    cleanup_delay: timedelta = timedelta(minutes=5)
    clock: Callable[[], datetime] = field(default=_utc_now)

    async def check_taxonomy_public_availability(self) -> TaxonomyChangeResult | None:
        """Run the visibility check. Returns None when skipped for JSON requests."""
        with logfire.span("TaxonomyChangeWatcher.check"):
            return await self._check()

    async def _check(self) -> TaxonomyChangeResult | None:
        # Only plain navigational requests, no AJAX/REST.
        if self.request.is_json_request():
            return None

        public_taxonomies = list(await self.taxonomies.get_public_taxonomies())
        last_known = await self.options.get(LAST_KNOWN_PUBLIC_TAXONOMIES, [])

        if not last_known:
            await self.options.set(LAST_KNOWN_PUBLIC_TAXONOMIES, public_taxonomies)
            logger.debug(f"Initialized public taxonomy snapshot: {public_taxonomies}")
            return TaxonomyChangeResult(baseline=True)

        result = TaxonomyChangeResult(
            added=frozenset(public_taxonomies) - frozenset(last_known),
            removed=frozenset(last_known) - frozenset(public_taxonomies),
        )
        if not result.changed:
            return result

        await self.options.set(LAST_KNOWN_PUBLIC_TAXONOMIES, public_taxonomies)

        if result.added:
            logger.info(f"Taxonomies made public: {sorted(result.added)}")
            await self.transients.delete(UNINDEXED_TERMS_COUNT)
            await self.transients.delete(UNINDEXED_TERMS_LIMITED_COUNT)
            await self.indexing.set_reason(IndexingReason.TAXONOMY_MADE_PUBLIC)
            await self.maybe_add_notification()

        if result.removed:
            logger.info(f"Taxonomies made private: {sorted(result.removed)}")
            await self.maybe_schedule_cleanup()

        return result

    async def maybe_add_notification(self) -> None:
        existing = await self.notifications.get_notification_by_id(
            TAXONOMIES_MADE_PUBLIC_NOTIFICATION
        )
        if existing is None:
            await self.notifications.add_notification(
                Notification(
                    id=TAXONOMIES_MADE_PUBLIC_NOTIFICATION,
                    message=NOTIFICATION_MESSAGE,
                    type=NotificationType.WARNING,
                    capabilities=["wpseo_manage_options"],
                    priority=0.8,
                )
            )

    async def maybe_schedule_cleanup(self) -> None:
        if await self.scheduler.is_scheduled(CLEANUP_START_HOOK):
            return
        run_at = self.clock() + self.cleanup_delay
        if await self.scheduler.schedule_once(CLEANUP_START_HOOK, run_at):
            logger.debug(f"Scheduled {CLEANUP_START_HOOK} at {run_at.isoformat()}")
