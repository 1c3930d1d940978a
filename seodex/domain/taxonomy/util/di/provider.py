"""DI provider for the taxonomy bounded context."""

from datetime import timedelta

from dishka import provide

from seodex.config import Config
from seodex.domain.indexable.service.indexing import IndexingHelper
from seodex.domain.shared.port.notifications import NotificationCenter
from seodex.domain.shared.port.options import OptionStore
from seodex.domain.shared.port.scheduler import JobScheduler
from seodex.domain.shared.port.transients import TransientCache
from seodex.domain.taxonomy.port.request_context import RequestContext
from seodex.domain.taxonomy.port.taxonomies import TaxonomyLister
from seodex.domain.taxonomy.service.change_watcher import TaxonomyChangeWatcher
from seodex.infrastructure.request import StaticRequestContext
from seodex.util.di.base import Provider
from seodex.util.di.scope import Scope


class TaxonomyProvider(Provider):
    @provide(scope=Scope.APP)
    def get_request_context(self) -> RequestContext:
        # Only navigational entry points (the CLI) build this container
        return StaticRequestContext(json_request=False)

    @provide(scope=Scope.UOW)
    def get_change_watcher(
        self,
        options: OptionStore,
        taxonomies: TaxonomyLister,
        request: RequestContext,
        transients: TransientCache,
        indexing: IndexingHelper,
        notifications: NotificationCenter,
        scheduler: JobScheduler,
        config: Config,
    ) -> TaxonomyChangeWatcher:
        return TaxonomyChangeWatcher(
            options=options,
            taxonomies=taxonomies,
            request=request,
            transients=transients,
            indexing=indexing,
            notifications=notifications,
            scheduler=scheduler,
            cleanup_delay=timedelta(seconds=config.indexing.cleanup_delay_seconds),
        )
