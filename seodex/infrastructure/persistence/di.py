from typing import AsyncIterable

from dishka import provide
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from seodex.config import Config
from seodex.domain.indexable.port.author_archive import AuthorArchive
from seodex.domain.indexable.port.avatar import AvatarService
from seodex.domain.indexable.port.post_timestamps import PostTimestampReader
from seodex.domain.indexable.port.repository import IndexableRepository
from seodex.domain.indexable.port.urls import AuthorUrlBuilder
from seodex.domain.indexable.port.user_meta import UserMetaReader
from seodex.domain.shared.port.notifications import NotificationCenter
from seodex.domain.shared.port.options import OptionStore
from seodex.domain.shared.port.scheduler import JobScheduler
from seodex.domain.shared.port.transients import TransientCache
from seodex.domain.taxonomy.port.taxonomies import TaxonomyLister
from seodex.infrastructure.persistence.adapter.notifications import SQLAlchemyNotificationCenter
from seodex.infrastructure.persistence.adapter.options import (
    SQLAlchemyOptionStore,
    SQLAlchemyTransientCache,
)
from seodex.infrastructure.persistence.adapter.posts import (
    SQLAlchemyAuthorArchive,
    SQLAlchemyPostTimestampReader,
)
from seodex.infrastructure.persistence.adapter.scheduler import SQLAlchemyJobScheduler
from seodex.infrastructure.persistence.adapter.taxonomies import SQLAlchemyTaxonomyLister
from seodex.infrastructure.persistence.adapter.users import (
    GravatarAvatarService,
    SQLAlchemyAuthorUrlBuilder,
    SQLAlchemyUserMetaReader,
)
from seodex.infrastructure.persistence.database import (
    create_db_engine,
    create_session_factory,
)
from seodex.infrastructure.persistence.repository.indexable import (
    SQLAlchemyIndexableRepository,
)
from seodex.util.di.base import Provider
from seodex.util.di.scope import Scope


class PersistenceProvider(Provider):
    # APP-scoped factories
    @provide(scope=Scope.APP)
    def get_engine(self, config: Config) -> AsyncEngine:
        return create_db_engine(config.database)

    @provide(scope=Scope.APP)
    def get_session_factory(self, engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
        return create_session_factory(engine)

    # UOW-scoped session (one per unit of work)
    @provide(scope=Scope.UOW)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterable[AsyncSession]:
        async with session_factory() as session:
            yield session
            await session.commit()

    # Host subsystem adapters
    option_store = provide(SQLAlchemyOptionStore, scope=Scope.UOW, provides=OptionStore)
    transient_cache = provide(SQLAlchemyTransientCache, scope=Scope.UOW, provides=TransientCache)
    notification_center = provide(
        SQLAlchemyNotificationCenter, scope=Scope.UOW, provides=NotificationCenter
    )
    job_scheduler = provide(SQLAlchemyJobScheduler, scope=Scope.UOW, provides=JobScheduler)
    taxonomy_lister = provide(SQLAlchemyTaxonomyLister, scope=Scope.UOW, provides=TaxonomyLister)
    user_meta = provide(SQLAlchemyUserMetaReader, scope=Scope.UOW, provides=UserMetaReader)
    post_timestamps = provide(
        SQLAlchemyPostTimestampReader, scope=Scope.UOW, provides=PostTimestampReader
    )

    @provide(scope=Scope.UOW)
    def get_avatar_service(self, session: AsyncSession) -> AvatarService:
        return GravatarAvatarService(session=session)

    @provide(scope=Scope.UOW)
    def get_author_url_builder(self, session: AsyncSession, config: Config) -> AuthorUrlBuilder:
        return SQLAlchemyAuthorUrlBuilder(
            session=session,
            home_url=config.site.home_url,
            author_base=config.site.author_base,
        )

    @provide(scope=Scope.UOW)
    def get_author_archive(
        self, session: AsyncSession, options: OptionStore, config: Config
    ) -> AuthorArchive:
        return SQLAlchemyAuthorArchive(
            session=session,
            options=options,
            public_post_statuses=config.indexing.public_post_statuses,
        )

    # Repositories
    indexable_repo = provide(
        SQLAlchemyIndexableRepository, scope=Scope.UOW, provides=IndexableRepository
    )
