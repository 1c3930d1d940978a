"""DI provider for the indexable bounded context."""

from dishka import provide

from seodex.config import Config
from seodex.domain.indexable.model.versions import IndexableBuilderVersions
from seodex.domain.indexable.port.author_archive import AuthorArchive
from seodex.domain.indexable.port.avatar import AvatarService
from seodex.domain.indexable.port.post_timestamps import PostTimestampReader
from seodex.domain.indexable.port.urls import AuthorUrlBuilder
from seodex.domain.indexable.port.user_meta import UserMetaReader
from seodex.domain.indexable.service.author_builder import IndexableAuthorBuilder
from seodex.domain.indexable.service.indexable import IndexableService
from seodex.domain.indexable.service.indexing import IndexingHelper
from seodex.util.di.base import Provider
from seodex.util.di.scope import Scope


class IndexableProvider(Provider):
    @provide(scope=Scope.APP)
    def get_versions(self) -> IndexableBuilderVersions:
        return IndexableBuilderVersions()

    indexing_helper = provide(IndexingHelper, scope=Scope.UOW)
    indexable_service = provide(IndexableService, scope=Scope.UOW)

    @provide(scope=Scope.UOW)
    def get_author_builder(
        self,
        author_archive: AuthorArchive,
        user_meta: UserMetaReader,
        timestamps: PostTimestampReader,
        urls: AuthorUrlBuilder,
        avatars: AvatarService,
        versions: IndexableBuilderVersions,
        config: Config,
    ) -> IndexableAuthorBuilder:
        return IndexableAuthorBuilder(
            author_archive=author_archive,
            user_meta=user_meta,
            timestamps=timestamps,
            urls=urls,
            avatars=avatars,
            versions=versions,
            public_post_statuses=tuple(config.indexing.public_post_statuses),
            blog_id=config.site.blog_id,
            avatar_size=config.indexing.avatar_size,
        )
