"""IndexableAuthorBuilder - formats author meta into an indexable."""

import logging
from dataclasses import field
from typing import Sequence

from seodex.domain.indexable.error import AuthorNotBuiltError
from seodex.domain.indexable.model.indexable import Indexable
from seodex.domain.indexable.model.value import AlternativeImage, ObjectTimestamps, ObjectType
from seodex.domain.indexable.model.versions import IndexableBuilderVersions
from seodex.domain.indexable.port.author_archive import AuthorArchive
from seodex.domain.indexable.port.avatar import AvatarService
from seodex.domain.indexable.port.post_timestamps import PostTimestampReader
from seodex.domain.indexable.port.urls import AuthorUrlBuilder
from seodex.domain.indexable.port.user_meta import UserMetaReader
from seodex.domain.indexable.service.eligibility import EligibilityFilter, keep_verdict
from seodex.domain.indexable.service.social_image import SocialImageHelper
from seodex.domain.shared.error import NotEligibleError
from seodex.domain.shared.service import Service

logger = logging.getLogger(__name__)

META_KEYS = ("wpseo_title", "wpseo_metadesc", "wpseo_noindex_author")

GRAVATAR_SOURCE = "gravatar-image"


class IndexableAuthorBuilder(Service):
    """Builds the indexable of an author archive from user meta, posts and avatar.

    Raises AuthorNotBuiltError when the author should not get an indexable.
    Never persists anything.
    """

    author_archive: AuthorArchive
    user_meta: UserMetaReader
    timestamps: PostTimestampReader
    urls: AuthorUrlBuilder
    avatars: AvatarService
    versions: IndexableBuilderVersions
    public_post_statuses: Sequence[str] = ("publish",)
    blog_id: int = 1
    avatar_size: int = 500
    should_build: EligibilityFilter = keep_verdict
    social_images: SocialImageHelper = field(default_factory=SocialImageHelper)

    async def build(self, user_id: int, indexable: Indexable) -> Indexable:
        """Populate indexable for the author with the given id and return it."""
        verdict = await self.check_if_user_should_be_indexed(user_id)
        if verdict is not None:
            raise verdict

        meta = await self.get_meta_data(user_id)

        indexable.object_id = user_id
        indexable.object_type = ObjectType.USER
        indexable.permalink = await self.urls.get_author_posts_url(user_id)
        indexable.title = meta["wpseo_title"]
        indexable.description = meta["wpseo_metadesc"]
        indexable.is_cornerstone = False
        indexable.is_robots_noindex = meta["wpseo_noindex_author"] == "on"
        indexable.is_robots_nofollow = None
        indexable.is_robots_noarchive = None
        indexable.is_robots_noimageindex = None
        indexable.is_robots_nosnippet = None
        indexable.is_public = False if indexable.is_robots_noindex else None
        indexable.has_public_posts = await self.author_archive.author_has_public_posts(user_id)
        indexable.blog_id = self.blog_id

        self.social_images.reset_social_images(indexable)
        await self.social_images.handle_social_images(indexable, self.find_alternative_image)

        timestamps = await self.get_object_timestamps(user_id)
        indexable.object_published_at = timestamps.published_at
        indexable.object_last_modified = timestamps.last_modified

        indexable.version = self.versions.get_latest_version_for_type(ObjectType.USER)

        logger.debug(f"Built author indexable for user {user_id} (version={indexable.version})")
        return indexable

    async def get_meta_data(self, user_id: int) -> dict[str, str | None]:
        return {key: await self.get_author_meta(user_id, key) for key in META_KEYS}

    async def get_author_meta(self, user_id: int, key: str) -> str | None:
        value = await self.user_meta.get(user_id, key)
        if value == "":
            return None
        return value

    async def find_alternative_image(self, indexable: Indexable) -> AlternativeImage | None:
        if indexable.object_id is None:
            return None
        url = await self.avatars.get_avatar_url(
            indexable.object_id, size=self.avatar_size, scheme="https"
        )
        if url:
            return AlternativeImage(image=url, source=GRAVATAR_SOURCE)
        return None

    async def get_object_timestamps(self, author_id: int) -> ObjectTimestamps:
        return await self.timestamps.get_author_timestamps(author_id, self.public_post_statuses)

    async def check_if_user_should_be_indexed(self, user_id: int) -> NotEligibleError | None:
        """Return the reason the author must not be indexed, or None.

        Both checks always run; when both fail, the "no posts" verdict is the one
        passed on to the eligibility filter.
        """
        verdict: NotEligibleError | None = None

        if await self.author_archive.are_disabled():
            verdict = AuthorNotBuiltError.author_archives_are_disabled(user_id)

        if await self.author_archive.author_has_public_posts(user_id) is False:
            verdict = AuthorNotBuiltError.author_archives_are_not_indexed_for_users_without_posts(
                user_id
            )

        return self.should_build(verdict, user_id)
