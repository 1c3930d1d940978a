"""SocialImageHelper - resolves Open Graph and Twitter images on an indexable."""

from typing import Awaitable, Callable

from seodex.domain.indexable.model.indexable import Indexable
from seodex.domain.indexable.model.value import AlternativeImage

SET_BY_USER = "set-by-user"

AlternativeImageFinder = Callable[[Indexable], Awaitable[AlternativeImage | None]]

_SOCIAL_IMAGE_FIELDS = (
    "open_graph_image",
    "open_graph_image_id",
    "open_graph_image_source",
    "open_graph_image_meta",
    "twitter_image",
    "twitter_image_id",
    "twitter_image_source",
)


class SocialImageHelper:
    """Shared by all indexable builders.

    Explicitly set images win. Every image the user did not set comes from the
    builder-specific alternative image, so a user-set Open Graph image is never
    reported as a user-set Twitter image.
    """

    def reset_social_images(self, indexable: Indexable) -> None:
        for name in _SOCIAL_IMAGE_FIELDS:
            setattr(indexable, name, None)

    async def handle_social_images(
        self, indexable: Indexable, find_alternative_image: AlternativeImageFinder
    ) -> None:
        alternative: AlternativeImage | None = None
        looked_up = False

        if indexable.open_graph_image or indexable.open_graph_image_id:
            indexable.open_graph_image_source = SET_BY_USER
        else:
            alternative = await find_alternative_image(indexable)
            looked_up = True
            if alternative is not None:
                indexable.open_graph_image = alternative.image
                indexable.open_graph_image_source = alternative.source

        if indexable.twitter_image or indexable.twitter_image_id:
            indexable.twitter_image_source = SET_BY_USER
            return

        if not looked_up:
            alternative = await find_alternative_image(indexable)
        if alternative is not None:
            indexable.twitter_image = alternative.image
            indexable.twitter_image_source = alternative.source
