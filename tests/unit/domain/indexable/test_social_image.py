"""Tests for SocialImageHelper."""

from unittest.mock import AsyncMock

import pytest

from seodex.domain.indexable.model.indexable import Indexable
from seodex.domain.indexable.model.value import AlternativeImage
from seodex.domain.indexable.service.social_image import SET_BY_USER, SocialImageHelper

ALT = AlternativeImage(image="https://example.org/alt.png", source="gravatar-image")


@pytest.fixture
def helper() -> SocialImageHelper:
    return SocialImageHelper()


class TestReset:
    def test_clears_all_image_fields(self, helper):
        indexable = Indexable(
            open_graph_image="a.png",
            open_graph_image_id=1,
            open_graph_image_source="featured-image",
            open_graph_image_meta={"width": 10},
            twitter_image="b.png",
            twitter_image_id=2,
            twitter_image_source="first-content-image",
            title="kept",
        )

        helper.reset_social_images(indexable)

        assert indexable.open_graph_image is None
        assert indexable.open_graph_image_id is None
        assert indexable.open_graph_image_source is None
        assert indexable.open_graph_image_meta is None
        assert indexable.twitter_image is None
        assert indexable.twitter_image_id is None
        assert indexable.twitter_image_source is None
        assert indexable.title == "kept"


class TestHandle:
    @pytest.mark.asyncio
    async def test_alternative_fills_both(self, helper):
        finder = AsyncMock(return_value=ALT)
        indexable = Indexable()

        await helper.handle_social_images(indexable, finder)

        assert indexable.open_graph_image == ALT.image
        assert indexable.open_graph_image_source == ALT.source
        assert indexable.twitter_image == ALT.image
        assert indexable.twitter_image_source == ALT.source
        finder.assert_awaited_once_with(indexable)

    @pytest.mark.asyncio
    async def test_no_alternative_leaves_images_empty(self, helper):
        finder = AsyncMock(return_value=None)
        indexable = Indexable()

        await helper.handle_social_images(indexable, finder)

        assert indexable.open_graph_image is None
        assert indexable.twitter_image is None
        finder.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_user_set_images_win(self, helper):
        finder = AsyncMock(return_value=ALT)
        indexable = Indexable(open_graph_image="og.png", twitter_image="tw.png")

        await helper.handle_social_images(indexable, finder)

        assert indexable.open_graph_image == "og.png"
        assert indexable.open_graph_image_source == SET_BY_USER
        assert indexable.twitter_image == "tw.png"
        assert indexable.twitter_image_source == SET_BY_USER
        finder.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_user_open_graph_image_is_not_copied_to_twitter(self, helper):
        finder = AsyncMock(return_value=ALT)
        indexable = Indexable(open_graph_image="og.png", open_graph_image_id=5)

        await helper.handle_social_images(indexable, finder)

        assert indexable.open_graph_image_source == SET_BY_USER
        assert indexable.twitter_image == ALT.image
        assert indexable.twitter_image_id is None
        assert indexable.twitter_image_source == ALT.source
        finder.assert_awaited_once_with(indexable)

    @pytest.mark.asyncio
    async def test_user_open_graph_image_without_alternative_leaves_twitter_empty(self, helper):
        finder = AsyncMock(return_value=None)
        indexable = Indexable(open_graph_image="og.png")

        await helper.handle_social_images(indexable, finder)

        assert indexable.twitter_image is None
        assert indexable.twitter_image_source is None

    @pytest.mark.asyncio
    async def test_twitter_alone_set_keeps_og_alternative(self, helper):
        finder = AsyncMock(return_value=ALT)
        indexable = Indexable(twitter_image="tw.png")

        await helper.handle_social_images(indexable, finder)

        assert indexable.open_graph_image == ALT.image
        assert indexable.twitter_image == "tw.png"
        assert indexable.twitter_image_source == SET_BY_USER
