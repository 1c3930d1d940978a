"""Tests for IndexableService."""

from unittest.mock import AsyncMock

import pytest

from seodex.domain.indexable.error import AuthorNotBuiltError
from seodex.domain.indexable.model.indexable import Indexable
from seodex.domain.indexable.model.value import ObjectType
from seodex.domain.indexable.service.indexable import IndexableService
from seodex.domain.shared.error import NotFoundError


@pytest.fixture
def builder() -> AsyncMock:
    builder = AsyncMock()

    async def build(user_id: int, indexable: Indexable) -> Indexable:
        indexable.object_id = user_id
        indexable.object_type = ObjectType.USER
        return indexable

    builder.build.side_effect = build
    return builder


@pytest.fixture
def repository() -> AsyncMock:
    repo = AsyncMock()
    repo.get.return_value = None

    async def save(indexable: Indexable) -> Indexable:
        indexable.id = indexable.id or 100
        return indexable

    repo.save.side_effect = save
    return repo


class TestBuildAuthor:
    @pytest.mark.asyncio
    async def test_saves_built_indexable(self, builder, repository):
        service = IndexableService(builder=builder, repository=repository)

        result = await service.build_author(7)

        assert result is not None
        assert result.id == 100
        assert result.object_id == 7
        repository.save.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_rebuild_keeps_existing_id(self, builder, repository):
        repository.get.return_value = Indexable(
            id=12, object_id=7, object_type=ObjectType.USER, title="stale"
        )
        service = IndexableService(builder=builder, repository=repository)

        result = await service.build_author(7)

        assert result is not None
        assert result.id == 12
        # Fresh record, nothing carried over from the stored row
        assert result.title is None

    @pytest.mark.asyncio
    async def test_ineligible_author_is_not_saved(self, builder, repository):
        builder.build.side_effect = AuthorNotBuiltError.author_archives_are_disabled(7)
        service = IndexableService(builder=builder, repository=repository)

        result = await service.build_author(7)

        assert result is None
        repository.save.assert_not_awaited()
        repository.delete.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_ineligible_author_loses_stored_indexable(self, builder, repository):
        repository.get.return_value = Indexable(id=12, object_id=7, object_type=ObjectType.USER)
        builder.build.side_effect = (
            AuthorNotBuiltError.author_archives_are_not_indexed_for_users_without_posts(7)
        )
        service = IndexableService(builder=builder, repository=repository)

        result = await service.build_author(7)

        assert result is None
        repository.delete.assert_awaited_once_with(ObjectType.USER, 7)

    @pytest.mark.asyncio
    async def test_port_errors_propagate(self, builder, repository):
        builder.build.side_effect = RuntimeError("database is locked")
        service = IndexableService(builder=builder, repository=repository)

        with pytest.raises(RuntimeError, match="database is locked"):
            await service.build_author(7)


class TestGetAuthor:
    @pytest.mark.asyncio
    async def test_missing_raises_not_found(self, builder, repository):
        service = IndexableService(builder=builder, repository=repository)

        with pytest.raises(NotFoundError):
            await service.get_author(7)
