"""Tests for SQLAlchemyIndexableRepository."""

from datetime import datetime, timedelta, timezone

import pytest

from db_helpers import utc
from seodex.domain.indexable.model.indexable import Indexable
from seodex.domain.indexable.model.value import ObjectType
from seodex.domain.shared.error import ValidationError
from seodex.infrastructure.persistence.repository.indexable import (
    SQLAlchemyIndexableRepository,
)


def _author(user_id: int, **overrides) -> Indexable:
    fields = {
        "object_id": user_id,
        "object_type": ObjectType.USER,
        "permalink": f"https://example.org/author/u{user_id}/",
        "is_robots_noindex": True,
        "is_public": False,
        "open_graph_image_meta": {"width": 500},
        "object_published_at": utc(2024, 1, 1),
        "object_last_modified": utc(2024, 2, 1),
        "version": 2,
    }
    fields.update(overrides)
    return Indexable(**fields)


class TestIndexableRepository:
    @pytest.mark.asyncio
    async def test_save_assigns_id_and_roundtrips(self, session):
        repo = SQLAlchemyIndexableRepository(session)

        saved = await repo.save(_author(7))
        loaded = await repo.get(ObjectType.USER, 7)

        assert saved.id is not None
        assert loaded is not None
        assert loaded.id == saved.id
        assert loaded.object_type == ObjectType.USER
        assert loaded.is_public is False
        assert loaded.is_robots_nofollow is None
        assert loaded.open_graph_image_meta == {"width": 500}
        assert loaded.object_published_at == utc(2024, 1, 1)

    @pytest.mark.asyncio
    async def test_save_again_updates_same_row(self, session):
        repo = SQLAlchemyIndexableRepository(session)
        first = await repo.save(_author(7, title="Old"))

        second = await repo.save(_author(7, title="New"))
        loaded = await repo.get(ObjectType.USER, 7)

        assert second.id == first.id
        assert loaded is not None and loaded.title == "New"

    @pytest.mark.asyncio
    async def test_offset_timestamps_roundtrip_as_utc(self, session):
        repo = SQLAlchemyIndexableRepository(session)
        published = datetime(2024, 5, 4, 12, 0, tzinfo=timezone(timedelta(hours=2)))

        await repo.save(_author(7, object_published_at=published))
        loaded = await repo.get(ObjectType.USER, 7)

        assert loaded is not None
        assert loaded.object_published_at == utc(2024, 5, 4, 10, 0)
        assert loaded.object_published_at.tzinfo is not None

    @pytest.mark.asyncio
    async def test_object_type_is_part_of_the_key(self, session):
        repo = SQLAlchemyIndexableRepository(session)
        await repo.save(_author(7))

        assert await repo.get(ObjectType.TERM, 7) is None

    @pytest.mark.asyncio
    async def test_delete(self, session):
        repo = SQLAlchemyIndexableRepository(session)
        await repo.save(_author(7))

        await repo.delete(ObjectType.USER, 7)

        assert await repo.get(ObjectType.USER, 7) is None

    @pytest.mark.asyncio
    async def test_count_outdated(self, session):
        repo = SQLAlchemyIndexableRepository(session)
        await repo.save(_author(1, version=1))
        await repo.save(_author(2, version=2))
        await repo.save(_author(3, version=None))

        assert await repo.count_outdated(ObjectType.USER, 2) == 2

    @pytest.mark.asyncio
    async def test_untyped_indexable_is_rejected(self, session):
        repo = SQLAlchemyIndexableRepository(session)

        with pytest.raises(ValidationError):
            await repo.save(Indexable(object_id=7))
