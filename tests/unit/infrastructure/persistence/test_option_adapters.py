"""Tests for SQLAlchemyOptionStore and SQLAlchemyTransientCache."""

from datetime import UTC, datetime, timedelta

import pytest
from sqlalchemy import update

from seodex.infrastructure.persistence.adapter.options import (
    SQLAlchemyOptionStore,
    SQLAlchemyTransientCache,
)
from seodex.infrastructure.persistence.tables import transients_table


class TestOptionStore:
    @pytest.mark.asyncio
    async def test_missing_key_returns_default(self, session):
        store = SQLAlchemyOptionStore(session)

        assert await store.get("last_known_public_taxonomies", []) == []
        assert await store.get("nope") is None

    @pytest.mark.asyncio
    async def test_set_then_get(self, session):
        store = SQLAlchemyOptionStore(session)

        await store.set("last_known_public_taxonomies", ["category", "post_tag"])

        assert await store.get("last_known_public_taxonomies") == ["category", "post_tag"]

    @pytest.mark.asyncio
    async def test_set_overwrites(self, session):
        store = SQLAlchemyOptionStore(session)

        await store.set("disable-author", False)
        await store.set("disable-author", True)

        assert await store.get("disable-author") is True


class TestTransientCache:
    @pytest.mark.asyncio
    async def test_delete_reports_whether_removed(self, session):
        cache = SQLAlchemyTransientCache(session)
        await cache.set("wpseo_total_unindexed_terms", 12)

        assert await cache.delete("wpseo_total_unindexed_terms") is True
        assert await cache.delete("wpseo_total_unindexed_terms") is False
        assert await cache.get("wpseo_total_unindexed_terms") is None

    @pytest.mark.asyncio
    async def test_set_replaces_value(self, session):
        cache = SQLAlchemyTransientCache(session)

        await cache.set("count", 1)
        await cache.set("count", 2, expiration=60)

        assert await cache.get("count") == 2

    @pytest.mark.asyncio
    async def test_expired_value_reads_as_missing(self, session):
        cache = SQLAlchemyTransientCache(session)
        await cache.set("count", 5, expiration=60)
        await session.execute(
            update(transients_table)
            .where(transients_table.c.key == "count")
            .values(expires_at=datetime.now(UTC) - timedelta(seconds=1))
        )

        assert await cache.get("count") is None
        assert await cache.delete("count") is False
