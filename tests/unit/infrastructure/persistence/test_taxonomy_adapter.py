import pytest
from sqlalchemy import insert

from seodex.infrastructure.persistence.adapter.taxonomies import SQLAlchemyTaxonomyLister
from seodex.infrastructure.persistence.tables import taxonomies_table


@pytest.mark.asyncio
async def test_lists_only_public_taxonomies(session):
    await session.execute(
        insert(taxonomies_table),
        [
            {"name": "category", "label": "Categories", "public": True},
            {"name": "post_tag", "label": "Tags", "public": True},
            {"name": "nav_menu", "label": "Menus", "public": False},
        ],
    )
    lister = SQLAlchemyTaxonomyLister(session)

    assert await lister.get_public_taxonomies() == {
        "category": "Categories",
        "post_tag": "Tags",
    }
