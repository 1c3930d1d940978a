from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from seodex.domain.taxonomy.port.taxonomies import TaxonomyLister
from seodex.infrastructure.persistence.tables import taxonomies_table


class SQLAlchemyTaxonomyLister(TaxonomyLister):
    """Reads the taxonomy registry table."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get_public_taxonomies(self) -> dict[str, str]:
        stmt = (
            select(taxonomies_table.c.name, taxonomies_table.c.label)
            .where(taxonomies_table.c.public.is_(True))
            .order_by(taxonomies_table.c.name)
        )
        rows = (await self.session.execute(stmt)).all()
        return {row.name: row.label for row in rows}
