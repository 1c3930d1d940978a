from datetime import UTC, datetime

from sqlalchemy import delete, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from seodex.domain.indexable.model.indexable import Indexable
from seodex.domain.indexable.model.value import ObjectType
from seodex.domain.indexable.port.repository import IndexableRepository
from seodex.domain.shared.error import ValidationError
from seodex.infrastructure.persistence.mappers.indexable import (
    indexable_to_dict,
    row_to_indexable,
)
from seodex.infrastructure.persistence.tables import indexables_table


class SQLAlchemyIndexableRepository(IndexableRepository):
    """SQL implementation of IndexableRepository, one row per (object_type, object_id)."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get(self, object_type: ObjectType, object_id: int) -> Indexable | None:
        stmt = select(indexables_table).where(
            indexables_table.c.object_type == str(object_type),
            indexables_table.c.object_id == object_id,
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_indexable(dict(row)) if row else None

    async def save(self, indexable: Indexable) -> Indexable:
        if indexable.object_type is None:
            raise ValidationError("Indexable has no object type", field="object_type")

        values = indexable_to_dict(indexable)
        now = datetime.now(UTC)

        stmt = select(indexables_table.c.id).where(
            indexables_table.c.object_type == values["object_type"],
            indexables_table.c.object_id == indexable.object_id,
        )
        existing_id = (await self.session.execute(stmt)).scalar_one_or_none()

        if existing_id is not None:
            await self.session.execute(
                update(indexables_table)
                .where(indexables_table.c.id == existing_id)
                .values(**values, updated_at=now)
            )
            indexable_id = existing_id
        else:
            result = await self.session.execute(
                insert(indexables_table).values(**values, created_at=now, updated_at=now)
            )
            indexable_id = result.inserted_primary_key[0]

        await self.session.flush()
        indexable.id = indexable_id
        return indexable

    async def delete(self, object_type: ObjectType, object_id: int) -> None:
        await self.session.execute(
            delete(indexables_table).where(
                indexables_table.c.object_type == str(object_type),
                indexables_table.c.object_id == object_id,
            )
        )
        await self.session.flush()

    async def count_outdated(self, object_type: ObjectType, version: int) -> int:
        stmt = (
            select(func.count())
            .select_from(indexables_table)
            .where(
                indexables_table.c.object_type == str(object_type),
                (indexables_table.c.version.is_(None)) | (indexables_table.c.version < version),
            )
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()
