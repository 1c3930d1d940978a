"""SQL-backed option and transient stores."""

from datetime import UTC, datetime, timedelta
from typing import Any

from sqlalchemy import delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from seodex.domain.shared.port.options import OptionStore
from seodex.domain.shared.port.transients import TransientCache
from seodex.infrastructure.persistence.tables import options_table, transients_table


class SQLAlchemyOptionStore(OptionStore):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get(self, key: str, default: Any = None) -> Any:
        stmt = select(options_table.c.value).where(options_table.c.name == key)
        row = (await self.session.execute(stmt)).first()
        if row is None:
            return default
        return row.value

    async def set(self, key: str, value: Any) -> None:
        now = datetime.now(UTC)
        stmt = select(options_table.c.name).where(options_table.c.name == key)
        exists = (await self.session.execute(stmt)).first() is not None

        if exists:
            stmt = (
                update(options_table)
                .where(options_table.c.name == key)
                .values(value=value, updated_at=now)
            )
        else:
            stmt = insert(options_table).values(name=key, value=value, updated_at=now)

        await self.session.execute(stmt)
        await self.session.flush()


class SQLAlchemyTransientCache(TransientCache):
    """Transients with lazy expiry: expired rows read as missing and are purged on read."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get(self, key: str) -> Any | None:
        stmt = select(transients_table).where(transients_table.c.key == key)
        row = (await self.session.execute(stmt)).mappings().first()
        if row is None:
            return None

        expires_at = row["expires_at"]
        if expires_at is not None and expires_at <= datetime.now(UTC):
            await self.delete(key)
            return None
        return row["value"]

    async def set(self, key: str, value: Any, expiration: int = 0) -> None:
        expires_at = datetime.now(UTC) + timedelta(seconds=expiration) if expiration > 0 else None
        await self.session.execute(delete(transients_table).where(transients_table.c.key == key))
        await self.session.execute(
            insert(transients_table).values(key=key, value=value, expires_at=expires_at)
        )
        await self.session.flush()

    async def delete(self, key: str) -> bool:
        result = await self.session.execute(
            delete(transients_table).where(transients_table.c.key == key)
        )
        await self.session.flush()
        return result.rowcount > 0
