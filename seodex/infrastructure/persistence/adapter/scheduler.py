"""SQL-backed one-off job scheduler."""

import logging
from datetime import UTC, datetime
from uuid import uuid4

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.ext.asyncio import AsyncSession

from seodex.domain.shared.error import ConfigurationError
from seodex.domain.shared.port.scheduler import JobScheduler
from seodex.infrastructure.persistence.tables import scheduled_jobs_table

logger = logging.getLogger(__name__)

PENDING = "pending"

_INSERTS = {"sqlite": sqlite_insert, "postgresql": pg_insert}


class SQLAlchemyJobScheduler(JobScheduler):
    """Stores pending runs in scheduled_jobs.

    A partial unique index allows one pending run per hook and the insert does
    nothing on conflict, so two callers racing past is_scheduled() cannot both
    schedule; the loser gets False.

    This adapter only enqueues. The host job runner that executes a hook must
    move its row out of status "pending" (for example to "done") once the run
    finishes; until then is_scheduled() stays true and no new run is queued.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def is_scheduled(self, hook: str) -> bool:
        return await self.next_scheduled(hook) is not None

    async def next_scheduled(self, hook: str) -> datetime | None:
        stmt = (
            select(scheduled_jobs_table.c.run_at)
            .where(
                scheduled_jobs_table.c.hook == hook,
                scheduled_jobs_table.c.status == PENDING,
            )
            .order_by(scheduled_jobs_table.c.run_at)
            .limit(1)
        )
        return (await self.session.execute(stmt)).scalar_one_or_none()

    async def schedule_once(self, hook: str, run_at: datetime) -> bool:
        dialect = self.session.get_bind().dialect.name
        insert = _INSERTS.get(dialect)
        if insert is None:
            raise ConfigurationError(f"Job scheduling is not supported on {dialect}")

        stmt = (
            insert(scheduled_jobs_table)
            .values(
                id=str(uuid4()),
                hook=hook,
                run_at=run_at,
                status=PENDING,
                created_at=datetime.now(UTC),
            )
            .on_conflict_do_nothing()
        )
        result = await self.session.execute(stmt)
        await self.session.flush()

        if result.rowcount == 0:
            logger.debug(f"Job {hook} already has a pending run")
            return False
        return True
