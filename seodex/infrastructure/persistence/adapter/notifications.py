"""SQL-backed notification center."""

from datetime import UTC, datetime

from sqlalchemy import delete, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from seodex.domain.shared.model.notification import Notification
from seodex.domain.shared.port.notifications import NotificationCenter
from seodex.infrastructure.persistence.tables import notifications_table


class SQLAlchemyNotificationCenter(NotificationCenter):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get_notification_by_id(self, notification_id: str) -> Notification | None:
        stmt = select(notifications_table).where(notifications_table.c.id == notification_id)
        row = (await self.session.execute(stmt)).mappings().first()
        if row is None:
            return None
        return Notification(
            id=row["id"],
            message=row["message"],
            type=row["type"],
            capabilities=row["capabilities"],
            priority=row["priority"],
        )

    async def add_notification(self, notification: Notification) -> None:
        """Store a notification, replacing one with the same id."""
        await self.remove_notification_by_id(notification.id)
        await self.session.execute(
            insert(notifications_table).values(
                id=notification.id,
                message=notification.message,
                type=str(notification.type),
                capabilities=notification.capabilities,
                priority=notification.priority,
                created_at=datetime.now(UTC),
            )
        )
        await self.session.flush()

    async def remove_notification_by_id(self, notification_id: str) -> None:
        await self.session.execute(
            delete(notifications_table).where(notifications_table.c.id == notification_id)
        )
        await self.session.flush()
