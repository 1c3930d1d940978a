"""NotificationCenter port - admin notifications keyed by id."""

from abc import abstractmethod
from typing import Protocol

from seodex.domain.shared.model.notification import Notification
from seodex.domain.shared.port import Port


class NotificationCenter(Port, Protocol):
    @abstractmethod
    async def get_notification_by_id(self, notification_id: str) -> Notification | None: ...

    @abstractmethod
    async def add_notification(self, notification: Notification) -> None: ...

    @abstractmethod
    async def remove_notification_by_id(self, notification_id: str) -> None: ...
