"""JobScheduler port - one-off deferred jobs identified by hook name."""

from abc import abstractmethod
from datetime import datetime
from typing import Protocol

from seodex.domain.shared.port import Port


class JobScheduler(Port, Protocol):
    @abstractmethod
    async def is_scheduled(self, hook: str) -> bool:
        """Whether a pending run of hook exists."""
        ...

    @abstractmethod
    async def next_scheduled(self, hook: str) -> datetime | None:
        """When the next pending run of hook is due, if any."""
        ...

    @abstractmethod
    async def schedule_once(self, hook: str, run_at: datetime) -> bool:
        """Schedule a single run of hook at run_at.

        Returns False when a pending run already exists; nothing is scheduled then.
        """
        ...
