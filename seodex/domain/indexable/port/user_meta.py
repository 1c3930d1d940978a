"""UserMetaReader port - per-user attribute lookups."""

from abc import abstractmethod
from typing import Protocol

from seodex.domain.shared.port import Port


class UserMetaReader(Port, Protocol):
    @abstractmethod
    async def get(self, user_id: int, key: str) -> str | None:
        """Return the stored value, or None when the user has no such meta."""
        ...
