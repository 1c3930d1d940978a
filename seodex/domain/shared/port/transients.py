"""TransientCache port - short-lived cached values."""

from abc import abstractmethod
from typing import Any, Protocol

from seodex.domain.shared.port import Port


class TransientCache(Port, Protocol):
    @abstractmethod
    async def get(self, key: str) -> Any | None:
        """Return the cached value, or None when missing or expired."""
        ...

    @abstractmethod
    async def set(self, key: str, value: Any, expiration: int = 0) -> None:
        """Cache value for expiration seconds (0 means no expiry)."""
        ...

    @abstractmethod
    async def delete(self, key: str) -> bool:
        """Remove a cached value. Returns whether anything was removed."""
        ...
