"""OptionStore port - site-wide key/value settings."""

from abc import abstractmethod
from typing import Any, Protocol

from seodex.domain.shared.port import Port


class OptionStore(Port, Protocol):
    @abstractmethod
    async def get(self, key: str, default: Any = None) -> Any:
        """Return the stored value for key, or default when unset."""
        ...

    @abstractmethod
    async def set(self, key: str, value: Any) -> None:
        """Store value under key, replacing any previous value."""
        ...
