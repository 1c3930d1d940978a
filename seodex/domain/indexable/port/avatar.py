"""AvatarService port - profile image lookup."""

from abc import abstractmethod
from typing import Literal, Protocol

from seodex.domain.shared.port import Port


class AvatarService(Port, Protocol):
    @abstractmethod
    async def get_avatar_url(
        self,
        user_id: int,
        size: int = 96,
        scheme: Literal["http", "https"] = "https",
    ) -> str | None:
        """Return the avatar URL for a user, or None when there is none."""
        ...
