"""AuthorArchive port - author archive settings and post ownership."""

from abc import abstractmethod
from typing import Protocol

from seodex.domain.shared.port import Port


class AuthorArchive(Port, Protocol):
    @abstractmethod
    async def are_disabled(self) -> bool:
        """Whether author archives are disabled site-wide."""
        ...

    @abstractmethod
    async def author_has_public_posts(self, user_id: int) -> bool | None:
        """Whether the author has at least one public post.

        Returns None when this cannot be decided yet.
        """
        ...
