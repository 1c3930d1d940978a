from abc import abstractmethod
from typing import Protocol

from seodex.domain.shared.port import Port


class AuthorUrlBuilder(Port, Protocol):
    @abstractmethod
    async def get_author_posts_url(self, user_id: int) -> str: ...
