"""PostTimestampReader port - aggregate post dates for an author."""

from abc import abstractmethod
from typing import Protocol, Sequence

from seodex.domain.indexable.model.value import ObjectTimestamps
from seodex.domain.shared.port import Port


class PostTimestampReader(Port, Protocol):
    @abstractmethod
    async def get_author_timestamps(
        self, author_id: int, post_statuses: Sequence[str]
    ) -> ObjectTimestamps:
        """MIN(post date) and MAX(modified date) over the author's unprotected posts
        whose status is one of post_statuses."""
        ...
