"""IndexableService - builds author indexables and hands them to the repository."""

import logging

import logfire

from seodex.domain.indexable.model.indexable import Indexable
from seodex.domain.indexable.model.value import ObjectType
from seodex.domain.indexable.port.repository import IndexableRepository
from seodex.domain.indexable.service.author_builder import IndexableAuthorBuilder
from seodex.domain.shared.error import NotEligibleError, NotFoundError
from seodex.domain.shared.service import Service

logger = logging.getLogger(__name__)


class IndexableService(Service):
    """Entry point used by the CLI to (re)build and look up author indexables."""

    builder: IndexableAuthorBuilder
    repository: IndexableRepository

    async def build_author(self, user_id: int) -> Indexable | None:
        """Build and persist the author's indexable.

        Returns None when the author is not eligible; an existing indexable for
        the author is removed in that case.
        """
        with logfire.span("BuildAuthorIndexable", user_id=user_id):
            return await self._build_author(user_id)

    async def _build_author(self, user_id: int) -> Indexable | None:
        existing = await self.repository.get(ObjectType.USER, user_id)
        indexable = Indexable(id=existing.id) if existing else Indexable()

        try:
            indexable = await self.builder.build(user_id, indexable)
        except NotEligibleError as e:
            logger.info(f"Skipping author {e.entity_id}: {e.reason}")
            if existing is not None:
                await self.repository.delete(ObjectType.USER, user_id)
            return None

        saved = await self.repository.save(indexable)
        logger.debug(f"Author indexable saved: user={user_id} id={saved.id}")
        return saved

    async def get_author(self, user_id: int) -> Indexable:
        indexable = await self.repository.get(ObjectType.USER, user_id)
        if indexable is None:
            raise NotFoundError(f"No indexable for author {user_id}")
        return indexable
