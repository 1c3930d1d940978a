"""IndexingHelper - records why the site needs re-indexing."""

import logging

from seodex.domain.indexable.model.indexing import IndexingReason
from seodex.domain.shared.port.options import OptionStore
from seodex.domain.shared.service import Service

logger = logging.getLogger(__name__)

INDEXING_REASON_OPTION = "indexing_reason"


class IndexingHelper(Service):
    """Stores the global indexing reason in the option store.

    Cached unindexed counts are left alone; callers clear the ones their
    change affects.
    """

    options: OptionStore

    async def set_reason(self, reason: IndexingReason) -> None:
        await self.options.set(INDEXING_REASON_OPTION, str(reason))
        logger.info(f"Indexing reason set: {reason}")

    async def get_reason(self) -> IndexingReason | None:
        value = await self.options.get(INDEXING_REASON_OPTION, "")
        if not value:
            return None
        return IndexingReason(value)
