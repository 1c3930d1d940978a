"""IndexableRepository port - persistence interface for indexables."""

from abc import abstractmethod
from typing import Protocol

from seodex.domain.indexable.model.indexable import Indexable
from seodex.domain.indexable.model.value import ObjectType
from seodex.domain.shared.port import Port


class IndexableRepository(Port, Protocol):
    @abstractmethod
    async def save(self, indexable: Indexable) -> Indexable: ...

    @abstractmethod
    async def get(self, object_type: ObjectType, object_id: int) -> Indexable | None: ...

    @abstractmethod
    async def delete(self, object_type: ObjectType, object_id: int) -> None: ...

    @abstractmethod
    async def count_outdated(self, object_type: ObjectType, version: int) -> int: ...
