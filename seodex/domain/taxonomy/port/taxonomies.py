"""TaxonomyLister port - the taxonomy registry."""

from abc import abstractmethod
from typing import Protocol

from seodex.domain.shared.port import Port


class TaxonomyLister(Port, Protocol):
    @abstractmethod
    async def get_public_taxonomies(self) -> dict[str, str]:
        """Return the currently public taxonomies as a name -> label mapping."""
        ...
