from abc import abstractmethod
from typing import Protocol

from seodex.domain.shared.port import Port


class RequestContext(Port, Protocol):
    """Describes the request the current unit of work runs in."""

    @abstractmethod
    def is_json_request(self) -> bool:
        """True for AJAX/REST requests, False for plain navigational requests."""
        ...
