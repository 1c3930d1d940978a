"""RequestContext implementations for non-HTTP entry points."""

from dataclasses import dataclass

from seodex.domain.taxonomy.port.request_context import RequestContext


@dataclass(frozen=True)
class StaticRequestContext(RequestContext):
    """A request context whose kind is known up front (CLI runs, scheduled jobs)."""

    json_request: bool = False

    def is_json_request(self) -> bool:
        return self.json_request
