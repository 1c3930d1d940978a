"""Builder versions per object type.

Bumping a version marks every stored indexable of that type as stale, so the
indexing orchestrator rebuilds them.
"""

from seodex.domain.indexable.model.value import ObjectType

DEFAULT_INDEXABLE_BUILDER_VERSION = 1


class IndexableBuilderVersions:
    """Knows the latest builder version for each object type."""

    def __init__(self, overrides: dict[ObjectType, int] | None = None) -> None:
        self._versions: dict[ObjectType, int] = {
            ObjectType.USER: 2,
        }
        if overrides:
            self._versions.update(overrides)

    def get_latest_version_for_type(self, object_type: ObjectType) -> int:
        return self._versions.get(object_type, DEFAULT_INDEXABLE_BUILDER_VERSION)
