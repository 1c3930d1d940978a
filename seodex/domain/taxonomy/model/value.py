"""Taxonomy watcher value objects and well-known identifiers."""

from seodex.domain.shared.model.value import ValueObject

LAST_KNOWN_PUBLIC_TAXONOMIES = "last_known_public_taxonomies"
TAXONOMIES_MADE_PUBLIC_NOTIFICATION = "taxonomies-made-public"
CLEANUP_START_HOOK = "wpseo_start_cleanup_indexables"


class TaxonomyChangeResult(ValueObject):
    """What a visibility check found.

    baseline is True when there was no previous snapshot to compare against.
    """

    added: frozenset[str] = frozenset()
    removed: frozenset[str] = frozenset()
    baseline: bool = False

    @property
    def changed(self) -> bool:
        return bool(self.added or self.removed)
