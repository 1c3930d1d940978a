"""Indexing reasons and the cache keys of the unindexed term counts."""

from enum import StrEnum


class IndexingReason(StrEnum):
    """Why the site needs a (partial) re-index."""

    PERMALINK_SETTINGS = "permalink_settings_changed"
    CATEGORY_BASE_PREFIX = "category_base_changed"
    TAG_BASE_PREFIX = "tag_base_changed"
    HOME_URL_OPTION = "home_url_option_changed"
    POST_TYPE_MADE_PUBLIC = "post_type_made_public"
    TAXONOMY_MADE_PUBLIC = "taxonomy_made_public"
    ATTACHMENTS_MADE_ENABLED = "attachments_made_enabled"


UNINDEXED_TERMS_COUNT = "wpseo_total_unindexed_terms"
UNINDEXED_TERMS_LIMITED_COUNT = f"{UNINDEXED_TERMS_COUNT}_limited"
