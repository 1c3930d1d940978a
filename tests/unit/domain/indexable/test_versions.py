from seodex.domain.indexable.model.value import ObjectType
from seodex.domain.indexable.model.versions import (
    DEFAULT_INDEXABLE_BUILDER_VERSION,
    IndexableBuilderVersions,
)


def test_user_builder_has_its_own_version():
    versions = IndexableBuilderVersions()

    assert versions.get_latest_version_for_type(ObjectType.USER) == 2
    assert (
        versions.get_latest_version_for_type(ObjectType.TERM) == DEFAULT_INDEXABLE_BUILDER_VERSION
    )


def test_overrides_take_precedence():
    versions = IndexableBuilderVersions({ObjectType.USER: 5, ObjectType.POST: 3})

    assert versions.get_latest_version_for_type(ObjectType.USER) == 5
    assert versions.get_latest_version_for_type(ObjectType.POST) == 3
    assert (
        versions.get_latest_version_for_type(ObjectType.HOME_PAGE)
        == DEFAULT_INDEXABLE_BUILDER_VERSION
    )
