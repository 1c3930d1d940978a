"""Errors raised when an indexable must not be built."""

from seodex.domain.shared.error import NotEligibleError


class AuthorNotBuiltError(NotEligibleError):
    """An author indexable should not be built or saved."""

    @classmethod
    def author_archives_are_disabled(cls, user_id: int) -> "AuthorNotBuiltError":
        return cls(
            f"Indexable for author with id {user_id} is not being built, "
            "since author archives are disabled.",
            entity_id=user_id,
        )

    @classmethod
    def author_archives_are_not_indexed_for_users_without_posts(
        cls, user_id: int
    ) -> "AuthorNotBuiltError":
        return cls(
            f"Indexable for author with id {user_id} is not being built, "
            "since author archives are not indexed for users without posts.",
            entity_id=user_id,
        )
