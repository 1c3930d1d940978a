from seodex.domain.indexable.util.di.provider import IndexableProvider

__all__ = ["IndexableProvider"]
