from seodex.domain.indexable.model.indexable import Indexable
from seodex.domain.indexable.model.value import AlternativeImage, ObjectTimestamps, ObjectType

__all__ = ["AlternativeImage", "Indexable", "ObjectTimestamps", "ObjectType"]
