"""Indexable mapper - converts between domain and persistence."""

from typing import Any

from seodex.domain.indexable.model.indexable import Indexable

_BOOKKEEPING = ("created_at", "updated_at")


def row_to_indexable(row: dict[str, Any]) -> Indexable:
    """Convert database row to Indexable."""
    return Indexable.model_validate({k: v for k, v in row.items() if k not in _BOOKKEEPING})


def indexable_to_dict(indexable: Indexable) -> dict[str, Any]:
    """Convert Indexable to database dict (without id and bookkeeping columns)."""
    data = indexable.model_dump(exclude={"id"})
    data["object_type"] = str(indexable.object_type)
    return data
