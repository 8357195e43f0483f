from .capability import (
    ABSENT,
    ObjectAdapter,
    Projectable,
    as_projectable,
    is_collection_value,
    is_relation_value,
    type_name_of,
)
from .collections import CollectionSource, ModelCollection, RowCollection

__all__ = [
    "ABSENT",
    "ObjectAdapter",
    "Projectable",
    "as_projectable",
    "is_collection_value",
    "is_relation_value",
    "type_name_of",
    "CollectionSource",
    "ModelCollection",
    "RowCollection",
]
