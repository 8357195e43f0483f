"""jsendjar: build JSend (success/fail/error) response envelopes from domain objects."""

__version__ = "0.1.0"

from jsendjar.envelope import ResponseEnvelope
from jsendjar.errors import (
    CollectionSourceError,
    EmptyProjectionError,
    JarError,
    NotProjectableError,
    UnknownStatusError,
)
from jsendjar.models import ABSENT, ModelCollection, ObjectAdapter, Projectable, RowCollection
from jsendjar.projector import AttributeProjector, project
from jsendjar.schemas import Status

__all__ = [
    "__version__",
    "ABSENT",
    "AttributeProjector",
    "CollectionSourceError",
    "EmptyProjectionError",
    "JarError",
    "ModelCollection",
    "NotProjectableError",
    "ObjectAdapter",
    "Projectable",
    "ResponseEnvelope",
    "RowCollection",
    "Status",
    "UnknownStatusError",
    "project",
]
