"""Object capability used by the projector.

Domain classes may implement ``Projectable`` directly. Anything else
(dataclasses, pydantic models, plain attribute bags) is wrapped in an
``ObjectAdapter`` by ``as_projectable``.
"""
from __future__ import annotations

import dataclasses
import datetime
import inspect
import numbers
import uuid
from collections.abc import Mapping, Sequence, Set
from enum import Enum
from pathlib import PurePath
from typing import Any, Dict, List, Optional, Protocol, runtime_checkable

from pydantic import BaseModel

from jsendjar.utils.logger_util import get_logger

logger = get_logger(__name__)


class _Absent:
    """Marker for a requested value that could not be resolved.

    Distinct from ``None``: a present attribute holding ``None`` projects as
    ``None``, an unresolved one projects as ``ABSENT``.
    """

    _instance: Optional["_Absent"] = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "ABSENT"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self):
        return (_Absent, ())


ABSENT = _Absent()


@runtime_checkable
class Projectable(Protocol):
    def type_name(self) -> str:
        ...

    def attribute_map(self) -> Dict[str, Any]:
        ...

    def has_property(self, name: str) -> bool:
        ...

    def read_property(self, name: str) -> Any:
        ...

    def is_collection(self, name: str) -> bool:
        ...


def is_collection_value(value: Any) -> bool:
    """True for multi-valued containers (lists, tuples, sets, mappings)."""
    if isinstance(value, (str, bytes, bytearray)):
        return False
    return isinstance(value, (Sequence, Set, Mapping))


# value types that are leaves even though some of them declare __slots__
SCALAR_TYPES = (numbers.Number, str, bytes, bytearray, uuid.UUID, PurePath, datetime.date, datetime.time, datetime.timedelta)


def _slot_names(cls: type) -> List[str]:
    names: List[str] = []
    for klass in cls.__mro__:
        slots = klass.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for name in slots:
            if name not in ("__dict__", "__weakref__") and name not in names:
                names.append(name)
    return names


def is_relation_value(value: Any) -> bool:
    """True when ``value`` is a single nested object that can be walked into."""
    if value is None or value is ABSENT or isinstance(value, (type, Enum, SCALAR_TYPES)) or is_collection_value(value):
        return False
    if isinstance(value, BaseModel) or dataclasses.is_dataclass(value):
        return True
    if isinstance(value, Projectable):
        return True
    if inspect.isroutine(value):
        return False
    return hasattr(value, "__dict__") or bool(_slot_names(type(value)))


class ObjectAdapter:
    """``Projectable`` view over an arbitrary Python object.

    Underscore-prefixed names and methods are never exposed as properties.
    A property whose getter raises is treated as missing. Each property is
    read at most once per adapter.
    """

    def __init__(self, obj: Any, type_name: str | None = None):
        self.obj = obj
        self._type_name = type_name
        self._values: Dict[str, Any] = {}

    def type_name(self) -> str:
        return self._type_name or type(self.obj).__name__

    def _field_names(self) -> List[str]:
        obj = self.obj
        if isinstance(obj, BaseModel):
            return list(type(obj).model_fields)
        if dataclasses.is_dataclass(obj):
            return [f.name for f in dataclasses.fields(obj)]
        names = [k for k in _slot_names(type(obj)) if hasattr(obj, k)]
        if hasattr(obj, "__dict__"):
            names += [k for k in vars(obj) if k not in names]
        return [k for k in names if not k.startswith("_")]

    def _lookup(self, name: str) -> Any:
        if name in self._values:
            return self._values[name]
        try:
            value = getattr(self.obj, name)
        except AttributeError:
            value = ABSENT
        except Exception:
            logger.debug("reading %r on %s failed", name, self.type_name(), exc_info=True)
            value = ABSENT
        if inspect.isroutine(value):
            value = ABSENT
        self._values[name] = value
        return value

    def attribute_map(self) -> Dict[str, Any]:
        # only directly-attached values; nested relations and collections stay out
        out: Dict[str, Any] = {}
        for name in self._field_names():
            value = self._lookup(name)
            if value is ABSENT or is_relation_value(value) or is_collection_value(value):
                continue
            out[name] = value
        return out

    def has_property(self, name: str) -> bool:
        if not name or name.startswith("_"):
            return False
        return self._lookup(name) is not ABSENT

    def read_property(self, name: str) -> Any:
        value = self._lookup(name)
        if value is ABSENT:
            raise AttributeError(f"{self.type_name()} has no readable property {name!r}")
        return value

    def is_collection(self, name: str) -> bool:
        return is_collection_value(self._lookup(name))

    def __repr__(self) -> str:
        return f"ObjectAdapter({self.obj!r})"


def as_projectable(obj: Any) -> Optional[Projectable]:
    """Return a ``Projectable`` for ``obj``, or None if it cannot be walked into."""
    if isinstance(obj, Projectable):
        return obj
    if not is_relation_value(obj):
        return None
    return ObjectAdapter(obj)


def type_name_of(obj: Any) -> str:
    projectable = as_projectable(obj)
    if projectable is None:
        return type(obj).__name__
    return projectable.type_name()
