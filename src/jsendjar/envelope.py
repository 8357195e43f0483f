"""JSend response envelope builder.

Collects domain objects and key/value data, then renders a JSend document:

    success -> {"status": "success", "data": {...}}
    fail    -> {"status": "fail", "data": {...}}
    error   -> {"status": "error", "message": "...", "code": "...", "data": {...}}

Objects are stored in buckets keyed by their type name::

    env = ResponseEnvelope()
    env.add_object(post, ["title", "author.name"])
    env.render()
    # {"status": "success", "data": {"Post": [{"title": "A", "author": {"name": "Wil"}}]}}

An envelope is meant for one request at a time; it does no locking.
"""
from __future__ import annotations

from typing import Any, Dict, Iterable, Optional

from jsendjar.config import get_settings
from jsendjar.errors import CollectionSourceError
from jsendjar.models.capability import ABSENT, type_name_of
from jsendjar.projector import AttributeProjector, default_projector
from jsendjar.schemas.envelope import Document, Status, build_document
from jsendjar.utils.logger_util import get_logger

logger = get_logger(__name__)


def strip_absent(value: Any) -> Any:
    """Replace ``ABSENT`` leaves with ``None`` in nested dicts and lists."""
    if value is ABSENT:
        return None
    if isinstance(value, dict):
        return {k: strip_absent(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [strip_absent(v) for v in value]
    return value


class ResponseEnvelope:
    def __init__(self, projector: Optional[AttributeProjector] = None, rows_key: Optional[str] = None):
        self.projector = projector or default_projector
        self.rows_key = rows_key or get_settings().rows_key
        self._status = Status.SUCCESS
        self._message = ""
        self._code = ""
        self._data: Dict[Any, Any] = {}

    # -- status -----------------------------------------------------------

    @property
    def status(self) -> Status:
        return self._status

    @property
    def message(self) -> str:
        return self._message

    @property
    def code(self) -> str:
        return self._code

    def mark_error(self, message: str, code: str = "") -> "ResponseEnvelope":
        """Switch to ``error``. Calling again overwrites message and code."""
        self._status = Status.ERROR
        self._message = "" if message is None else str(message)
        self._code = "" if code is None else str(code)
        logger.debug("envelope marked error: %s (code=%r)", self._message, self._code)
        return self

    def mark_fail(self) -> "ResponseEnvelope":
        self._status = Status.FAIL
        logger.debug("envelope marked fail")
        return self

    def reset(self) -> "ResponseEnvelope":
        """Back to an empty ``success`` envelope, ready for the next response."""
        self._status = Status.SUCCESS
        self._message = ""
        self._code = ""
        self._data = {}
        return self

    def is_error(self) -> bool:
        return self._status is Status.ERROR

    def is_fail(self) -> bool:
        return self._status is Status.FAIL

    def is_success(self) -> bool:
        return self._status is Status.SUCCESS

    # -- data -------------------------------------------------------------

    def add_object(self, obj: Any, paths: Iterable[str] = ()) -> "ResponseEnvelope":
        """Project ``obj`` and append it to the bucket for its type name.

        Without ``paths`` every directly-attached attribute is included. Dotted
        paths follow 1:1 relations (``relation.attribute``,
        ``relation.relation.attribute``). Nothing is stored if projection
        raises.
        """
        projection = self.projector.project(obj, paths)
        key = type_name_of(obj)
        self._data.setdefault(key, []).append(projection)
        return self

    def add_objects(self, objects: Iterable[Any], paths: Iterable[str] = ()) -> "ResponseEnvelope":
        """Add each object in order; objects added before a failure stay added."""
        paths = (paths,) if isinstance(paths, str) else tuple(paths)
        for obj in objects:
            self.add_object(obj, paths)
        return self

    def add_collection(self, source: Any, paths: Iterable[str] = ()) -> "ResponseEnvelope":
        """Add the current items of a collection source.

        Typed sources (``holds_models``) go through ``add_objects``. Plain row
        sources are concatenated onto the rows bucket without projection.
        """
        get_items = getattr(source, "get_items", None)
        if not callable(get_items):
            raise CollectionSourceError(
                f"{type(source).__name__} does not expose get_items()",
                hint="wrap plain lists in ModelCollection or RowCollection",
            )
        items = list(get_items())
        if getattr(source, "holds_models", False):
            return self.add_objects(items, paths)

        logger.debug("appending %d raw rows under %r", len(items), self.rows_key)
        rows = self._data.get(self.rows_key)
        if isinstance(rows, (list, tuple)):
            self._data[self.rows_key] = list(rows) + items
        else:
            self._data[self.rows_key] = items
        return self

    def add_data(self, key: Any, value: Any) -> "ResponseEnvelope":
        self._data[key] = value
        return self

    def remove_data(self, key: Any) -> "ResponseEnvelope":
        self._data.pop(key, None)
        return self

    def get_data(self) -> Dict[Any, Any]:
        return self._data

    # -- output -----------------------------------------------------------

    def document(self) -> Document:
        return build_document(self._status, strip_absent(self._data), self._message, self._code)

    def render(self) -> Dict[Any, Any]:
        """The JSend document as a plain dict (message/code only for errors)."""
        return self.document().model_dump()

    def to_json(self) -> str:
        return self.document().model_dump_json()

    def send(self, status_code: int = 200):
        """Build the HTTP response for this envelope (see ``jsendjar.transport``)."""
        from jsendjar.transport import send

        return send(self, status_code=status_code)

    def __repr__(self) -> str:
        return f"ResponseEnvelope(status={self._status.value!r}, keys={list(self._data)!r})"
