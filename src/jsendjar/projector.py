"""Attribute projection: shape one object into a nested mapping of requested values.

A path is either a plain field name (``title``) or a chain of single-valued
relations ending in a field (``author.profile.name``). Collection-valued
relations are never walked; the leaf is then ``ABSENT``, as it is for any
other unresolved link. The nested keys are always created so consumers can
rely on the shape.
"""
from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional, Tuple

from jsendjar.errors import EmptyProjectionError, NotProjectableError
from jsendjar.models.capability import ABSENT, Projectable, as_projectable
from jsendjar.utils.logger_util import get_logger

logger = get_logger(__name__)

PATH_SEPARATOR = "."


def split_path(path: str, separator: str = PATH_SEPARATOR) -> Tuple[List[str], str]:
    """Split ``a.b.c`` into (["a", "b"], "c")."""
    parts = path.split(separator)
    return parts[:-1], parts[-1]


class AttributeProjector:
    def __init__(self, separator: str = PATH_SEPARATOR):
        self.separator = separator

    def project(self, obj: Any, paths: Iterable[str] = ()) -> Dict[str, Any]:
        """Return the projection of ``obj`` for ``paths``.

        With no paths the object's own attribute map is returned. Raises
        ``EmptyProjectionError`` if paths were given but none produced a key.
        """
        target = self._resolve(obj)
        paths = (paths,) if isinstance(paths, str) else tuple(paths)
        if not paths:
            return dict(target.attribute_map())

        result: Dict[str, Any] = {}
        for path in paths:
            if not path or not path.strip():
                logger.debug("skipping blank attribute path on %s", target.type_name())
                continue
            if self.separator in path:
                relations, final_key = split_path(path, self.separator)
                self._write_nested(result, relations, final_key, self._walk(target, relations, final_key))
            else:
                result[path] = self._read(target, path)

        if not result:
            raise EmptyProjectionError(target.type_name(), paths)
        return result

    def _resolve(self, obj: Any) -> Projectable:
        target = as_projectable(obj)
        if target is None:
            raise NotProjectableError(
                f"cannot project a {type(obj).__name__} value",
                hint="use add_data() for raw values",
            )
        return target

    def _read(self, target: Projectable, name: str) -> Any:
        if target.has_property(name):
            return target.read_property(name)
        logger.debug("%s has no attribute %r", target.type_name(), name)
        return ABSENT

    def _walk(self, root: Projectable, relations: List[str], final_key: str) -> Any:
        current: Optional[Projectable] = root
        for name in relations:
            # only 1:1 relations are traversable
            if not current.has_property(name) or current.is_collection(name):
                current = None
            else:
                value = current.read_property(name)
                current = as_projectable(value) if value is not None else None
            if current is None:
                logger.debug("cannot traverse %r on %s", name, root.type_name())
                return ABSENT
        return self._read(current, final_key)

    @staticmethod
    def _write_nested(result: Dict[str, Any], relations: List[str], final_key: str, value: Any) -> None:
        building = result
        for name in relations:
            node = building.get(name)
            if not isinstance(node, dict):
                # a flat value requested earlier under the same name is replaced
                node = {}
                building[name] = node
            building = node
        building[final_key] = value


default_projector = AttributeProjector()


def project(obj: Any, paths: Iterable[str] = ()) -> Dict[str, Any]:
    return default_projector.project(obj, paths)
