"""Collection sources handed to ``ResponseEnvelope.add_collection``.

A source only has to expose ``get_items()`` and say whether its items are
typed domain objects (projected per object) or plain rows (copied as-is).
"""
from __future__ import annotations

from typing import Any, Iterable, List, Optional, Protocol, runtime_checkable


@runtime_checkable
class CollectionSource(Protocol):
    holds_models: bool

    def get_items(self) -> List[Any]:
        ...


class _ListCollection:
    holds_models = False

    def __init__(self, items: Iterable[Any], page: Optional[int] = None, page_size: Optional[int] = None):
        self._items = list(items)
        if page is not None and page < 1:
            raise ValueError("page must be >= 1")
        if page_size is not None and page_size < 1:
            raise ValueError("page_size must be >= 1")
        self.page = page
        self.page_size = page_size

    @property
    def total_count(self) -> int:
        return len(self._items)

    def get_items(self) -> List[Any]:
        """Items of the current page, or all items when unpaginated."""
        if self.page_size is None:
            return list(self._items)
        start = ((self.page or 1) - 1) * self.page_size
        return self._items[start:start + self.page_size]

    def __len__(self) -> int:
        return len(self.get_items())

    def __repr__(self) -> str:
        return f"{type(self).__name__}(total={self.total_count}, page={self.page}, page_size={self.page_size})"


class ModelCollection(_ListCollection):
    """Typed domain objects; each item goes through the projector."""

    holds_models = True


class RowCollection(_ListCollection):
    """Plain records (dicts, tuples); appended verbatim to the rows bucket."""

    holds_models = False
