"""Exception hierarchy for jsendjar."""

from __future__ import annotations


class JarError(Exception):
    """Base exception for all jsendjar errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint


class EmptyProjectionError(JarError):
    """A requested-attribute projection produced nothing to attach."""

    def __init__(self, type_name: str, paths: tuple[str, ...] = ()) -> None:
        super().__init__(
            f"Tried to add an empty {type_name} object to the response data.",
            hint="pass at least one non-blank attribute path, or none to add every attribute",
        )
        self.type_name = type_name
        self.paths = paths


class UnknownStatusError(JarError):
    """A status string outside success/fail/error was supplied."""


class CollectionSourceError(JarError):
    """A collection source does not expose its items."""


class NotProjectableError(JarError, TypeError):
    """An add-operation received a value that is not a domain object."""
