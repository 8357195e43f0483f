from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Literal, Union

from pydantic import BaseModel, Field, field_validator

from jsendjar.errors import UnknownStatusError


class Status(str, Enum):
    SUCCESS = "success"
    FAIL = "fail"
    ERROR = "error"


def coerce_status(value: Status | str) -> Status:
    if isinstance(value, Status):
        return value
    try:
        return Status(value)
    except ValueError:
        raise UnknownStatusError(
            f"unknown response status {value!r}",
            hint="expected one of: " + ", ".join(s.value for s in Status),
        ) from None


class SuccessDocument(BaseModel):
    """All went well; ``data`` carries the payload (possibly empty)."""

    status: Literal["success"] = "success"
    data: Dict[Any, Any] = Field(default_factory=dict)


class FailDocument(BaseModel):
    """The submitted data or a precondition was rejected. No message/code."""

    status: Literal["fail"] = "fail"
    data: Dict[Any, Any] = Field(default_factory=dict)


class ErrorDocument(BaseModel):
    """Processing failed. ``message`` and ``code`` are stored as given, possibly empty."""

    status: Literal["error"] = "error"
    message: str
    code: str = ""
    data: Dict[Any, Any] = Field(default_factory=dict)

    @field_validator("code", mode="before")
    def _code_as_text(cls, v):
        # numeric codes (e.g. 404) are kept as their text form
        if v is None:
            return ""
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v


Document = Union[SuccessDocument, FailDocument, ErrorDocument]


def build_document(status: Status | str, data: Dict[Any, Any], message: str = "", code: str = "") -> Document:
    """Return the JSend document model for ``status``."""
    status = coerce_status(status)
    if status is Status.ERROR:
        return ErrorDocument(message=message, code=code, data=data)
    if status is Status.FAIL:
        return FailDocument(data=data)
    return SuccessDocument(data=data)
