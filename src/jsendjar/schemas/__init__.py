"""JSend document models (success/fail/error) emitted by ``ResponseEnvelope.render``."""

from .envelope import (
    Document,
    ErrorDocument,
    FailDocument,
    Status,
    SuccessDocument,
    build_document,
    coerce_status,
)

__all__ = [
    "Document",
    "ErrorDocument",
    "FailDocument",
    "Status",
    "SuccessDocument",
    "build_document",
    "coerce_status",
]
