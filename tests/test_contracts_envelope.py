import datetime as dt

import pytest
from pydantic import ValidationError

from jsendjar.errors import UnknownStatusError
from jsendjar.schemas.envelope import (
    ErrorDocument,
    FailDocument,
    Status,
    SuccessDocument,
    build_document,
    coerce_status,
)

from conftest import Author


def test_success_document_minimal():
    doc = SuccessDocument()
    assert doc.model_dump() == {"status": "success", "data": {}}


def test_fail_document_has_no_message_field():
    doc = FailDocument(data={"title": "required"})
    assert set(doc.model_dump()) == {"status", "data"}


def test_error_document_blank_message_is_kept():
    doc = ErrorDocument(message="")
    assert doc.model_dump() == {"status": "error", "message": "", "code": "", "data": {}}
    assert ErrorDocument(message="   ").message == "   "


def test_error_document_message_field_is_required():
    with pytest.raises(ValidationError):
        ErrorDocument()


def test_non_string_data_keys():
    doc = SuccessDocument(data={1: "x"})
    assert doc.model_dump() == {"status": "success", "data": {1: "x"}}
    assert doc.model_dump(mode="json") == {"status": "success", "data": {"1": "x"}}


def test_error_document_code_text():
    assert ErrorDocument(message="x", code=404).code == "404"
    assert ErrorDocument(message="x", code=None).code == ""


def test_build_document_dispatch():
    assert isinstance(build_document("success", {}), SuccessDocument)
    assert isinstance(build_document(Status.FAIL, {}), FailDocument)
    err = build_document("error", {"a": 1}, message="m", code="c")
    assert err.model_dump() == {"status": "error", "message": "m", "code": "c", "data": {"a": 1}}


def test_unknown_status():
    with pytest.raises(UnknownStatusError) as ei:
        coerce_status("maybe")
    assert "success" in ei.value.hint


def test_json_mode_serializes_nested_values():
    doc = SuccessDocument(data={"when": dt.date(2024, 1, 2), "author": Author(name="Wil")})
    assert doc.model_dump(mode="json")["data"] == {
        "when": "2024-01-02",
        "author": {"name": "Wil", "profile": None},
    }
