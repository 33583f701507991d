"""Unit tests for crud/documents.py"""

import pytest

from distillmd.crud.documents import create_document, get_document, list_documents, require_document


def test_create_and_get_document(session, doc):
    found = get_document(session, doc.id)
    assert found.title == "강의"
    assert found.tags == ["python"]
    assert found.blocks_migrated is False


def test_get_document_missing_returns_none(session):
    assert get_document(session, "missing") is None


def test_require_document_raises_for_missing(session):
    with pytest.raises(ValueError, match="not found"):
        require_document(session, "missing")


def test_list_documents(session, doc):
    other = create_document(session, "두 번째")
    assert {d.id for d in list_documents(session)} == {doc.id, other.id}
