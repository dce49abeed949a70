"""Unit tests for crud/models.py"""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from docstore.crud.models import Author, Document, SearchRequest


def test_author_is_immutable():
    author = Author(id="1", name="Ivan")
    with pytest.raises(ValidationError):
        author.name = "Ann"


@pytest.mark.parametrize("missing", ["title", "content", "author"])
def test_document_requires_fields(missing):
    """Constructing a Document without a required field fails fast."""
    data = {"title": "t", "content": "c", "author": Author(id="1")}
    del data[missing]
    with pytest.raises(ValidationError):
        Document(**data)


@pytest.mark.parametrize("doc_id,expected", [(None, True), ("", True), ("abc", False)])
def test_document_is_new(doc_id, expected):
    doc = Document(id=doc_id, title="t", content="c", author=Author(id="1"))
    assert doc.is_new is expected


def test_naive_created_becomes_utc():
    doc = Document(title="t", content="c", author=Author(id="1"), created=datetime(2024, 1, 1))
    assert doc.created.tzinfo == timezone.utc


def test_search_request_defaults_unconstrained():
    request = SearchRequest()
    assert request.title_prefixes is None
    assert request.contains_contents is None
    assert request.author_ids is None
    assert request.created_from is None
    assert request.created_to is None


def test_search_request_parses_iso_strings():
    request = SearchRequest(created_from="2024-01-15T13:00:00Z")
    assert request.created_from == datetime(2024, 1, 15, 13, 0, tzinfo=timezone.utc)


def test_naive_created_assignment_becomes_utc():
    """Assigning a naive datetime after construction is normalised too."""
    doc = Document(title="t", content="c", author=Author(id="1"))
    doc.created = datetime(2024, 1, 1)
    assert doc.created == datetime(2024, 1, 1, tzinfo=timezone.utc)


def test_search_request_bound_assignment_becomes_utc():
    request = SearchRequest()
    request.created_to = datetime(2024, 1, 1)
    assert request.created_to.tzinfo == timezone.utc
