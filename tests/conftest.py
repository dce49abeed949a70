"""Root test configuration: shared sample documents and environment isolation"""

import os
from datetime import datetime, timezone

import pytest

from docstore.crud.models import Author, Document


LATER = datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc)


def _make_doc(**fields) -> Document:
    data = {
        "title": "Some title",
        "content": "Some content 123",
        "author": Author(id="1", name="Ivan"),
        "created": LATER,
    }
    data.update(fields)
    return Document(**data)


@pytest.fixture(autouse=True)
def isolate_env(monkeypatch):
    """Drop any DOCSTORE_* variables from the developer's shell."""
    for name in list(os.environ):
        if name.startswith("DOCSTORE_"):
            monkeypatch.delenv(name)


@pytest.fixture(name="make_doc")
def make_doc_fixture():
    """Factory for Documents with sensible defaults; id is None unless given."""
    return _make_doc


@pytest.fixture(name="docs")
def docs_fixture() -> list[Document]:
    """Four documents with ids 1-4 and author ids 1, 1, 2, 1."""
    return [
        _make_doc(id="1", title="Some", created=datetime(2023, 1, 15, 13, 0, tzinfo=timezone.utc)),
        _make_doc(id="2", title="Title"),
        _make_doc(id="3", title="title 111", author=Author(id="2", name="Ann")),
        _make_doc(id="4", title="1", content="One twu three"),
    ]
